from pathlib import Path

import pytest
from PIL import Image

from xshooting.config import TextureConfigs
from xshooting.ids import TextureType
from xshooting.resources import (
    ALL_SLICES,
    DEFAULT_BACK_CSV,
    DEFAULT_FRONT_CSV,
    TEXTURE_FILES,
    ResourceError,
    ResourceManager,
    texture_source,
)

SHEET_SIZES = {
    "res/Title.png": (198, 58),
    "res/Player_Sight.png": (192, 64),
    "res/Bullet.png": (24, 8),
    "res/Boss.png": (352, 352),
    "res/Algo_Core.png": (128, 64),
    "res/Bomber.png": (288, 96),
    "res/MapChip.png": (384, 320),
    "res/AirEnemy.png": (384, 384),
    "res/GroundEnemy.png": (256, 448),
}


def _write_sheet(path: Path, size):
    path.parent.mkdir(parents=True, exist_ok=True)
    image = Image.new("RGBA", size, (0, 0, 0, 255))
    for x in range(0, size[0], 8):
        for y in range(0, size[1], 8):
            image.putpixel((x, y), (x % 256, y % 256, (x + y) % 256, 255))
    image.save(path)


@pytest.fixture
def resource_root(tmp_path):
    for rel, size in SHEET_SIZES.items():
        _write_sheet(tmp_path / rel, size)
    front = tmp_path / DEFAULT_FRONT_CSV
    front.parent.mkdir(parents=True, exist_ok=True)
    front.write_text("1,2,3\n4,5,6\n", encoding="utf-8")
    (tmp_path / DEFAULT_BACK_CSV).write_text("0,0\n", encoding="utf-8")
    return tmp_path


@pytest.mark.parametrize(
    "texture_type, expected",
    [
        (TextureType.TARGET_SIGHT, TextureType.PLAYER),
        (TextureType.BOM, TextureType.BULLET),
        (TextureType.AIR_ENEMY_BOMBER, TextureType.BOMBER),
        (TextureType.BACURA, TextureType.AIR_ENEMY),
        (TextureType.GARUDEROTA, TextureType.GROUND_ENEMY),
        (TextureType.SPFLAG, TextureType.GROUND_ENEMY),
        (TextureType.ALGO, TextureType.BOSS_PARTS),
        (TextureType.AD_CORE, TextureType.BOSS_PARTS),
        (TextureType.BOSS, TextureType.BOSS),
        (TextureType.MAP, TextureType.MAP),
        (TextureType.TITLE, TextureType.TITLE),
    ],
)
def test_texture_source(texture_type, expected):
    assert texture_source(texture_type) is expected


def test_texture_source_points_at_recorded_sheets():
    recorded = {texture_type for texture_type, _ in TEXTURE_FILES}
    for texture_type, _ in ALL_SLICES:
        assert texture_source(texture_type) in recorded


def test_load_all_slices_every_texture(resource_root):
    manager = ResourceManager(resource_root)
    manager.load_all()
    assert set(manager.textures) == {t for t, _ in ALL_SLICES}
    for texture_type, config in ALL_SLICES:
        texture = manager.get_texture(texture_type)
        assert len(texture) == config.index_count
        assert texture.frame(0).size == (config.width, config.height)


def test_player_frames_come_from_start_index(resource_root):
    manager = ResourceManager(resource_root)
    manager.load_all()
    config = TextureConfigs.PLAYER
    left = config.start_index * config.width
    with Image.open(resource_root / "res/Player_Sight.png") as sheet:
        expected = sheet.convert("RGBA").crop(
            (left, 0, left + config.width, config.height)
        )
    assert manager.get_texture(TextureType.PLAYER).frame(0).tobytes() == expected.tobytes()


def test_draw_map_data_is_reversed(resource_root):
    manager = ResourceManager(resource_root)
    manager.load_all()
    assert manager.draw_map_data() == [6, 5, 4, 3, 2, 1]


def test_ground_enemy_layout_csv_is_back_file(resource_root):
    manager = ResourceManager(resource_root)
    manager.load_all()
    assert Path(manager.ground_enemy_layout_csv()) == resource_root / DEFAULT_BACK_CSV


def test_load_map_csv_missing_file(resource_root):
    manager = ResourceManager(resource_root)
    with pytest.raises(ResourceError):
        manager.load_map_csv("res/Map/none.csv", DEFAULT_BACK_CSV)


def test_draw_map_data_without_map(resource_root):
    manager = ResourceManager(resource_root)
    with pytest.raises(ResourceError):
        manager.draw_map_data()


def test_draw_map_data_with_bad_cell(resource_root):
    (resource_root / DEFAULT_FRONT_CSV).write_text("1,x\n", encoding="utf-8")
    manager = ResourceManager(resource_root)
    manager.load_map_csv(DEFAULT_FRONT_CSV, DEFAULT_BACK_CSV)
    with pytest.raises(ResourceError):
        manager.draw_map_data()


def test_load_texture_path_missing_file(tmp_path):
    manager = ResourceManager(tmp_path)
    with pytest.raises(ResourceError):
        manager.load_texture_path(TextureType.TITLE, "res/Title.png")


def test_load_all_fails_on_missing_sheet(resource_root):
    (resource_root / "res/Bullet.png").unlink()
    manager = ResourceManager(resource_root)
    with pytest.raises(ResourceError):
        manager.load_all()


def test_slice_without_path(resource_root):
    manager = ResourceManager(resource_root)
    with pytest.raises(ResourceError):
        manager.slice_texture(TextureType.TOROID, TextureConfigs.TOROID)


def test_slice_twice(resource_root):
    manager = ResourceManager(resource_root)
    manager.load_texture_path(TextureType.TITLE, "res/Title.png")
    texture = manager.slice_texture(TextureType.TITLE, TextureConfigs.TITLE)
    assert manager.get_texture(TextureType.TITLE) is texture
    with pytest.raises(ResourceError):
        manager.slice_texture(TextureType.TITLE, TextureConfigs.TITLE)


def test_slice_uses_shared_sheet(resource_root):
    manager = ResourceManager(resource_root)
    manager.load_texture_path(TextureType.AIR_ENEMY, "res/AirEnemy.png")
    texture = manager.slice_texture(TextureType.TORKAN, TextureConfigs.TORKAN)
    assert len(texture) == TextureConfigs.TORKAN.index_count


def test_slice_too_small_sheet(resource_root):
    _write_sheet(resource_root / "res/Title.png", (10, 10))
    manager = ResourceManager(resource_root)
    manager.load_texture_path(TextureType.TITLE, "res/Title.png")
    with pytest.raises(ResourceError):
        manager.slice_texture(TextureType.TITLE, TextureConfigs.TITLE)


def test_get_texture_not_loaded(resource_root):
    manager = ResourceManager(resource_root)
    with pytest.raises(ResourceError):
        manager.get_texture(TextureType.MAP)