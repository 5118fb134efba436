import pytest
from PIL import Image

from xshooting.config import TextureConfig, TextureConfigs
from xshooting.ids import TextureType
from xshooting.texture import GameTexture, TextureError, TextureStore, slice_image

CELL = 4
ACROSS = 3
DOWN = 2


def _colour(index):
    return (index * 20 + 10, 255 - index * 30, index * 7, 255)


@pytest.fixture
def sheet(tmp_path):
    image = Image.new("RGBA", (CELL * ACROSS, CELL * DOWN))
    for y in range(DOWN):
        for x in range(ACROSS):
            block = Image.new("RGBA", (CELL, CELL), _colour(y * ACROSS + x))
            image.paste(block, (x * CELL, y * CELL))
    path = tmp_path / "sheet.png"
    image.save(path)
    return path


def _config(start=0, count=ACROSS * DOWN):
    return TextureConfig(CELL, CELL, ACROSS, DOWN, start, count)


def test_frames_are_numbered_across_then_down(sheet):
    frames = slice_image(sheet, _config())
    assert len(frames) == ACROSS * DOWN
    for index, frame in enumerate(frames):
        assert frame.size == (CELL, CELL)
        assert frame.getpixel((1, 1)) == _colour(index)


def test_selected_range_starts_at_start_index(sheet):
    frames = slice_image(sheet, _config(start=2, count=3))
    assert [f.getpixel((0, 0)) for f in frames] == [_colour(i) for i in (2, 3, 4)]


def test_count_larger_than_sheet_is_rejected(sheet):
    with pytest.raises(TextureError):
        slice_image(sheet, _config(count=ACROSS * DOWN + 1))


def test_range_past_the_end_is_rejected(sheet):
    with pytest.raises(TextureError):
        slice_image(sheet, _config(start=4, count=3))


def test_sheet_too_small_is_rejected(sheet):
    with pytest.raises(TextureError):
        slice_image(sheet, TextureConfig(CELL, CELL, ACROSS + 1, DOWN, 0, 1))


def test_missing_file_is_rejected(tmp_path):
    with pytest.raises(TextureError):
        slice_image(tmp_path / "absent.png", _config())


@pytest.mark.parametrize(
    "config",
    [TextureConfigs.PLAYER, TextureConfigs.TORKAN, TextureConfigs.MAP, TextureConfigs.SPFLAG],
)
def test_config_layouts_fit_their_sheets(tmp_path, config):
    size = (config.width * config.rows, config.height * config.columns)
    path = tmp_path / "full.png"
    Image.new("RGBA", size, (1, 2, 3, 255)).save(path)
    frames = slice_image(path, config)
    assert len(frames) == config.index_count
    assert all(frame.size == (config.width, config.height) for frame in frames)


def test_game_texture_frame_access(sheet):
    texture = GameTexture(sheet, _config(start=1, count=4))
    assert len(texture) == 4
    assert texture.config == _config(start=1, count=4)
    assert texture.frame(0).getpixel((0, 0)) == _colour(1)
    assert texture.frame(3).getpixel((0, 0)) == _colour(4)
    assert list(texture) == list(texture.frames)


@pytest.mark.parametrize("index", [-1, 4])
def test_game_texture_bad_index(sheet, index):
    texture = GameTexture(sheet, _config(start=1, count=4))
    with pytest.raises(IndexError):
        texture.frame(index)


def test_frames_in_range_returns_copies(sheet):
    texture = GameTexture(sheet, _config())
    copies = texture.frames_in_range(1, 2)
    assert [c.getpixel((0, 0)) for c in copies] == [_colour(1), _colour(2)]
    copies[0].putpixel((0, 0), (0, 0, 0, 0))
    assert texture.frame(1).getpixel((0, 0)) == _colour(1)


def test_frames_in_range_is_cut_at_the_end(sheet):
    texture = GameTexture(sheet, _config())
    assert len(texture.frames_in_range(4, 10)) == 2
    assert texture.frames_in_range(0) == []


def test_frames_in_range_bad_start(sheet):
    texture = GameTexture(sheet, _config())
    with pytest.raises(IndexError):
        texture.frames_in_range(len(texture), 1)


def test_store_paths_and_configs(sheet):
    store = TextureStore()
    store.set_path(TextureType.MAP, sheet)
    store.set_config(TextureType.MAP, _config())
    assert store.path(TextureType.MAP) == str(sheet)
    assert store.config(TextureType.MAP) == _config()
    with pytest.raises(KeyError):
        store.path(TextureType.TITLE)
    with pytest.raises(KeyError):
        store.config(TextureType.TITLE)


def test_store_create_and_get(sheet):
    store = TextureStore()
    assert store.get(TextureType.TOROID) is None
    texture = store.create(TextureType.TOROID, sheet, _config(count=2))
    assert store.get(TextureType.TOROID) is texture
    assert dict(store.textures) == {TextureType.TOROID: texture}


def test_store_create_twice_is_rejected(sheet):
    store = TextureStore()
    first = store.create(TextureType.TOROID, sheet, _config(count=2))
    with pytest.raises(TextureError):
        store.create(TextureType.TOROID, sheet, _config(count=1))
    assert store.get(TextureType.TOROID) is first


def test_store_failed_create_keeps_nothing(tmp_path):
    store = TextureStore()
    with pytest.raises(TextureError):
        store.create(TextureType.MAP, tmp_path / "absent.png", _config())
    assert store.get(TextureType.MAP) is None