"""Loading the game's sprite sheets and stage map files from a resource tree."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Mapping, Union

from xshooting.config import TextureConfig, TextureConfigs
from xshooting.csvdata import CsvDataError, CsvMapFiles, read_csv_ints
from xshooting.ids import TextureType
from xshooting.texture import GameTexture, TextureError, TextureStore

StrPath = Union[str, "PathLike[str]"]

TEXTURE_FILES: tuple[tuple[TextureType, str], ...] = (
    (TextureType.TITLE, "res/Title.png"),
    (TextureType.PLAYER, "res/Player_Sight.png"),
    (TextureType.BULLET, "res/Bullet.png"),
    (TextureType.BOSS, "res/Boss.png"),
    (TextureType.BOSS_PARTS, "res/Algo_Core.png"),
    (TextureType.BOMBER, "res/Bomber.png"),
    (TextureType.MAP, "res/MapChip.png"),
    (TextureType.AIR_ENEMY, "res/AirEnemy.png"),
    (TextureType.GROUND_ENEMY, "res/GroundEnemy.png"),
)

DEFAULT_FRONT_CSV = "res/Map/Stage1_Front.csv"
DEFAULT_BACK_CSV = "res/Map/Stage1_Back.csv"

_PLAYER_SLICES: tuple[tuple[TextureType, TextureConfig], ...] = (
    (TextureType.PLAYER, TextureConfigs.PLAYER),
    (TextureType.TARGET_SIGHT, TextureConfigs.TARGET_SIGHT),
    (TextureType.BULLET, TextureConfigs.BULLET),
    (TextureType.BOM, TextureConfigs.BOM),
    (TextureType.PLAYER_BOMBER, TextureConfigs.COMMON_BOMBER),
    (TextureType.BOM_BOMBER, TextureConfigs.COMMON_BOMBER),
)

_TITLE_SLICES = ((TextureType.TITLE, TextureConfigs.TITLE),)

_MAP_SLICES = ((TextureType.MAP, TextureConfigs.MAP),)

_GROUND_ENEMY_SLICES: tuple[tuple[TextureType, TextureConfig], ...] = (
    (TextureType.GROUND_ENEMY_BOMBER, TextureConfigs.COMMON_BOMBER),
    (TextureType.BARRA, TextureConfigs.BARRA),
    (TextureType.ZOLBAK, TextureConfigs.ZOLBAK),
    (TextureType.LOGRAM, TextureConfigs.LOGRAM),
    (TextureType.DOMOGRAM, TextureConfigs.DOMOGRAM),
    (TextureType.DEROTA, TextureConfigs.DEROTA),
    (TextureType.GROBDA, TextureConfigs.GROBDA),
    (TextureType.BOZALOGRAM, TextureConfigs.BOZALOGRAM),
    (TextureType.SOL, TextureConfigs.SOL),
    (TextureType.GARUBARRA, TextureConfigs.GARUBARRA),
    (TextureType.GARUDEROTA, TextureConfigs.GARUDEROTA),
    (TextureType.BOSS, TextureConfigs.BOSS),
    (TextureType.ALGO, TextureConfigs.ALGO),
    (TextureType.AD_CORE, TextureConfigs.AD_CORE),
    (TextureType.SPFLAG, TextureConfigs.SPFLAG),
)

_AIR_ENEMY_SLICES: tuple[tuple[TextureType, TextureConfig], ...] = (
    (TextureType.AIR_ENEMY_BOMBER, TextureConfigs.AIR_ENEMY_BOMBER),
    (TextureType.TOROID, TextureConfigs.TOROID),
    (TextureType.TORKAN, TextureConfigs.TORKAN),
    (TextureType.GIDDOSPARIO, TextureConfigs.GIDDOSPARIO),
    (TextureType.ZOSHI, TextureConfigs.ZOSHI),
    (TextureType.JARA, TextureConfigs.JARA),
    (TextureType.KAPI, TextureConfigs.KAPI),
    (TextureType.TERRAZI, TextureConfigs.TERRAZI),
    (TextureType.ZAKATO, TextureConfigs.ZAKATO),
    (TextureType.BRAGZAKATO, TextureConfigs.BRAGZAKATO),
    (TextureType.GARUZAKATO, TextureConfigs.GARUZAKATO),
    (TextureType.BACURA, TextureConfigs.BACURA),
)

ALL_SLICES: tuple[tuple[TextureType, TextureConfig], ...] = (
    _PLAYER_SLICES + _TITLE_SLICES + _MAP_SLICES + _GROUND_ENEMY_SLICES + _AIR_ENEMY_SLICES
)


class ResourceError(Exception):
    """A texture or map resource cannot be found, loaded or sliced."""


def texture_source(texture_type: TextureType) -> TextureType:
    """The texture type whose sheet holds the frames of ``texture_type``.

    Several texture types share one sheet; the sheet's path is recorded only
    under the first type of the group.
    """
    t = TextureType(texture_type)
    if TextureType.PLAYER <= t <= TextureType.TARGET_SIGHT:
        return TextureType.PLAYER
    if TextureType.BULLET <= t <= TextureType.BOM:
        return TextureType.BULLET
    if TextureType.BOMBER <= t <= TextureType.GROUND_ENEMY_BOMBER:
        return TextureType.BOMBER
    if TextureType.AIR_ENEMY <= t <= TextureType.BACURA:
        return TextureType.AIR_ENEMY
    if TextureType.GROUND_ENEMY <= t <= TextureType.GARUDEROTA or t is TextureType.SPFLAG:
        return TextureType.GROUND_ENEMY
    if TextureType.ALGO <= t <= TextureType.AD_CORE:
        return TextureType.BOSS_PARTS
    return t


class ResourceManager:
    """Owns the game's textures and the stage map files, rooted at a directory."""

    def __init__(self, root: StrPath = ".") -> None:
        self.root = Path(root)
        self._store = TextureStore()
        self._csv = CsvMapFiles()

    def _resolve(self, path: StrPath) -> Path:
        return self.root / path

    @property
    def textures(self) -> Mapping[TextureType, GameTexture]:
        """Every sliced texture by type."""
        return self._store.textures

    def load_texture_path(self, texture_type: TextureType, path: StrPath) -> None:
        """Record the sheet file of ``texture_type``; the file must exist."""
        full = self._resolve(path)
        if not full.is_file():
            raise ResourceError(f"texture file not found at path: {full}")
        self._store.set_path(texture_type, full)

    def slice_texture(self, texture_type: TextureType, config: TextureConfig) -> GameTexture:
        """Cut the sheet that holds ``texture_type`` and keep the frames."""
        source = texture_source(texture_type)
        try:
            path = self._store.path(source)
        except KeyError:
            raise ResourceError(
                f"no texture path recorded for {source.name}"
            ) from None
        try:
            return self._store.create(texture_type, path, config)
        except TextureError as exc:
            raise ResourceError(f"texture not created: {texture_type.name}") from exc

    def load_all(self) -> None:
        """Record every sheet, slice every texture and load the first stage's map."""
        for texture_type, path in TEXTURE_FILES:
            self.load_texture_path(texture_type, path)
        for texture_type, config in ALL_SLICES:
            self.slice_texture(texture_type, config)
        self.load_map_csv(DEFAULT_FRONT_CSV, DEFAULT_BACK_CSV)

    def get_texture(self, texture_type: TextureType) -> GameTexture:
        """The sliced texture of ``texture_type``."""
        texture = self._store.get(texture_type)
        if texture is None:
            raise ResourceError(f"texture not loaded: {TextureType(texture_type).name}")
        return texture

    def load_map_csv(self, front_file: StrPath, back_file: StrPath) -> None:
        """Record the drawn map file and the back layer file of a stage."""
        try:
            self._csv.load(self._resolve(front_file), self._resolve(back_file))
        except CsvDataError as exc:
            raise ResourceError(str(exc)) from exc

    def draw_map_data(self) -> list[int]:
        """Map chip numbers of the drawn map, last cell first."""
        if not self._csv.map_data:
            raise ResourceError("no map file loaded")
        try:
            data = read_csv_ints(self._csv.map_data)
        except CsvDataError as exc:
            raise ResourceError(str(exc)) from exc
        return data[::-1]

    def ground_enemy_layout_csv(self) -> str:
        """Path of the file that places the ground enemies."""
        return self._csv.enemy_placement