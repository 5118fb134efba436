"""Game-wide constants, sprite sheet layouts, enemy statistics and shared state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, TypeVar

# Application switches.
TEST_MODE = True
DEBUG_ON = True
STAGE_LOOP = False

# Screen layout.
PIXEL_SCALE_W = 1
PIXEL_SCALE_H = 1
WINDOW_WIDTH = 200 * 3
WINDOW_HEIGHT = 260 * 3
SCREEN_WIDTH = WINDOW_WIDTH // PIXEL_SCALE_W
SCREEN_HEIGHT = WINDOW_HEIGHT // PIXEL_SCALE_H
CENTER_X = SCREEN_WIDTH // 2
CENTER_Y = SCREEN_HEIGHT // 2
WORD_WIDTH = 8
HALF_WORD_WIDTH = 4
WORD_HEIGHT = 15

# The visible area as (left, top, right, bottom).
WINDOW_VIEW = (0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)

FRAME_COUNT_VALUE = 1
AIR_ENEMY_MAX_LEVEL = 64
MAX_LEVEL = 64
BOMBER_PIC_SIZE = 47

# Map layout.
MAP_WIDTH = SCREEN_WIDTH // 31
MAP_HEIGHT = SCREEN_HEIGHT // 31
CHIP_SIZE = 32
SCROLL_SPEED = 1
MAX_STAGE = 3

# Player.
PLAYER_SPEED = 5
PLAYER_HITBOX_SIZE = 16
PLAYER_PIC_SIZE = 32
SIGHT_HITBOX_SIZE = 32
SIGHT_PIC_SIZE = 32
PLAYER_MAX_SHOT = 3
SHOT_SPEED = 20
SHOT_SPEED_HOLLOW = 8
SHOT_HITBOX_WIDTH = 32
SHOT_HITBOX_HEIGHT = 16
SHOT_PIC_SIZE = 8
BOM_SPEED = 5
BOM_RANGE = 100
BOMBER_HITBOX_SIZE = 24
BOM_PIC_SIZE = 8

# Enemies.
AIR_ENEMY_PIC_LINE_WIDE = 8
AIR_ENEMY_MAX = 20
GROUND_ENEMY_PIC_LINE_WIDE = 4
GROUND_ENEMY_MAX = 20
ENEMY_SHOT_HITBOX_SIZE = 8
ENEMY_SHOT_PIC_SIZE = 8
ENEMY_SHOT_SPEED = 4
ENEMY_SHOT_MAX = 17

# Enemy sprite slice sizes.
S_SIZE_SLICE_WIDTH = 32
S_SIZE_SLICE_HEIGHT = 32
M_SIZE_SLICE_WIDTH = 48
M_SIZE_SLICE_HEIGHT = 48
L_SIZE_SLICE_WIDTH = 64
L_SIZE_SLICE_HEIGHT = 64
AIR_ENEMY_SLICE_ROWS_MAX = 8
GROUND_ENEMY_SLICE_ROWS_MAX = 4
SLICE_COLUMNS = 1


class SceneID(IntEnum):
    """Identifies the active screen of the application."""

    TITLE = 1
    GAME = 2
    RESULT = 3
    OPTION = 4
    APP_EXIT = 999


@dataclass(frozen=True)
class TextureConfig:
    """How a sprite sheet is cut into frames and which frames are kept."""

    width: int
    height: int
    rows: int
    columns: int
    start_index: int
    index_count: int

    def slice_count(self) -> int:
        """Number of frames the sheet is cut into."""
        return self.rows * self.columns


class TextureConfigs:
    """Slice layouts of the game's sprite sheets."""

    TITLE = TextureConfig(198, 58, 1, 1, 0, 1)
    PLAYER = TextureConfig(32, 32, 6, 2, 2, 3)
    TARGET_SIGHT = TextureConfig(32, 32, 6, 2, 0, 2)
    BULLET = TextureConfig(8, 8, 3, 1, 0, 2)
    BOM = TextureConfig(8, 8, 3, 1, 2, 1)
    BOSS = TextureConfig(32, 32, 11, 11, 0, 11 * 11)
    BOSS_ALGO = TextureConfig(32, 32, 5, 1, 0, 1)
    COMMON_BOMBER = TextureConfig(48, 48, 6, 1, 0, 6)
    AIR_ENEMY_BOMBER = TextureConfig(48, 48, 6, 2, 6, 6)
    MAP = TextureConfig(32, 32, 12, 10, 0, 12 * 10)

    TOROID = TextureConfig(32, 32, 8, 1, 0, 8)
    TORKAN = TextureConfig(32, 32, 8, 2, 8, 7)
    GIDDOSPARIO = TextureConfig(32, 32, 8, 3, 16, 8)
    ZOSHI = TextureConfig(32, 32, 8, 4, 24, 4)
    JARA = TextureConfig(32, 32, 8, 5, 32, 6)
    KAPI = TextureConfig(32, 32, 8, 6, 40, 7)
    TERRAZI = TextureConfig(32, 32, 8, 7, 48, 7)
    ZAKATO = TextureConfig(32, 32, 8, 8, 56, 1)
    BRAGZAKATO = TextureConfig(32, 32, 8, 9, 64, 1)
    GARUZAKATO = TextureConfig(32, 32, 8, 10, 72, 1)
    BACURA = TextureConfig(48, 48, 8, 8, 56, 8)

    BARRA = TextureConfig(32, 32, 4, 1, 0, 2)
    ZOLBAK = TextureConfig(32, 32, 4, 2, 4, 4)
    LOGRAM = TextureConfig(32, 32, 4, 3, 8, 4)
    DOMOGRAM = TextureConfig(32, 32, 4, 4, 12, 4)
    DEROTA = TextureConfig(32, 32, 4, 5, 16, 4)
    GROBDA = TextureConfig(32, 32, 4, 6, 20, 4)
    BOZALOGRAM = TextureConfig(32, 32, 4, 7, 24, 1)
    SOL = TextureConfig(32, 32, 4, 8, 28, 4)
    GARUBARRA = TextureConfig(64, 64, 4, 6, 20, 1)
    GARUDEROTA = TextureConfig(64, 64, 4, 7, 24, 4)
    ALGO = TextureConfig(32, 32, 4, 1, 0, 4)
    AD_CORE = TextureConfig(32, 32, 4, 2, 4, 1)
    SPFLAG = TextureConfig(32, 32, 4, 1, 2, 1)


@dataclass(frozen=True)
class EnemyStatus:
    """Fixed statistics of one kind of enemy."""

    number: int
    hitbox_size: int
    pic_size: int
    variant: int
    anim_sum: int
    points: int
    speed: float
    acceleration: float


_STATUSES = (
    EnemyStatus(-1, 0, 0, 0, 0, 0, 0.0, 0.0),  # dummy
    EnemyStatus(0, 32, 32, 0, 8, 30, 2.0, 0.04),  # toroid
    EnemyStatus(1, 32, 32, 0, 6, 50, 4.0, 0.0),  # torkan
    EnemyStatus(2, 16, 32, 0, 8, 10, 7.0, 0.0),  # giddospario
    EnemyStatus(3, 32, 32, 0, 4, 70, 3.0, 0.0),  # zoshi
    EnemyStatus(4, 32, 32, 0, 6, 150, 4.0, 0.06),  # jara
    EnemyStatus(5, 32, 32, 0, 7, 300, 4.0, 0.15),  # kapi
    EnemyStatus(6, 32, 32, 0, 7, 700, 5.0, 0.08),  # terrazi
    EnemyStatus(7, 16, 32, 0, 1, 100, 3.0, 0.0),  # zakato
    EnemyStatus(8, 16, 32, 0, 1, 600, 3.0, 0.0),  # bragzakato
    EnemyStatus(9, 16, 32, 0, 1, 1000, 3.0, 0.0),  # garuzakato
    EnemyStatus(10, 48, 48, 0, 8, 0, 2.0, 0.0),  # bacura
    EnemyStatus(50, 32, 32, 0, 1, 100, 0.0, 0.0),  # barra
    EnemyStatus(51, 32, 32, 0, 4, 200, 0.0, 0.0),  # zolbak
    EnemyStatus(52, 32, 32, 0, 4, 300, 0.0, 0.0),  # logram
    EnemyStatus(53, 32, 32, 0, 4, 800, 0.75, 0.5),  # domogram
    EnemyStatus(54, 32, 32, 0, 4, 200, 0.0, 0.0),  # derota
    EnemyStatus(55, 32, 32, 0, 4, 200, 0.5, 0.5),  # grobda
    EnemyStatus(56, 32, 32, 0, 1, 600, 0.0, 0.0),  # bozalogram
    EnemyStatus(57, 32, 32, 0, 4, 2000, 0.0, 0.0),  # sol
    EnemyStatus(58, 32, 63, 0, 1, 300, 0.0, 0.0),  # garubarra
    EnemyStatus(59, 32, 64, 0, 4, 2000, 0.0, 0.0),  # garuderota
    EnemyStatus(60, 16, 48, 0, 0, 1000, 0.0, 0.0),  # algo
    EnemyStatus(61, 32, 64, 0, 1, 4000, 0.0, 0.0),  # a/g core
    EnemyStatus(62, 32, 32, 0, 1, 1000, 0.0, 0.0),  # special flag
)

ENEMY_STATUSES: Mapping[int, EnemyStatus] = MappingProxyType(
    {status.number: status for status in _STATUSES}
)
DUMMY_STATUS = ENEMY_STATUSES[-1]


def enemy_status(number: int) -> EnemyStatus:
    """Return the statistics of the enemy with the given number."""
    try:
        return ENEMY_STATUSES[int(number)]
    except KeyError:
        raise KeyError(f"unknown enemy number: {number}") from None


_T = TypeVar("_T", int, float)


def wrap_clamp(value: _T, low: _T, high: _T) -> _T:
    """Wrap a value that leaves [low, high] round to the opposite end."""
    if value > high:
        return low
    if value < low:
        return high
    return value


@dataclass
class GameStatus:
    """Score and remaining lives shared between scenes."""

    score: int = 0
    life: int = 0