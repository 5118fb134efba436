"""Identifiers for textures and enemy kinds."""

from __future__ import annotations

from enum import IntEnum


class TextureType(IntEnum):
    """Keys for the game's textures; consecutive values group sheets together."""

    TITLE = 0
    PLAYER = 1
    TARGET_SIGHT = 2
    BULLET = 3
    BOM = 4
    MAP = 5
    BOMBER = 6
    PLAYER_BOMBER = 7
    BOM_BOMBER = 8
    AIR_ENEMY_BOMBER = 9
    GROUND_ENEMY_BOMBER = 10

    AIR_ENEMY = 11
    TOROID = 12
    TORKAN = 13
    GIDDOSPARIO = 14
    ZOSHI = 15
    JARA = 16
    KAPI = 17
    TERRAZI = 18
    ZAKATO = 19
    BRAGZAKATO = 20
    GARUZAKATO = 21
    BACURA = 22
    AIR_ENEMY_END = 23

    GROUND_ENEMY = 24
    BARRA = 25
    ZOLBAK = 26
    LOGRAM = 27
    DOMOGRAM = 28
    DEROTA = 29
    GROBDA = 30
    BOZALOGRAM = 31
    SOL = 32
    GARUBARRA = 33
    GARUDEROTA = 34
    BOSS = 35
    BOSS_PARTS = 36
    ALGO = 37
    AD_CORE = 38
    SPFLAG = 39
    GROUND_ENEMY_END = 40

    def is_air_enemy(self) -> bool:
        """True for the texture of a single air enemy."""
        return TextureType.AIR_ENEMY < self < TextureType.AIR_ENEMY_END

    def is_ground_enemy(self) -> bool:
        """True for the texture of a single ground enemy or boss part."""
        return TextureType.GROUND_ENEMY < self < TextureType.GROUND_ENEMY_END


_VARIANT_STEP = 100


class EnemyName(IntEnum):
    """Enemy numbers; hundreds select a behaviour variant of the same enemy."""

    TOROID = 0
    TORKAN = 1
    GIDDOSPARIO = 2
    ZOSHI = 3
    JARA = 4
    KAPI = 5
    TERRAZI = 6
    ZAKATO = 7
    BRAGZAKATO = 8
    GARUZAKATO = 9
    BACURA = 10
    AIR_ENEMY_END = 11

    BARRA = 50
    ZOLBAK = 51
    LOGRAM = 52
    DOMOGRAM = 53
    DEROTA = 54
    GROBDA = 55
    BOZALOGRAM = 56
    SOL = 57
    GARUBARRA = 58
    GARUDEROTA = 59
    ALGO = 60
    AD_CORE = 61
    SPFLAG = 62
    GROUND_ENEMY_END = 63

    TOROID_TYPE2 = 100 + 0
    ZOSHI_TYPE2 = 100 + 3
    ZOSHI_TYPE3 = 200 + 3
    JARA_TYPE2 = 100 + 4
    ZAKATO_TYPE2 = 100 + 7
    ZAKATO_TYPE3 = 200 + 7
    ZAKATO_TYPE4 = 300 + 7
    BRAGZAKATO_TYPE2 = 100 + 8
    BRAGZAKATO_TYPE3 = 200 + 8
    BRAGZAKATO_TYPE4 = 300 + 8

    LOGRAM_TYPE2 = 100 + 52
    LOGRAM_TYPE3 = 200 + 52
    LOGRAM_TYPE4 = 300 + 52
    LOGRAM_TYPE5 = 400 + 52
    GARUBARRA_TYPE2 = 100 + 58
    GARUBARRA_TYPE3 = 200 + 58
    GARUBARRA_TYPE4 = 300 + 58
    GARUBARRA_TYPE5 = 400 + 58
    GARUBARRA_TYPE6 = 500 + 58
    GARUBARRA_TYPE7 = 600 + 58
    GARUBARRA_TYPE8 = 700 + 58
    GARUBARRA_TYPE9 = 800 + 58

    def base(self) -> EnemyName:
        """The enemy this one is a variant of (itself for a base enemy)."""
        return EnemyName(self.value % _VARIANT_STEP)

    def variant(self) -> int:
        """Behaviour variant, starting at 1 for the base enemy."""
        return self.value // _VARIANT_STEP + 1