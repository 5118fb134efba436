"""Resource file names for sprite sheets and stage maps."""

from __future__ import annotations

from dataclasses import dataclass

from xshooting.config import MAX_STAGE

PNG_FILES: tuple[str, ...] = (
    "res/STG_Title.png",
    "res/EDGE STG自機.png",
    "res/STG 弾.png",
    "res/STG_A_enemy.png",
    "res/STG_G_enemy.png",
    "res/BOSS.png",
    "res/BOSS_PATS.png",
    "res/bomber.png",
    "res/Map/MapChip.png",
)


@dataclass(frozen=True)
class StageCsvFiles:
    """CSV files of one stage: drawn map and back layer, one per partition."""

    front: tuple[str, ...]
    back: tuple[str, ...]

    def partitions(self) -> tuple[tuple[str, str], ...]:
        """Pairs of (front, back) files in scroll order."""
        return tuple(zip(self.front, self.back))


_START_AREA = "res/Map/ARIA0.csv"

MAP_CSV_FILES: tuple[StageCsvFiles, ...] = (
    StageCsvFiles(
        front=(
            _START_AREA,
            "res/Map/stage1/1-1Front.csv",
            "res/Map/stage1/1-2Front.csv",
            "res/Map/stage1/1-3Front.csv",
            "res/Map/stage1/1-4Front.csv",
        ),
        back=(
            _START_AREA,
            "res/Map/stage1/1-1Back.csv",
            "res/Map/stage1/1-2Back.csv",
            "res/Map/stage1/1-3Back.csv",
            "res/Map/stage1/1-4Back.csv",
        ),
    ),
    StageCsvFiles(
        front=(
            _START_AREA,
            "res/Map/stage2/2-1_Front.csv",
            "res/Map/stage2/2-2_Front.csv",
            "res/Map/stage2/2-3_Front.csv",
            "res/Map/stage2/2-4_Front.csv",
        ),
        back=(
            _START_AREA,
            "res/Map/stage2/2-1_Back.csv",
            "res/Map/stage2/2-2_Back.csv",
            "res/Map/stage2/2-3_Back.csv",
            "res/Map/stage2/2-4_Back.csv",
        ),
    ),
    StageCsvFiles(
        front=(
            _START_AREA,
            "res/Map/stage3/3-1_Front.csv",
            "res/Map/stage3/3-2_Front.csv",
            "res/Map/stage3/3-3_Front.csv",
            "res/Map/stage3/3-4_Front.csv",
        ),
        back=(
            _START_AREA,
            "res/Map/stage3/3-1_Back.csv",
            "res/Map/stage3/3-2_Back.csv",
            "res/Map/stage3/3-3_Back.csv",
            "res/Map/stage3/3-4_Back.csv",
        ),
    ),
)


def stage_files(stage: int) -> StageCsvFiles:
    """Map files of a stage; stage numbers start at 1."""
    if not 1 <= stage <= MAX_STAGE:
        raise ValueError(f"stage must be between 1 and {MAX_STAGE}, got {stage}")
    return MAP_CSV_FILES[stage - 1]