"""Locating stage CSV files and reading them as integer data."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path
from typing import Union

StrPath = Union[str, "PathLike[str]"]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class CsvDataError(Exception):
    """A CSV file is missing or holds something that is not an integer."""


def _is_accessible(path: StrPath) -> bool:
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def _parse_cell(cell: str) -> int:
    """Read the integer at the start of a cell; trailing text is ignored."""
    match = _LEADING_INT.match(cell)
    if match is None:
        raise CsvDataError(f"invalid data: {cell!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise CsvDataError(f"number out of range: {cell!r}")
    return value


def _split_cells(line: str) -> list[str]:
    cells = line.split(",")
    # A separator at the very end of a line does not start another cell.
    if cells and cells[-1] == "":
        cells.pop()
    return cells


def read_csv_ints(path: StrPath) -> list[int]:
    """Read every comma separated integer of a file, row after row."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = [line.rstrip("\n") for line in handle]
    except OSError as exc:
        raise CsvDataError(f"failed to open {path}") from exc
    return [_parse_cell(cell) for line in lines for cell in _split_cells(line)]


class CsvMapFiles:
    """Remembers the CSV files that hold the drawn map and the enemy placement."""

    def __init__(self) -> None:
        self.map_data: str = ""
        self.enemy_placement: str = ""

    def load(self, draw_file: StrPath, back_file: StrPath) -> None:
        """Record both files, provided both can be opened."""
        missing = [str(p) for p in (draw_file, back_file) if not _is_accessible(p)]
        if missing:
            raise CsvDataError(
                f"failed to load map data: {draw_file} or {back_file} not found"
            )
        self.map_data = str(Path(draw_file)) if isinstance(draw_file, PathLike) else draw_file
        self.enemy_placement = (
            str(Path(back_file)) if isinstance(back_file, PathLike) else back_file
        )