"""Base classes for scenes and for the object that drives the whole game."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from xshooting.config import FRAME_COUNT_VALUE

FRAME_LIMIT = 10000


class SceneError(RuntimeError):
    """A scene was asked to do something its state does not allow."""


@dataclass
class Cursor:
    """Menu cursor position."""

    x: float = 0.0
    y: float = 0.0


def wrap_cursor_value(value: float, low: float, high: float) -> float:
    """Keep a cursor coordinate in [low, high], wrapping past either end."""
    if value < low:
        return high
    if value > high:
        return low
    return value


class Scene(ABC):
    """One screen of the game: it is initialised, updated and drawn each frame.

    ``update`` returns the id of the scene to switch to, or None to stay.
    ``draw`` receives a renderer offering ``draw_sprite(texture, index, x, y)``
    and ``write_text(x, y, text)``.
    """

    def __init__(self) -> None:
        self.is_init = False
        self.state = 0
        self.frame_count = 0
        self.cursor = Cursor()

    def init(self) -> None:
        """Reset the scene to its starting state."""
        self.is_init = False
        self.state = 0
        self.frame_count = 0
        self.cursor = Cursor()

    @abstractmethod
    def update(self) -> Optional[int]:
        """Advance the scene by one frame."""

    @abstractmethod
    def draw(self, renderer: Any) -> None:
        """Draw the scene."""

    def advance_frames(self, value: int = FRAME_COUNT_VALUE) -> None:
        """Count frames, starting again from zero past the frame limit."""
        self.frame_count += value
        if self.frame_count > FRAME_LIMIT:
            self.frame_count = 0

    def reset_frames(self) -> None:
        self.frame_count = 0

    def move_cursor(self, dx: float, dy: float, low: float, high: float) -> None:
        """Move the cursor, wrapping each coordinate within [low, high]."""
        self.cursor.x = wrap_cursor_value(self.cursor.x + dx, low, high)
        self.cursor.y = wrap_cursor_value(self.cursor.y + dy, low, high)


class GameManager(ABC):
    """Drives the game: set up once, then input and loop each frame, then end."""

    @abstractmethod
    def init(self) -> int:
        """Prepare the game."""

    @abstractmethod
    def input(self) -> int:
        """Read the input of one frame."""

    @abstractmethod
    def game_loop(self) -> int:
        """Update and draw one frame."""

    @abstractmethod
    def end(self) -> int:
        """Shut the game down."""