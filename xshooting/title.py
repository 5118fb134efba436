"""The title screen: wait for start, then choose one or two players."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

from xshooting.config import (
    CENTER_X,
    CENTER_Y,
    HALF_WORD_WIDTH,
    SCREEN_WIDTH,
    WORD_WIDTH,
    GameStatus,
    SceneID,
)
from xshooting.scene import Scene, SceneError

_PUSH_START_WAIT_STATE = 0
_SELECT_PLAYER_MODE_STATE = 1
_GAMESCENE_SHIFT_STATE = 2

_CURSOR_MIN = 0
_CURSOR_MAX = 1

_PLAYER_ONE_LIFE = 3
_PLAYER_TWO_LIFE = _PLAYER_ONE_LIFE * 2

_SELECT_ONE_PLAYER = 0
_SELECT_TWO_PLAYER = 1

_MENU = ("PUSH STARTENTER", "1 PLAYER", "2 PLAYERS")
_CURSOR_MARK = "→"


class TitleKey(Enum):
    """Keys the title screen reacts to at the moment they are pushed."""

    ESC = "esc"
    SELECT = "select"
    UP = "up"
    DOWN = "down"
    CANCEL = "cancel"


def _text_x(length: int) -> int:
    return CENTER_X - HALF_WORD_WIDTH * length


def _select_offset(line: int) -> int:
    return 30 - line * 30


class TitleScene(Scene):
    """Title logo and player selection; sets the lives in the shared status."""

    def __init__(
        self,
        status: GameStatus,
        pressed: Callable[[TitleKey], bool],
        title_texture: Any = None,
    ) -> None:
        super().__init__()
        self.status = status
        self._pressed = pressed
        self.title_texture = title_texture

    def init(self) -> None:
        super().init()

    def update(self) -> Optional[int]:
        """Handle one frame of input; returns GAME once players are chosen."""
        if self.state >= _GAMESCENE_SHIFT_STATE:
            raise SceneError("title scene has already finished")

        self.advance_frames(1)

        if self._pressed(TitleKey.ESC):
            return SceneID.APP_EXIT
        if self._pressed(TitleKey.SELECT):
            self.state += 1

        cursor_input = 0
        if self._pressed(TitleKey.DOWN):
            cursor_input -= 1
        if self._pressed(TitleKey.UP):
            cursor_input += 1
        if self._pressed(TitleKey.CANCEL):
            self.is_init = False

        self.move_cursor(0, cursor_input, _CURSOR_MIN, _CURSOR_MAX)

        if self.state >= _GAMESCENE_SHIFT_STATE:
            choice = int(self.cursor.y)
            if choice == _SELECT_ONE_PLAYER:
                self.status.life = _PLAYER_ONE_LIFE
            elif choice == _SELECT_TWO_PLAYER:
                self.status.life = _PLAYER_TWO_LIFE
            return SceneID.GAME
        return None

    def menu_lines(self) -> tuple[str, ...]:
        """The menu lines shown in the current state."""
        if self.state == _PUSH_START_WAIT_STATE:
            return (_MENU[0],)
        if self.state == _SELECT_PLAYER_MODE_STATE:
            return _MENU[1:]
        return ()

    def draw(self, renderer: Any) -> None:
        if self.title_texture is not None:
            renderer.draw_sprite(self.title_texture, 0, SCREEN_WIDTH // 2 - 99, 100)

        if self.state == _PUSH_START_WAIT_STATE:
            renderer.write_text(_text_x(len(_MENU[0])), CENTER_Y, _MENU[0])
        elif self.state == _SELECT_PLAYER_MODE_STATE:
            for line, text in enumerate(_MENU[1:]):
                renderer.write_text(
                    _text_x(len(_MENU[2])), CENTER_Y - _select_offset(line), text
                )
            renderer.write_text(
                _text_x(len(_MENU[0])) - WORD_WIDTH,
                CENTER_Y - _select_offset(int(self.cursor.y)),
                _CURSOR_MARK,
            )