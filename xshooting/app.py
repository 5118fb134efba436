"""Main loop and the console entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Optional, Sequence, TextIO

from xshooting.config import TextureConfigs, GameStatus, SceneID
from xshooting.ids import TextureType
from xshooting.resources import ResourceError, ResourceManager
from xshooting.scene import GameManager
from xshooting.scene_manager import SceneManager
from xshooting.title import TitleKey, TitleScene

CAPTION = "X_Shooting"


def run(manager: GameManager, max_frames: Optional[int] = None) -> int:
    """Run the game loop until the manager asks to exit; returns frames run."""
    manager.init()
    frames = 0
    try:
        while max_frames is None or frames < max_frames:
            pressed = manager.input()
            state = manager.game_loop()
            frames += 1
            if state + pressed >= SceneID.APP_EXIT:
                break
    finally:
        manager.end()
    return frames


class _TextRenderer:
    """Collects a frame's drawing and prints it as lines of text."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._items: list[str] = []

    def clear(self, red: int, green: int, blue: int) -> None:
        self._items.clear()

    def draw_sprite(self, texture: Any, index: int, x: int, y: int) -> None:
        self._items.append(f"[sprite {index} at {x},{y}]")

    def write_text(self, x: int, y: int, text: str) -> None:
        self._items.append(f"{text} @ {x},{y}")

    def present(self) -> None:
        for item in self._items:
            print(item, file=self._stream)
        print("--", file=self._stream)


class _ConsoleGameManager(GameManager):
    """Reads one line of key names per frame and plays the scenes."""

    def __init__(
        self,
        scenes: SceneManager,
        renderer: _TextRenderer,
        keys: set,
        source: TextIO,
    ) -> None:
        self._scenes = scenes
        self._renderer = renderer
        self._keys = keys
        self._source = source

    def init(self) -> int:
        self._scenes.switch_to(SceneID.TITLE)
        return 0

    def input(self) -> int:
        line = self._source.readline()
        self._keys.clear()
        if not line:
            return SceneID.APP_EXIT
        names = {key.value: key for key in TitleKey}
        self._keys.update(names[word] for word in line.lower().split() if word in names)
        return 0

    def game_loop(self) -> int:
        self._scenes.init()
        status = self._scenes.update()
        self._scenes.draw(self._renderer)
        return int(status or 0)

    def end(self) -> int:
        return 0


def _load_title_texture(root: str) -> Any:
    resources = ResourceManager(root)
    try:
        resources.load_texture_path(TextureType.TITLE, "res/Title.png")
        return resources.slice_texture(TextureType.TITLE, TextureConfigs.TITLE)
    except ResourceError as exc:
        print(f"warning: {exc}", file=sys.stderr)
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the title screen on the console, one line of keys per frame."""
    parser = argparse.ArgumentParser(prog="xshooting", description=CAPTION)
    parser.add_argument("--root", default=".", help="directory holding res/")
    parser.add_argument("--frames", type=int, default=None, help="stop after N frames")
    args = parser.parse_args(argv)
    if args.frames is not None and args.frames < 1:
        parser.error("--frames must be positive")

    status = GameStatus()
    keys: set = set()
    texture = _load_title_texture(args.root)
    scenes = SceneManager(
        {SceneID.TITLE: lambda: TitleScene(status, keys.__contains__, texture)}
    )
    manager = _ConsoleGameManager(scenes, _TextRenderer(sys.stdout), keys, sys.stdin)
    run(manager, args.frames)
    return 0