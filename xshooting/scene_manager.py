"""Keeps the current scene and switches between scenes."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from xshooting.config import SceneID
from xshooting.scene import Scene, SceneError

_log = logging.getLogger(__name__)

_BACKGROUND = (0x10, 0x10, 0x10)


class SceneManager:
    """Runs the current scene and builds the next one when it asks to switch."""

    def __init__(self, factories: Mapping[SceneID, Callable[[], Scene]]) -> None:
        self._factories = dict(factories)
        self.current: Optional[Scene] = None

    def switch_to(self, scene_id: SceneID) -> Scene:
        """Build a fresh scene for ``scene_id`` and make it current."""
        try:
            factory = self._factories[SceneID(scene_id)]
        except KeyError:
            raise KeyError(f"no scene registered for {scene_id!r}") from None
        self.current = factory()
        return self.current

    def _scene(self) -> Scene:
        if self.current is None:
            raise SceneError("no current scene")
        return self.current

    def init(self) -> None:
        """Initialise the current scene unless it already is."""
        scene = self._scene()
        if scene.is_init:
            return
        scene.init()
        scene.is_init = True

    def update(self) -> Optional[SceneID]:
        """Update the current scene; returns APP_EXIT if the scene failed."""
        scene = self._scene()
        scene.advance_frames(1)
        try:
            status = scene.update()
        except SceneError as exc:
            _log.error("scene update failed: %s", exc)
            return SceneID.APP_EXIT

        if (
            status is not None
            and SceneID.TITLE <= status <= SceneID.RESULT
            and SceneID(status) in self._factories
        ):
            self.switch_to(SceneID(status))
        return None

    def draw(self, renderer: Any) -> None:
        """Clear the screen, draw the current scene and show the frame."""
        scene = self._scene()
        renderer.clear(*_BACKGROUND)
        scene.draw(renderer)
        renderer.present()