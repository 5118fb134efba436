"""Sprite sheets cut into frames, and a store of them keyed by texture type."""

from __future__ import annotations

from os import PathLike
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from PIL import Image

from xshooting.config import TextureConfig
from xshooting.ids import TextureType

StrPath = Union[str, "PathLike[str]"]


class TextureError(Exception):
    """A sprite sheet cannot be loaded or cut as configured."""


def slice_image(path: StrPath, config: TextureConfig) -> list[Image.Image]:
    """Cut a sheet into frames and return those the config selects.

    The sheet holds ``config.rows`` frames across and ``config.columns`` frames
    down; frames are numbered left to right, then top to bottom.
    """
    total = config.slice_count()
    if config.index_count > total:
        raise TextureError("index count exceeds the number of frames in the sheet")
    if config.start_index < 0 or config.start_index + config.index_count > total:
        raise TextureError("selected frame range lies outside the sheet")
    try:
        with Image.open(path) as sheet:
            sheet = sheet.convert("RGBA")
    except OSError as exc:
        raise TextureError(f"failed to load texture: {path}") from exc

    needed_w = config.width * config.rows
    needed_h = config.height * config.columns
    if sheet.width < needed_w or sheet.height < needed_h:
        raise TextureError(
            f"texture {path} is {sheet.width}x{sheet.height}, "
            f"smaller than {needed_w}x{needed_h}"
        )

    selected = range(config.start_index, config.start_index + config.index_count)
    frames = []
    for index in selected:
        y, x = divmod(index, config.rows)
        left, top = x * config.width, y * config.height
        frames.append(sheet.crop((left, top, left + config.width, top + config.height)))
    return frames


class GameTexture:
    """The frames of one sprite sheet that the game draws."""

    def __init__(self, path: StrPath, config: TextureConfig) -> None:
        self.config = config
        self._frames = tuple(slice_image(path, config))

    @property
    def frames(self) -> tuple[Image.Image, ...]:
        return self._frames

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Image.Image]:
        return iter(self._frames)

    def frame(self, index: int) -> Image.Image:
        """The frame at ``index``; negative indices are not allowed."""
        if not 0 <= index < len(self._frames):
            raise IndexError(f"invalid texture index: {index}")
        return self._frames[index]

    def frames_in_range(self, start: int, count: int = 0) -> list[Image.Image]:
        """Copies of up to ``count`` frames starting at ``start``."""
        if not 0 <= start < len(self._frames):
            raise IndexError(f"invalid start index: {start}")
        return [image.copy() for image in self._frames[start : start + max(count, 0)]]


class TextureStore:
    """Texture paths, slice layouts and sliced textures by texture type."""

    def __init__(self) -> None:
        self._paths: dict[TextureType, str] = {}
        self._configs: dict[TextureType, TextureConfig] = {}
        self._textures: dict[TextureType, GameTexture] = {}

    @property
    def textures(self) -> Mapping[TextureType, GameTexture]:
        return MappingProxyType(self._textures)

    def set_path(self, texture_type: TextureType, path: StrPath) -> None:
        self._paths[texture_type] = str(path)

    def path(self, texture_type: TextureType) -> str:
        """The recorded path; KeyError if none was set."""
        return self._paths[texture_type]

    def set_config(self, texture_type: TextureType, config: TextureConfig) -> None:
        self._configs[texture_type] = config

    def config(self, texture_type: TextureType) -> TextureConfig:
        """The recorded layout; KeyError if none was set."""
        return self._configs[texture_type]

    def create(
        self, texture_type: TextureType, path: StrPath, config: TextureConfig
    ) -> GameTexture:
        """Slice a sheet and keep it under ``texture_type``, which must be unused."""
        if texture_type in self._textures:
            raise TextureError(f"texture already created: {texture_type.name}")
        texture = GameTexture(path, config)
        self._textures[texture_type] = texture
        return texture

    def get(self, texture_type: TextureType) -> Optional[GameTexture]:
        """The texture kept under ``texture_type``, or None."""
        return self._textures.get(texture_type)