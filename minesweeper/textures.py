"""Image loading and caching for the game's sprites."""

from __future__ import annotations

import os
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

DIGIT_WIDTH = 21
DIGIT_HEIGHT = 32
MINUS_SIGN = 10

TEXTURE_NAMES = (
    "tile_hidden",
    "tile_revealed",
    "mine",
    "flag",
    "debug",
    "test_1",
    "test_2",
    "test_3",
    "face_happy",
    "face_lose",
    "face_win",
    "digits",
    "number_1",
    "number_2",
    "number_3",
    "number_4",
    "number_5",
    "number_6",
    "number_7",
    "number_8",
)


def digit_rect(num: int) -> tuple[int, int, int, int]:
    """Area (x, y, width, height) of a glyph in the digits strip; 10 is the minus sign."""
    if not 0 <= num <= MINUS_SIGN:
        raise ValueError(f"no digit glyph for {num}")
    return (num * DIGIT_WIDTH, 0, DIGIT_WIDTH, DIGIT_HEIGHT)


class TextureCache:
    """Loads '<name>.png' images from a directory once and keeps them by name."""

    def __init__(self, directory: str | os.PathLike[str] = "images") -> None:
        self.directory = Path(directory)
        self._textures: dict[str, pygame.Surface] = {}

    def load(self, name: str) -> pygame.Surface:
        """Read the image for name from disk, replacing any cached copy."""
        path = self.directory / f"{name}.png"
        if not path.is_file():
            raise FileNotFoundError(f"texture {name!r} not found at {path}")
        surface = pygame.image.load(str(path))
        self._textures[name] = surface
        return surface

    def get(self, name: str) -> pygame.Surface:
        """Return the cached image for name, loading it on first use."""
        if name not in self._textures:
            return self.load(name)
        return self._textures[name]

    def clear(self) -> None:
        """Forget every cached image."""
        self._textures.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._textures

    def __len__(self) -> int:
        return len(self._textures)