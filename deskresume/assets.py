"""Image assets and the sprite-sheet layouts used by the desktop."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame


@dataclass(frozen=True)
class AtlasLayout:
    """A grid of equally sized frames in a sprite sheet, numbered row by row."""

    tile_width: int
    tile_height: int
    columns: int
    rows: int

    def __post_init__(self) -> None:
        if min(self.tile_width, self.tile_height, self.columns, self.rows) <= 0:
            raise ValueError("atlas tiles and grid must have positive dimensions")

    def frame_count(self) -> int:
        """Number of frames in the sheet."""
        return self.columns * self.rows

    def frame_rect(self, index: int) -> pygame.Rect:
        """Rectangle of frame ``index`` within the sheet."""
        if not 0 <= index < self.frame_count():
            raise IndexError(f"atlas frame {index} out of range")
        row, column = divmod(index, self.columns)
        return pygame.Rect(
            column * self.tile_width, row * self.tile_height, self.tile_width, self.tile_height
        )


NOTEPAD_LAYOUT = AtlasLayout(32, 32, 8, 1)
LINKS_LAYOUT = AtlasLayout(32, 32, 4, 1)
CLOSE_LAYOUT = AtlasLayout(14, 14, 2, 1)

_IMAGE_FILES = {
    "notepad": "notepad.png",
    "links": "links.png",
    "window": "window.png",
    "window2": "window2.png",
    "close": "close.png",
}


@dataclass
class IconAssets:
    """The images of the desktop with the atlas layouts that slice them."""

    notepad: pygame.Surface
    links: pygame.Surface
    window: pygame.Surface
    window2: pygame.Surface
    close: pygame.Surface
    notepad_layout: AtlasLayout = NOTEPAD_LAYOUT
    links_layout: AtlasLayout = LINKS_LAYOUT
    close_layout: AtlasLayout = CLOSE_LAYOUT

    @classmethod
    def load(cls, root: str | Path) -> IconAssets:
        """Load every image from the asset directory ``root``."""
        root = Path(root)
        images = {}
        for name, filename in _IMAGE_FILES.items():
            path = root / filename
            if not path.is_file():
                raise FileNotFoundError(f"missing asset {path}")
            images[name] = pygame.image.load(str(path))
        return cls(**images)