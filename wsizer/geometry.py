"""
Geometry Value Types

Rectangles, sizes and window-state flags shared by the sizing core and the
host adapters. All values are in device pixels unless noted otherwise.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntFlag


class MaximizeFlags(IntFlag):
    """Window maximization state."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2
    BOTH = 3


@dataclass
class Area:
    """Area with position and dimensions."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class Size:
    """A preferred window size (unscaled)."""

    width: int
    height: int

    def scaled(self, scale_factor: float) -> "Size":
        """Return this size multiplied by a display scale factor."""
        return Size(round(self.width * scale_factor), round(self.height * scale_factor))

    def fits(self, area: Area) -> bool:
        """Whether this size fits inside the dimensions of an area."""
        return self.width <= area.width and self.height <= area.height

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
