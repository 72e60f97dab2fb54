# src/game/geometry.py
from __future__ import annotations
from dataclasses import dataclass
import pygame


@dataclass
class Box:
    """Axis-aligned rectangle in world coordinates (floats, top-left origin)."""
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def to_pygame(self, offset_x: float = 0.0) -> pygame.Rect:
        """Integer rect for drawing, shifted by -offset_x (camera translation)."""
        return pygame.Rect(int(round(self.x - offset_x)), int(round(self.y)),
                           int(round(self.w)), int(round(self.h)))


def intersects(a, b) -> bool:
    """Strict overlap on both axes; rectangles that only share an edge do not intersect."""
    return (
        a.x < b.x + b.w and
        a.x + a.w > b.x and
        a.y < b.y + b.h and
        a.y + a.h > b.y
    )
