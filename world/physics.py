"""
critter_sim module: world/physics.py

Flat 2D geometry for the critter world:
- axis-aligned boxes for food and mating collision checks
- bounds of the rotated critter sprite
- arcade-style wrap (leave one edge, come back on the opposite one)
- heading of a move, for drawing
"""

from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Tuple

Vec2 = Tuple[float, float]


@dataclass(frozen=True)
class Box:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, x: float, y: float) -> bool:
        # half-open: the right/bottom edges are outside
        return self.left <= x < self.right and self.top <= y < self.bottom

    def intersects(self, other: "Box") -> bool:
        """Strict overlap; boxes that only touch along an edge do not intersect."""
        return (
            max(self.left, other.left) < min(self.right, other.right)
            and max(self.top, other.top) < min(self.bottom, other.bottom)
        )


def rotated_bounds(x: float, y: float, w: float, h: float, degrees: float) -> Box:
    """
    Bounding box of a w*h rectangle whose top-left corner sits at (x, y),
    rotated clockwise (screen coordinates, y down) by ``degrees`` around that corner.
    """
    a = math.radians(degrees)
    cos_a = math.cos(a)
    sin_a = math.sin(a)

    xs = []
    ys = []
    for cx, cy in ((0.0, 0.0), (w, 0.0), (w, h), (0.0, h)):
        xs.append(x + cx * cos_a - cy * sin_a)
        ys.append(y + cx * sin_a + cy * cos_a)

    left = min(xs)
    top = min(ys)
    return Box(left, top, max(xs) - left, max(ys) - top)


def wrap_position(x: float, y: float, w: int, h: int) -> Vec2:
    """
    Toroidal world: a critter leaving one edge reappears on the opposite one.
    A position exactly on an edge is still inside.
    """
    if x < 0:
        x = w
    elif x > w:
        x = 0

    if y < 0:
        y = h
    elif y > h:
        y = 0
    return x, y


def heading_degrees(old: Vec2, new: Vec2) -> float:
    """
    Sprite rotation for a move from ``old`` to ``new``, in [0, 360).
    At rotation 0 the sprite's head points up (-y).
    """
    deg = math.degrees(math.atan2(old[1] - new[1], old[0] - new[0])) - 90.0
    deg %= 360.0
    # tiny negatives round up to 360.0
    return 0.0 if deg >= 360.0 else deg
