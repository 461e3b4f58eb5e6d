"""Canvas points.

Every position in a play (players, route vertices, zone centers, the
ball) is a Vec2 in normalized canvas units.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    """Immutable point or offset on the normalized canvas.

    Coordinate system (as drawn in the editor):
        (0, 0) = top-left corner, endzones included
        +X = toward the right sideline
        -Y = upfield, toward the endzone the offense attacks

    Both axes span [0, 1] and share one distance scale.
    """
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    # =========================================================================
    # Geometry
    # =========================================================================

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Vec2) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def lerp(self, other: Vec2, t: float) -> Vec2:
        """Point a fraction t of the way to other."""
        return Vec2(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def clamped_to_field(self) -> Vec2:
        """Same point pulled back inside the canvas."""
        return Vec2(min(1.0, max(0.0, self.x)), min(1.0, max(0.0, self.y)))

    def with_y(self, y: float) -> Vec2:
        return Vec2(self.x, y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    def __repr__(self) -> str:
        return f"Vec2({self.x:.4f}, {self.y:.4f})"

    def __str__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f})"
