"""Speed conversion and point-to-point stepping.

Speeds are specified in yards per second (derived from the 1-10 speed
ability) and converted to normalized field units for movement.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.attributes import DEFAULT_ATTRIBUTE
from ..core.field import FieldGeometry
from ..core.vec2 import Vec2


# Speed ability range → yards per second
MIN_SPEED_YPS = 10.0   # speed 1
MAX_SPEED_YPS = 22.0   # speed 10


def speed_to_yards_per_second(score: float) -> float:
    """Map a 1-10 speed ability linearly onto 10-22 yd/s."""
    return MIN_SPEED_YPS + (score - 1) * (MAX_SPEED_YPS - MIN_SPEED_YPS) / 9


def step_toward(current: Vec2, target: Vec2, step: float) -> Vec2:
    """Move toward target by at most step, never overshooting."""
    delta = target - current
    distance = delta.length()
    if distance <= 0:
        return current
    return current + delta * (min(step, distance) / distance)


@dataclass(frozen=True)
class KinematicModel:
    """Unit conversions for one field.

    Usage:
        model = KinematicModel(geometry)
        per_second = model.base_speed(attr(roster, "speed"))
        pos = step_toward(pos, target, per_second * dt)
    """
    geometry: FieldGeometry

    def yards_to_normalized(self, yards: float) -> float:
        return yards / self.geometry.total_length_yards

    def normalized_to_yards(self, distance: float) -> float:
        return distance * self.geometry.total_length_yards

    def yps_to_normalized(self, yards_per_second: float) -> float:
        """Convert yd/s to normalized units per second."""
        return self.yards_to_normalized(yards_per_second)

    def base_speed(self, speed_score: Optional[float] = None) -> float:
        """Normalized units per second for a speed ability."""
        if speed_score is None:
            speed_score = DEFAULT_ATTRIBUTE
        return self.yps_to_normalized(speed_to_yards_per_second(speed_score))
