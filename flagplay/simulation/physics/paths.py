"""Polylines and arc-length progress along them.

Motion paths and routes are stored as immutable polylines with a
cumulative-distance table so any distance along the path can be sampled
with a binary search. Each agent tracks how far it has travelled in a
PathProgress.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..core.entities import FormationPlayer
from ..core.vec2 import Vec2


def sample_polyline(
    points: Sequence[Vec2],
    cumulative: Sequence[float],
    distance: float,
) -> Vec2:
    """Point at a given arc-length distance along a polyline.

    Distances at or below zero sample the first point; distances at or
    beyond the total length sample the last. An empty polyline samples
    the origin.
    """
    if not points:
        return Vec2(0.0, 0.0)
    if len(points) == 1 or distance <= 0:
        return points[0]

    total = cumulative[-1]
    if distance >= total:
        return points[-1]

    # Last vertex whose cumulative distance is <= distance
    lo = bisect_right(cumulative, distance) - 1
    hi = lo + 1
    seg_len = cumulative[hi] - cumulative[lo]
    t = (distance - cumulative[lo]) / seg_len if seg_len > 0 else 0.0
    return points[lo].lerp(points[hi], t)


@dataclass(frozen=True)
class Polyline:
    """Immutable polyline with cumulative arc length.

    Attributes:
        points: Vertices in order
        cumulative: cumulative[i] is the path length up to points[i]
    """
    points: tuple[Vec2, ...] = ()
    cumulative: tuple[float, ...] = ()

    @classmethod
    def from_points(cls, points: Iterable[Vec2]) -> Polyline:
        pts = tuple(points)
        if not pts:
            return cls()
        cumulative = [0.0]
        total = 0.0
        for prev, cur in zip(pts, pts[1:]):
            total += prev.distance_to(cur)
            cumulative.append(total)
        return cls(points=pts, cumulative=tuple(cumulative))

    @property
    def total_length(self) -> float:
        return self.cumulative[-1] if self.cumulative else 0.0

    @property
    def start(self) -> Vec2:
        return self.points[0] if self.points else Vec2(0.0, 0.0)

    @property
    def end(self) -> Vec2:
        return self.points[-1] if self.points else Vec2(0.0, 0.0)

    @property
    def is_degenerate(self) -> bool:
        """True when there is nothing to walk along."""
        return self.total_length <= 0

    def sample(self, distance: float) -> Vec2:
        return sample_polyline(self.points, self.cumulative, distance)

    def __len__(self) -> int:
        return len(self.points)


class PathProgress:
    """Distance travelled along one polyline.

    The travelled distance never decreases and never exceeds the
    polyline length. A degenerate polyline starts out done.
    """

    def __init__(self, polyline: Polyline):
        self.polyline = polyline
        self._traveled = 0.0
        self._done = polyline.is_degenerate

    @property
    def traveled(self) -> float:
        return self._traveled

    @property
    def done(self) -> bool:
        return self._done

    @property
    def total_length(self) -> float:
        return self.polyline.total_length

    @property
    def remaining(self) -> float:
        return self.polyline.total_length - self._traveled

    @property
    def position(self) -> Vec2:
        return self.polyline.sample(self._traveled)

    def advance(self, distance: float) -> Vec2:
        """Move forward along the path and return the new position."""
        if distance > 0 and not self._done:
            self._traveled = min(self._traveled + distance, self.polyline.total_length)
            if self._traveled >= self.polyline.total_length:
                self._done = True
        return self.position

    def look_ahead(self, distance: float) -> Vec2:
        """Position a further distance along the path, without moving."""
        return self.polyline.sample(min(self._traveled + distance, self.polyline.total_length))

    def __repr__(self) -> str:
        state = "done" if self._done else f"{self._traveled:.4f}/{self.total_length:.4f}"
        return f"PathProgress({state})"


# =============================================================================
# Builders
# =============================================================================

def build_motion_path(player: FormationPlayer) -> Polyline:
    """Start position followed by the motion points (empty without motion)."""
    if not player.motion_path:
        return Polyline()
    return Polyline.from_points((player.pos, *player.motion_path))


def build_route_path(player: FormationPlayer) -> Polyline:
    """Route polyline, starting where motion ends.

    Option segments are read alternatives drawn in the editor and are
    left out.
    """
    if not player.route:
        return Polyline()

    origin = player.motion_path[-1] if player.motion_path else player.pos
    points = [origin]
    for segment in player.route:
        if not segment.is_simulated:
            continue
        points.extend(segment.points)
    return Polyline.from_points(points)
