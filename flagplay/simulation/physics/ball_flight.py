"""Pass trajectory planning.

A throw is a straight line from the QB to a lead point ahead of the
receiver, travelled at constant speed. The QB's arm strength sets the
ball speed and accuracy sets how far the lead point is jittered.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.entities import PlayerAgent
from ..core.variance import RandomSource, centered_noise, clamp
from ..core.vec2 import Vec2
from .kinematics import KinematicModel, speed_to_yards_per_second


# =============================================================================
# CONSTANTS
# =============================================================================

MIN_THROW_SPEED_YPS = 20.0   # throwing_power 0
THROW_SPEED_RANGE_YPS = 30.0  # added at throwing_power 10
MIN_FLIGHT_TIME = 0.15        # seconds
LEAD_FACTOR = 0.6             # Fraction of the receiver's projected travel to lead by
INACCURACY_PER_POINT = 0.003  # Normalized jitter per point of accuracy below 10


def throw_speed(throwing_power: float) -> float:
    """Ball speed in yd/s for a throwing_power ability."""
    return MIN_THROW_SPEED_YPS + (throwing_power / 10) * THROW_SPEED_RANGE_YPS


def inaccuracy(accuracy: float) -> float:
    """Total jitter amplitude (normalized) applied to each coordinate."""
    return (10 - accuracy) * INACCURACY_PER_POINT


@dataclass(frozen=True)
class ThrowPlan:
    """A planned pass.

    Attributes:
        start: Where the ball leaves the QB's hand
        target: Lead point the ball travels to (after inaccuracy)
        flight_time: Seconds from release to arrival
        receiver_id: Intended receiver
        distance_yards: QB to receiver distance at release
    """
    start: Vec2
    target: Vec2
    flight_time: float
    receiver_id: str
    distance_yards: float = 0.0

    def progress(self, elapsed: float) -> float:
        """Flight parameter in [0, 1]."""
        if self.flight_time <= 0:
            return 1.0
        return clamp(elapsed / self.flight_time, 0.0, 1.0)

    def position_at(self, elapsed: float) -> Vec2:
        return self.start.lerp(self.target, self.progress(elapsed))

    def arrived(self, elapsed: float) -> bool:
        return self.progress(elapsed) >= 1.0


def plan_throw(
    qb: PlayerAgent,
    receiver: PlayerAgent,
    model: KinematicModel,
    rng: RandomSource,
) -> ThrowPlan:
    """Plan a pass from the QB's current position to a receiver.

    The lead point is sampled along what the receiver still has to run so
    the ball arrives where they are heading, not where they are. A
    receiver still in motion is led along the motion first and only into
    the route by whatever lead is left over.
    """
    distance_yards = model.normalized_to_yards(qb.pos.distance_to(receiver.pos))
    flight_time = max(MIN_FLIGHT_TIME, distance_yards / throw_speed(qb.ability("throwing_power")))

    receiver_yps = speed_to_yards_per_second(receiver.ability("speed"))
    lead = model.yards_to_normalized(receiver_yps * flight_time) * LEAD_FACTOR

    target = receiver.pos
    if not receiver.motion.done:
        target = receiver.motion.look_ahead(lead)
        lead -= receiver.motion.remaining
        if lead > 0 and receiver.route.total_length > 0:
            target = receiver.route.look_ahead(lead)
    elif not receiver.route.done and receiver.route.total_length > 0:
        target = receiver.route.look_ahead(lead)

    amplitude = inaccuracy(qb.ability("accuracy"))
    target = Vec2(
        target.x + centered_noise(rng, amplitude),
        target.y + centered_noise(rng, amplitude),
    )

    return ThrowPlan(
        start=qb.pos,
        target=target,
        flight_time=flight_time,
        receiver_id=receiver.id,
        distance_yards=distance_yards,
    )
