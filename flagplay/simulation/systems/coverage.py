"""Defensive movement.

Two assignments exist in flag football play design:
- Rushers (designation R / position RSH) chase the QB after the snap
- Everyone else drops to a zone and tracks the nearest receiver in it

After a catch every defender pursues the ball carrier.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..core.entities import DEFAULT_COVERAGE_RADIUS, PlayerAgent
from ..core.vec2 import Vec2
from ..physics.kinematics import KinematicModel, step_toward


logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

PURSUIT_DEADBAND = 0.003      # Closer than this, the chaser holds position
ZONE_ARRIVAL_RADIUS = 0.015   # Within this of the zone center, the zone is reached
CARRIER_PURSUIT_MULTIPLIER = 1.15

RUSH_BONUS = 0.2              # At rush 10
GET_OFF_BONUS = 0.15          # At get_off_burst 10
COVERAGE_BASE = 0.95
COVERAGE_BONUS = 0.1          # At coverage 10
CLOSING_BONUS = 0.1           # At closing_burst 10


class DefenseAI:
    """Moves defenders toward their assignments.

    All writes to a defender's position are clamped to the field.
    """

    def __init__(self, model: KinematicModel):
        self.model = model

    # =========================================================================
    # Speeds
    # =========================================================================

    def rush_speed(self, rusher: PlayerAgent) -> float:
        """Normalized units per second for a pass rusher."""
        rush_mul = 1.0 + (rusher.ability("rush") / 10) * RUSH_BONUS
        burst_mul = 1.0 + (rusher.ability("get_off_burst") / 10) * GET_OFF_BONUS
        return self.model.base_speed(rusher.ability("speed")) * rush_mul * burst_mul

    def coverage_multiplier(self, defender: PlayerAgent) -> float:
        cover_mul = COVERAGE_BASE + (defender.ability("coverage") / 10) * COVERAGE_BONUS
        burst_mul = 1.0 + (defender.ability("closing_burst") / 10) * CLOSING_BONUS
        return cover_mul * burst_mul

    # =========================================================================
    # Movement primitives
    # =========================================================================

    def pursue(
        self,
        chaser: PlayerAgent,
        target: Vec2,
        dt: float,
        multiplier: float = 1.0,
        speed: Optional[float] = None,
    ) -> None:
        """Step a chaser toward a point.

        Args:
            speed: Normalized units/sec, defaults to the chaser's base speed
        """
        if chaser.pos.distance_to(target) < PURSUIT_DEADBAND:
            return
        if speed is None:
            speed = self.model.base_speed(chaser.ability("speed"))
        chaser.pos = step_toward(chaser.pos, target, speed * multiplier * dt).clamped_to_field()

    def rush(self, rusher: PlayerAgent, qb: PlayerAgent, dt: float) -> None:
        """Chase the QB's live position."""
        self.pursue(rusher, qb.pos, dt, speed=self.rush_speed(rusher))

    def coverage_radius(self, defender: PlayerAgent) -> float:
        """Zone radius in normalized units."""
        radius = defender.formation.coverage_radius
        if radius is None:
            radius = DEFAULT_COVERAGE_RADIUS
        return self.model.yards_to_normalized(radius)

    def closest_in_zone(
        self,
        defender: PlayerAgent,
        receivers: Iterable[PlayerAgent],
    ) -> Optional[PlayerAgent]:
        """Receiver nearest the zone center, if any is inside the zone."""
        radius = self.coverage_radius(defender)
        closest = None
        closest_dist = float("inf")
        for receiver in receivers:
            d = receiver.pos.distance_to(defender.zone_target)
            if d < radius and d < closest_dist:
                closest = receiver
                closest_dist = d
        return closest

    def cover_zone(
        self,
        defender: PlayerAgent,
        receivers: Sequence[PlayerAgent],
        dt: float,
    ) -> None:
        """Drop to the zone, then track the nearest receiver inside it."""
        if not defender.reached_zone:
            if defender.pos.distance_to(defender.zone_target) < ZONE_ARRIVAL_RADIUS:
                defender.reached_zone = True
                logger.debug("%s reached zone at %s", defender.id, defender.zone_target)
            else:
                step = self.model.base_speed(defender.ability("speed")) * dt
                defender.pos = step_toward(defender.pos, defender.zone_target, step).clamped_to_field()
                return

        target = self.closest_in_zone(defender, receivers)
        if target is not None:
            self.pursue(defender, target.pos, dt, multiplier=self.coverage_multiplier(defender))

    # =========================================================================
    # Team updates
    # =========================================================================

    def run(
        self,
        defenders: Iterable[PlayerAgent],
        qb: Optional[PlayerAgent],
        receivers: Sequence[PlayerAgent],
        dt: float,
    ) -> None:
        """One tick of pre-throw and in-flight defense."""
        for defender in defenders:
            if defender.is_rusher:
                if qb is not None:
                    self.rush(defender, qb, dt)
            else:
                self.cover_zone(defender, receivers, dt)

    def pursue_carrier(
        self,
        defenders: Iterable[PlayerAgent],
        carrier: PlayerAgent,
        dt: float,
    ) -> None:
        """Every defender chases the ball carrier."""
        for defender in defenders:
            self.pursue(defender, carrier.pos, dt, multiplier=CARRIER_PURSUIT_MULTIPLIER)
