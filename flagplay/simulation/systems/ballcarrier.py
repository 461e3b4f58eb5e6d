"""After-catch running.

The carrier heads straight upfield, but first finishes whatever was
still drawn for them when the ball arrived: pre-snap motion, then the
route.
"""

from __future__ import annotations

from ..core.entities import PlayerAgent
from ..physics.kinematics import KinematicModel, speed_to_yards_per_second
from .route_runner import RouteRunner


VISION_BASE = 0.85
VISION_BONUS = 0.15   # At after_catch_vision 10


class BallcarrierSystem:
    """Moves the ball carrier after a catch."""

    def __init__(self, model: KinematicModel, route_runner: RouteRunner):
        self.model = model
        self.route_runner = route_runner

    def run_speed(self, carrier: PlayerAgent) -> float:
        """Normalized units per second running upfield."""
        yps = speed_to_yards_per_second(carrier.ability("speed"))
        vision = VISION_BASE + (carrier.ability("after_catch_vision") / 10) * VISION_BONUS
        return self.model.yps_to_normalized(yps) * vision

    def update(self, carrier: PlayerAgent, dt: float) -> None:
        """One tick of running: motion, then route, then straight upfield."""
        if not carrier.motion.done:
            carrier.pos = carrier.motion.advance(self.route_runner.motion_speed(carrier) * dt)
        elif not carrier.route.done:
            self.route_runner.advance_route(carrier, dt)
        else:
            carrier.pos = carrier.pos.with_y(carrier.pos.y - self.run_speed(carrier) * dt)
        carrier.pos = carrier.pos.clamped_to_field()
