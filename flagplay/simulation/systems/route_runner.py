"""Offensive movement: pre-snap motion and route running.

Every offensive player with a motion path walks it first. Receivers
(everyone but the QB and center) then run their drawn route at a speed
scaled by route running ability.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.entities import PlayerAgent
from ..physics.kinematics import KinematicModel


logger = logging.getLogger(__name__)


MOTION_SPEED_FACTOR = 0.65   # Motion is jogged, not sprinted
ROUTE_BASE_FACTOR = 0.9
ROUTE_RUNNING_BONUS = 0.1    # At route_running 10


class RouteRunner:
    """Moves offensive players along motion paths and routes.

    Usage:
        runner = RouteRunner(model, qb_id="qb", center_id="c")
        runner.run_motion(agents, dt)
        finished = runner.run_routes(agents, dt)
    """

    def __init__(
        self,
        model: KinematicModel,
        qb_id: Optional[str] = None,
        center_id: Optional[str] = None,
    ):
        self.model = model
        self.qb_id = qb_id
        self.center_id = center_id

    # =========================================================================
    # Speeds
    # =========================================================================

    def motion_speed(self, agent: PlayerAgent) -> float:
        """Normalized units per second while in motion."""
        return self.model.base_speed(agent.ability("speed")) * MOTION_SPEED_FACTOR

    def route_speed(self, agent: PlayerAgent) -> float:
        """Normalized units per second while running a route."""
        multiplier = ROUTE_BASE_FACTOR + (agent.ability("route_running") / 10) * ROUTE_RUNNING_BONUS
        return self.model.base_speed(agent.ability("speed")) * multiplier

    def runs_routes(self, agent: PlayerAgent) -> bool:
        """QB and center stay home."""
        return agent.is_offense and agent.id not in (self.qb_id, self.center_id)

    # =========================================================================
    # Movement
    # =========================================================================

    def run_motion(self, agents: Iterable[PlayerAgent], dt: float) -> list[PlayerAgent]:
        """Advance motion for every offensive player still in motion.

        Returns:
            Agents whose motion finished this tick
        """
        finished = []
        for agent in agents:
            if not agent.is_offense or agent.motion.done:
                continue
            agent.pos = agent.motion.advance(self.motion_speed(agent) * dt)
            if agent.motion.done:
                finished.append(agent)
        return finished

    def advance_route(self, agent: PlayerAgent, dt: float) -> bool:
        """Move one player along their route.

        Returns:
            True if the route finished on this step
        """
        if agent.route.done:
            return False
        agent.pos = agent.route.advance(self.route_speed(agent) * dt)
        return agent.route.done

    def run_routes(self, agents: Iterable[PlayerAgent], dt: float) -> list[PlayerAgent]:
        """Advance routes for receivers whose motion is complete.

        Returns:
            Agents whose route finished this tick
        """
        finished = []
        for agent in agents:
            if not self.runs_routes(agent):
                continue
            if not agent.motion.done or agent.route.done:
                continue
            if self.advance_route(agent, dt):
                logger.debug("%s finished route at %s", agent.id, agent.pos)
                finished.append(agent)
        return finished
