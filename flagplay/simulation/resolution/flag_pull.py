"""Flag pull resolution.

The flag football equivalent of a tackle. Each defender within reach of
the carrier gets one roll per tick; technique is weighed against the
carrier's evasiveness (hip drop and agility).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.entities import PlayerAgent
from ..core.variance import RandomSource


FLAG_PULL_REACH = 0.015       # Normalized distance
FLAG_PULL_BASE = 0.5
FLAG_PULL_SKILL_WEIGHT = 0.05 # Per point of technique over evasion


@dataclass
class FlagPullAttempt:
    """One defender's attempt at the carrier's flag."""
    defender: PlayerAgent
    chance: float
    roll: float

    @property
    def success(self) -> bool:
        return self.roll < self.chance


class FlagPullResolver:
    """Rolls flag pulls for defenders in reach of the carrier."""

    def pull_chance(self, defender: PlayerAgent, carrier: PlayerAgent) -> float:
        evasion = (carrier.ability("hip_drop") + carrier.ability("agility")) / 2
        return FLAG_PULL_BASE + (defender.ability("flag_pull_technique") - evasion) * FLAG_PULL_SKILL_WEIGHT

    def in_reach(self, defender: PlayerAgent, carrier: PlayerAgent) -> bool:
        return defender.pos.distance_to(carrier.pos) < FLAG_PULL_REACH

    def resolve(
        self,
        carrier: PlayerAgent,
        defenders: Iterable[PlayerAgent],
        rng: RandomSource,
    ) -> Optional[FlagPullAttempt]:
        """Roll for each defender in reach, in order.

        Returns:
            The first successful attempt, or None if the carrier escaped
        """
        for defender in defenders:
            if not self.in_reach(defender, carrier):
                continue
            attempt = FlagPullAttempt(
                defender=defender,
                chance=self.pull_chance(defender, carrier),
                roll=rng.random(),
            )
            if attempt.success:
                return attempt
        return None
