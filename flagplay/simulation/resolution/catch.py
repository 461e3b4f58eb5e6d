"""Catch resolution.

Resolves a pass on arrival into a catch, an incompletion or an
interception with a single uniform roll against bands:

    [0, p_int)                   → interception
    [p_int, p_int + (1 - p_catch)) → incompletion
    otherwise                    → catch
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from ..core.entities import PlayerAgent
from ..core.field import FieldGeometry
from ..core.variance import RandomSource, clamp


# =============================================================================
# Constants (Tunable)
# =============================================================================

CONTESTED_SEPARATION = 2.0    # Yards; nearest defender closer than this contests
CATCH_BASE = 0.5
CATCH_SKILL_RANGE = 0.35      # Added at catching + hands_consistency = 20
CONTEST_BASE = 0.5
CONTEST_SKILL_WEIGHT = 0.05   # Per point of contested_catch over the defender
OPEN_BONUS_YARDS = (3.0, 5.0) # Each threshold exceeded adds OPEN_BONUS
OPEN_BONUS = 0.1
MIN_CATCH, MAX_CATCH = 0.1, 0.95

INT_BASE = 0.02
INT_HAWK_RANGE = 0.08         # Added at ball_hawking 10


class CatchResult(str, Enum):
    """How a thrown ball ends up."""
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    INTERCEPTION = "interception"


@dataclass
class CatchProbabilities:
    """Chances of each outcome for one throw; the three always sum to 1."""
    complete: float
    incomplete: float
    interception: float

    def to_dict(self) -> dict:
        return {
            "complete": round(self.complete, 4),
            "incomplete": round(self.incomplete, 4),
            "interception": round(self.interception, 4),
        }


@dataclass
class CatchResolution:
    """The roll, the odds it was rolled against, and what came of it."""
    result: CatchResult
    probabilities: CatchProbabilities
    roll: float
    separation: float                # Yards to nearest defender
    contested: bool
    defender: Optional[PlayerAgent] = None  # Nearest defender (interceptor on INT)

    def to_dict(self) -> dict:
        return {
            "result": self.result.value,
            "probabilities": self.probabilities.to_dict(),
            "roll": round(self.roll, 4),
            "separation": round(self.separation, 2) if self.separation != float("inf") else None,
            "contested": self.contested,
            "defender_id": self.defender.id if self.defender else None,
        }


class CatchResolver:
    """Resolves a pass arriving at its target."""

    def __init__(self, geometry: FieldGeometry):
        self.geometry = geometry

    def nearest_defender(
        self,
        receiver: PlayerAgent,
        defenders: Sequence[PlayerAgent],
    ) -> tuple[Optional[PlayerAgent], float]:
        """Nearest defender and the separation to them in yards."""
        nearest = None
        nearest_dist = float("inf")
        for defender in defenders:
            d = defender.pos.distance_to(receiver.pos)
            if d < nearest_dist:
                nearest = defender
                nearest_dist = d
        return nearest, self.geometry.to_yards(nearest_dist)

    def catch_probability(
        self,
        receiver: PlayerAgent,
        defender: Optional[PlayerAgent],
        separation: float,
    ) -> float:
        """Chance the receiver secures the ball."""
        prob = CATCH_BASE + (
            (receiver.ability("catching") + receiver.ability("hands_consistency")) / 20
        ) * CATCH_SKILL_RANGE

        if separation < CONTESTED_SEPARATION and defender is not None:
            defense = (defender.ability("coverage") + defender.ability("ball_skills_defensive")) / 2
            prob *= CONTEST_BASE + (receiver.ability("contested_catch") - defense) * CONTEST_SKILL_WEIGHT

        for threshold in OPEN_BONUS_YARDS:
            if separation > threshold:
                prob += OPEN_BONUS

        return clamp(prob, MIN_CATCH, MAX_CATCH)

    def interception_probability(
        self,
        defender: Optional[PlayerAgent],
        separation: float,
    ) -> float:
        """Chance the nearest defender picks the ball off (contested only)."""
        if defender is None or separation >= CONTESTED_SEPARATION:
            return 0.0
        return INT_BASE + (defender.ability("ball_hawking") / 10) * INT_HAWK_RANGE

    def calculate_probabilities(
        self,
        receiver: PlayerAgent,
        defenders: Sequence[PlayerAgent],
    ) -> tuple[CatchProbabilities, Optional[PlayerAgent], float]:
        defender, separation = self.nearest_defender(receiver, defenders)
        p_catch = self.catch_probability(receiver, defender, separation)
        p_int = self.interception_probability(defender, separation)
        probabilities = CatchProbabilities(
            complete=max(0.0, 1.0 - p_int - (1.0 - p_catch)),
            incomplete=1.0 - p_catch,
            interception=p_int,
        )
        return probabilities, defender, separation

    def resolve(
        self,
        receiver: PlayerAgent,
        defenders: Sequence[PlayerAgent],
        rng: RandomSource,
    ) -> CatchResolution:
        """Roll the catch. Does not mutate any agent."""
        probabilities, defender, separation = self.calculate_probabilities(receiver, defenders)
        roll = rng.random()

        if roll < probabilities.interception and defender is not None:
            result = CatchResult.INTERCEPTION
        elif roll < probabilities.interception + probabilities.incomplete:
            result = CatchResult.INCOMPLETE
        else:
            result = CatchResult.COMPLETE

        return CatchResolution(
            result=result,
            probabilities=probabilities,
            roll=roll,
            separation=separation,
            contested=separation < CONTESTED_SEPARATION,
            defender=defender,
        )
