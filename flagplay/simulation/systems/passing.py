"""QB decision making.

Each tick of the read phase the QB:
1. Checks whether a rusher has reached the pocket (sack)
2. Measures pressure from the nearest rusher
3. Waits out a read time set by decision making (shortened by pressure)
4. Walks the progression looking for a receiver open enough to throw to
5. Under heavy pressure or out of time, settles for the most open
   receiver or scrambles
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Sequence

from ..core.entities import PlayerAgent
from ..core.field import FieldGeometry


logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

SACK_RADIUS = 0.015           # Normalized distance for a rusher to sack
HIGH_PRESSURE_RADIUS = 0.06
MEDIUM_PRESSURE_RADIUS = 0.12

BASE_READ_TIME = 0.6          # Seconds at decision_making 10
READ_TIME_PER_POINT = 0.15    # Added per point below 10
PRESSURE_READ_ADJUST = {      # Seconds taken off the read time
    "high": -0.5,
    "medium": -0.2,
    "low": 0.0,
}

OPEN_THRESHOLD_BASE = 2.0     # Yards of separation at football_iq 0
OPEN_THRESHOLD_IQ_BONUS = 1.5 # Extra yards demanded at football_iq 10
DESPERATION_SEPARATION = 1.0  # Minimum separation for a pressured throw


class PressureLevel(str, Enum):
    """How close the nearest rusher is to the QB."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class QBAction(str, Enum):
    """What the QB does this tick."""
    HOLD = "hold"          # Keep reading
    THROW = "throw"
    SCRAMBLE = "scramble"  # Gives up on the pass
    SACK = "sack"          # Rusher got there first


@dataclass
class TargetScore:
    """A receiver as seen by the QB."""
    receiver: PlayerAgent
    separation: float   # Yards to the nearest defender (inf with no defense)
    read_order: int

    def __repr__(self) -> str:
        return f"TargetScore({self.receiver.id}, sep={self.separation:.1f}yd, read={self.read_order})"


@dataclass
class QBDecision:
    """Outcome of one tick of QB evaluation."""
    action: QBAction
    pressure: PressureLevel = PressureLevel.LOW
    target: Optional[PlayerAgent] = None
    sacker: Optional[PlayerAgent] = None
    reason: str = ""
    scores: list[TargetScore] = field(default_factory=list)


def pressure_from_distance(distance: float) -> PressureLevel:
    if distance < HIGH_PRESSURE_RADIUS:
        return PressureLevel.HIGH
    if distance < MEDIUM_PRESSURE_RADIUS:
        return PressureLevel.MEDIUM
    return PressureLevel.LOW


class QBDecisionEngine:
    """Evaluates sacks, pressure and throw targets for the QB."""

    def __init__(self, geometry: FieldGeometry):
        self.geometry = geometry

    # =========================================================================
    # Pocket
    # =========================================================================

    def find_sacker(
        self,
        qb: PlayerAgent,
        rushers: Iterable[PlayerAgent],
    ) -> Optional[PlayerAgent]:
        """First rusher close enough to sack the QB, if any."""
        for rusher in rushers:
            if rusher.pos.distance_to(qb.pos) < SACK_RADIUS:
                return rusher
        return None

    def closest_rusher_distance(
        self,
        qb: PlayerAgent,
        rushers: Iterable[PlayerAgent],
    ) -> float:
        return min((r.pos.distance_to(qb.pos) for r in rushers), default=float("inf"))

    def read_time(self, qb: PlayerAgent, pressure: PressureLevel) -> float:
        """Seconds the QB reads before looking to throw."""
        base = BASE_READ_TIME + (10 - qb.ability("decision_making")) * READ_TIME_PER_POINT
        return base + PRESSURE_READ_ADJUST[pressure.value]

    def open_threshold(self, qb: PlayerAgent) -> float:
        """Separation in yards the QB needs to call a receiver open."""
        return OPEN_THRESHOLD_BASE + (qb.ability("football_iq") / 10) * OPEN_THRESHOLD_IQ_BONUS

    # =========================================================================
    # Targets
    # =========================================================================

    def score_targets(
        self,
        receivers: Iterable[PlayerAgent],
        defenders: Sequence[PlayerAgent],
    ) -> list[TargetScore]:
        """Score every receiver with a route, in progression order.

        Sorted by read order, then by separation (most open first).
        """
        scores = []
        for receiver in receivers:
            if receiver.route.total_length <= 0:
                continue
            nearest = min(
                (receiver.pos.distance_to(d.pos) for d in defenders),
                default=float("inf"),
            )
            scores.append(TargetScore(
                receiver=receiver,
                separation=self.geometry.to_yards(nearest),
                read_order=receiver.formation.read_order,
            ))

        scores.sort(key=lambda s: (s.read_order, -s.separation))
        return scores

    def select_target(
        self,
        qb: PlayerAgent,
        scores: Sequence[TargetScore],
        pressure: PressureLevel,
    ) -> Optional[PlayerAgent]:
        """Pick a receiver from the scored progression, or None."""
        if not scores:
            return None

        threshold = self.open_threshold(qb)
        for score in scores:
            if score.separation >= threshold:
                return score.receiver

        if pressure == PressureLevel.HIGH:
            best = max(scores, key=lambda s: s.separation)
            if best.separation > DESPERATION_SEPARATION:
                return best.receiver

        return None

    # =========================================================================
    # Decision
    # =========================================================================

    def decide(
        self,
        qb: Optional[PlayerAgent],
        rushers: Sequence[PlayerAgent],
        receivers: Sequence[PlayerAgent],
        defenders: Sequence[PlayerAgent],
        phase_time: float,
        timeout: float,
    ) -> QBDecision:
        """Evaluate one tick of the read phase.

        Args:
            phase_time: Seconds spent reading so far
            timeout: Read phase limit; reaching it forces a throw or scramble
        """
        if qb is None:
            return QBDecision(action=QBAction.SCRAMBLE, reason="No QB")

        sacker = self.find_sacker(qb, rushers)
        if sacker is not None:
            return QBDecision(action=QBAction.SACK, sacker=sacker, reason="rusher reached QB")

        pressure = pressure_from_distance(self.closest_rusher_distance(qb, rushers))
        forced = phase_time >= timeout
        ready = phase_time >= self.read_time(qb, pressure)

        if not (ready or forced):
            return QBDecision(action=QBAction.HOLD, pressure=pressure, reason="reading")

        scores = self.score_targets(receivers, defenders)
        target = self.select_target(qb, scores, pressure)
        if target is not None:
            logger.debug("QB %s throws to %s (pressure %s)", qb.id, target.id, pressure.value)
            return QBDecision(
                action=QBAction.THROW,
                pressure=pressure,
                target=target,
                reason="receiver open",
                scores=scores,
            )

        if pressure == PressureLevel.HIGH or forced:
            reason = "out of time" if forced else "heavy pressure"
            return QBDecision(action=QBAction.SCRAMBLE, pressure=pressure, reason=reason, scores=scores)

        return QBDecision(action=QBAction.HOLD, pressure=pressure, reason="no one open", scores=scores)
