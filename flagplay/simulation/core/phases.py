"""Play phases and the forward-only machine that walks them.

A play runs through a fixed ladder:

    IDLE → PRE_SNAP → SNAP → ROUTES_DEVELOPING → QB_READING
         → BALL_IN_AIR → AFTER_CATCH → PLAY_OVER

Each rung may only move to the next one or drop straight to PLAY_OVER
(sack, scramble, incompletion, interception, flag pull, touchdown,
sideline, timeout). Nothing moves backward; reset() is the only way
back to IDLE.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Set


class SimulationPhase(str, Enum):
    """Where the play currently is."""
    IDLE = "idle"                            # Nothing loaded
    PRE_SNAP = "pre_snap"                    # Players set, waiting for snap
    SNAP = "snap"                            # Ball travelling center → QB
    ROUTES_DEVELOPING = "routes_developing"  # Motion and routes, QB not reading yet
    QB_READING = "qb_reading"                # QB scanning targets
    BALL_IN_AIR = "ball_in_air"              # Pass thrown
    AFTER_CATCH = "after_catch"              # Receiver running with the ball
    PLAY_OVER = "play_over"                  # Terminal


_LADDER = (
    SimulationPhase.IDLE,
    SimulationPhase.PRE_SNAP,
    SimulationPhase.SNAP,
    SimulationPhase.ROUTES_DEVELOPING,
    SimulationPhase.QB_READING,
    SimulationPhase.BALL_IN_AIR,
    SimulationPhase.AFTER_CATCH,
)


def _build_transitions() -> Dict[SimulationPhase, Set[SimulationPhase]]:
    table: Dict[SimulationPhase, Set[SimulationPhase]] = {SimulationPhase.PLAY_OVER: set()}
    for rung, following in zip(_LADDER, _LADDER[1:] + (SimulationPhase.PLAY_OVER,)):
        table[rung] = {following, SimulationPhase.PLAY_OVER}
    # A play has to be loaded before it can end
    table[SimulationPhase.IDLE] = {SimulationPhase.PRE_SNAP}
    return table


VALID_TRANSITIONS: Dict[SimulationPhase, Set[SimulationPhase]] = _build_transitions()


# Seconds of simulated time a play may sit in each phase
PHASE_MAX_DURATION: Dict[SimulationPhase, float] = {
    SimulationPhase.PRE_SNAP: 0.5,
    SimulationPhase.SNAP: 0.4,
    SimulationPhase.ROUTES_DEVELOPING: 1.8,
    SimulationPhase.QB_READING: 3.5,
    SimulationPhase.BALL_IN_AIR: 2.0,
    SimulationPhase.AFTER_CATCH: 4.0,
}


def max_play_duration() -> float:
    """Longest a play can run before every phase has timed out."""
    return sum(PHASE_MAX_DURATION.values())


class SimulationError(Exception):
    """Something went wrong driving a play."""


class InvalidPhaseTransition(SimulationError):
    """A phase change that would skip a rung or move backward."""


@dataclass
class PhaseTransition:
    from_phase: SimulationPhase
    to_phase: SimulationPhase
    reason: str
    tick: int
    time: float


TransitionCallback = Callable[[PhaseTransition], None]


class PhaseStateMachine:
    """Holds the current phase and refuses illegal moves.

    Listeners registered with on_transition() hear about every accepted
    change, in registration order, after the phase has been updated.
    """

    def __init__(self, initial_phase: SimulationPhase = SimulationPhase.IDLE):
        self._phase = initial_phase
        self._history: list[PhaseTransition] = []
        self._listeners: list[TransitionCallback] = []

    @property
    def phase(self) -> SimulationPhase:
        return self._phase

    @property
    def history(self) -> list[PhaseTransition]:
        return list(self._history)

    @property
    def max_duration(self) -> float:
        """Timeout for the phase we are in; IDLE and PLAY_OVER never time out."""
        return PHASE_MAX_DURATION.get(self._phase, float("inf"))

    @property
    def is_idle(self) -> bool:
        return self._phase is SimulationPhase.IDLE

    @property
    def is_terminal(self) -> bool:
        return self._phase is SimulationPhase.PLAY_OVER

    def can_transition_to(self, target: SimulationPhase) -> bool:
        return target in VALID_TRANSITIONS[self._phase]

    def transition_to(
        self,
        target: SimulationPhase,
        reason: str = "",
        tick: int = 0,
        time: float = 0.0,
    ) -> PhaseTransition:
        """Move to target, or raise InvalidPhaseTransition."""
        if not self.can_transition_to(target):
            allowed = ", ".join(sorted(p.value for p in VALID_TRANSITIONS[self._phase])) or "none"
            raise InvalidPhaseTransition(
                f"{self._phase.value} -> {target.value} is not allowed (allowed: {allowed})"
            )

        record = PhaseTransition(self._phase, target, reason, tick, time)
        self._phase = target
        self._history.append(record)
        for listener in self._listeners:
            listener(record)
        return record

    def on_transition(self, callback: TransitionCallback) -> None:
        self._listeners.append(callback)

    def reset(self) -> None:
        """Back to IDLE with an empty history. Listeners stay registered."""
        self._phase = SimulationPhase.IDLE
        self._history.clear()
