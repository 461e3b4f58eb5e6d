"""Orchestrator - Main simulation loop.

A Simulation owns everything about one play: the agents, the ball, the
phase machine, the clock, the event log and the random source. It is
driven by frames from a FrameScheduler (or stepped directly) and
publishes a fresh position map after every tick.

Play Lifecycle:
    1. initialize - Build agents from the formation and roster
    2. pre_snap   - Brief hold at alignment
    3. snap       - Ball travels center → QB
    4. routes_developing - Motion and routes, defense reacts after a beat
    5. qb_reading - QB reads the progression (sack / throw / scramble)
    6. ball_in_air - Pass travels to its lead point, then catch resolution
    7. after_catch - Carrier runs until flag pull, touchdown or sideline
    8. play_over  - Result available

Usage:
    sim = Simulation(rng=random.Random(7))
    sim.initialize(offense, defense, roster, FieldSettings())
    result = sim.run_to_completion()
    print(result.format_summary())
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Sequence

from .config import SimulationConfig, get_config
from .core.clock import Clock, FrameScheduler, ManualScheduler
from .core.entities import BallState, FormationPlayer, PlayerAgent, RosterPlayer, Side, match_roster
from .core.events import EventLog, EventType, SimulationEvent
from .core.field import FieldGeometry, FieldSettings
from .core.phases import (
    PHASE_MAX_DURATION,
    PhaseStateMachine,
    PhaseTransition,
    SimulationError,
    SimulationPhase,
    max_play_duration,
)
from .core.variance import RandomSource, make_random_source
from .core.vec2 import Vec2
from .physics.ball_flight import ThrowPlan, plan_throw
from .physics.kinematics import KinematicModel, step_toward
from .physics.paths import PathProgress, build_motion_path, build_route_path
from .resolution.catch import CatchResolver, CatchResult
from .resolution.flag_pull import FlagPullResolver
from .systems.ballcarrier import BallcarrierSystem
from .systems.coverage import DefenseAI
from .systems.passing import QBAction, QBDecisionEngine
from .systems.route_runner import RouteRunner


logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

SNAP_BALL_SPEED = 0.4        # Normalized units per second
SNAP_ARRIVAL_RADIUS = 0.005
DEFENSE_REACTION_DELAY = 0.3 # Seconds into routes_developing before defense moves


class SimulationNotInitialized(SimulationError):
    """Raised when stepping a simulation that has no play loaded."""
    pass


class PlayOutcome(str, Enum):
    """How a play ended."""
    COMPLETION = "completion"
    INCOMPLETION = "incompletion"
    INTERCEPTION = "interception"
    SACK = "sack"
    SCRAMBLE = "scramble"
    TOUCHDOWN = "touchdown"


# Event logged when a play ends with each outcome
OUTCOME_EVENT_TYPES = {
    PlayOutcome.COMPLETION: EventType.INFO,
    PlayOutcome.INCOMPLETION: EventType.INCOMPLETION,
    PlayOutcome.INTERCEPTION: EventType.INTERCEPTION,
    PlayOutcome.SACK: EventType.SACK,
    PlayOutcome.SCRAMBLE: EventType.SCRAMBLE,
    PlayOutcome.TOUCHDOWN: EventType.TOUCHDOWN,
}


# =============================================================================
# Play Result
# =============================================================================

@dataclass
class PlayResult:
    """Result of a completed play.

    Contains outcome, yardage and the full event log.
    """
    outcome: PlayOutcome
    yards: int = 0
    events: list[SimulationEvent] = field(default_factory=list)

    duration: float = 0.0
    passer_id: Optional[str] = None
    receiver_id: Optional[str] = None
    defender_id: Optional[str] = None   # Sacker, interceptor or flag puller
    phase_history: list[PhaseTransition] = field(default_factory=list)

    def format_summary(self) -> str:
        """Format a one-line summary."""
        if self.outcome == PlayOutcome.COMPLETION:
            return f"Complete to {self.receiver_id} for {self.yards} yards"
        elif self.outcome == PlayOutcome.TOUCHDOWN:
            return f"Touchdown by {self.receiver_id} ({self.yards} yards)"
        elif self.outcome == PlayOutcome.INCOMPLETION:
            return f"Incomplete intended for {self.receiver_id}"
        elif self.outcome == PlayOutcome.INTERCEPTION:
            return f"Intercepted by {self.defender_id}"
        elif self.outcome == PlayOutcome.SACK:
            return f"Sacked by {self.defender_id} ({self.yards} yards)"
        else:
            return f"{self.outcome.value}: {self.yards} yards"

    def to_dict(self) -> dict:
        return {
            "outcome": self.outcome.value,
            "yards": self.yards,
            "events": [e.to_dict() for e in self.events],
            "duration": round(self.duration, 3),
            "passer_id": self.passer_id,
            "receiver_id": self.receiver_id,
            "defender_id": self.defender_id,
            "phases": [t.to_phase.value for t in self.phase_history],
            "summary": self.format_summary(),
        }


FrameListener = Callable[["Simulation"], None]


# =============================================================================
# Simulation
# =============================================================================

class Simulation:
    """Runs one flag football play.

    Usage:
        sim = Simulation(scheduler=AsyncioScheduler())
        sim.subscribe(lambda s: render(s.positions, s.ball))
        sim.initialize(offense, defense, roster, field_settings)
        sim.start()
    """

    def __init__(
        self,
        scheduler: Optional[FrameScheduler] = None,
        rng: Optional[RandomSource] = None,
        config: Optional[SimulationConfig] = None,
    ):
        self.config = config or get_config()
        self.scheduler: FrameScheduler = scheduler or ManualScheduler()
        self.rng: RandomSource = rng or make_random_source(self.config.seed)
        self.playback_speed = self.config.playback_speed

        # Core components
        self.clock = Clock()
        self.event_log = EventLog()
        self.phases = PhaseStateMachine()
        self.phases.on_transition(self._on_transition)

        # Play state
        self._agents: dict[str, PlayerAgent] = {}
        self._ball = BallState()
        self._positions: dict[str, Vec2] = {}
        self._listeners: list[FrameListener] = []
        self._qb_id: Optional[str] = None
        self._center_id: Optional[str] = None
        self._throw: Optional[ThrowPlan] = None
        self._flight_elapsed = 0.0
        self._outcome: Optional[PlayOutcome] = None
        self._yards = 0
        self._passer_id: Optional[str] = None
        self._receiver_id: Optional[str] = None
        self._defender_id: Optional[str] = None

        # Frame loop
        self._running = False
        self._frame_handle: Optional[object] = None
        self._last_timestamp = 0.0

        # Per-play systems, built by initialize()
        self.geometry = FieldGeometry.from_settings(FieldSettings())
        self._build_systems()

        self._handlers = {
            SimulationPhase.PRE_SNAP: self._tick_pre_snap,
            SimulationPhase.SNAP: self._tick_snap,
            SimulationPhase.ROUTES_DEVELOPING: self._tick_routes_developing,
            SimulationPhase.QB_READING: self._tick_qb_reading,
            SimulationPhase.BALL_IN_AIR: self._tick_ball_in_air,
            SimulationPhase.AFTER_CATCH: self._tick_after_catch,
        }

    def _build_systems(self) -> None:
        self.model = KinematicModel(self.geometry)
        self.route_runner = RouteRunner(self.model, self._qb_id, self._center_id)
        self.defense_ai = DefenseAI(self.model)
        self.qb_engine = QBDecisionEngine(self.geometry)
        self.ballcarrier = BallcarrierSystem(self.model, self.route_runner)
        self.catch_resolver = CatchResolver(self.geometry)
        self.flag_pull_resolver = FlagPullResolver()

    # =========================================================================
    # Published state
    # =========================================================================

    @property
    def phase(self) -> SimulationPhase:
        return self.phases.phase

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def positions(self) -> dict[str, Vec2]:
        """Player positions as of the last published frame.

        A new dict is built every tick, so a reference held by a consumer
        is never mutated afterwards.
        """
        return self._positions

    @property
    def ball(self) -> BallState:
        return self._ball.copy()

    @property
    def events(self) -> list[SimulationEvent]:
        return self.event_log.history

    @property
    def agents(self) -> list[PlayerAgent]:
        return list(self._agents.values())

    def get_agent(self, player_id: Optional[str]) -> Optional[PlayerAgent]:
        if player_id is None:
            return None
        return self._agents.get(player_id)

    @property
    def qb(self) -> Optional[PlayerAgent]:
        return self.get_agent(self._qb_id)

    @property
    def center(self) -> Optional[PlayerAgent]:
        return self.get_agent(self._center_id)

    @property
    def ball_carrier(self) -> Optional[PlayerAgent]:
        for agent in self._agents.values():
            if agent.has_ball:
                return agent
        return None

    @property
    def throw_plan(self) -> Optional[ThrowPlan]:
        return self._throw

    @property
    def flight_progress(self) -> Optional[float]:
        """Ball flight parameter in [0, 1] while a pass is in the air."""
        if self._throw is None:
            return None
        return self._throw.progress(self._flight_elapsed)

    def subscribe(self, listener: FrameListener) -> Callable[[], None]:
        """Call listener after every published frame.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def get_result(self) -> Optional[PlayResult]:
        """The play result once the play is over, else None."""
        if self.phase != SimulationPhase.PLAY_OVER or self._outcome is None:
            return None
        return PlayResult(
            outcome=self._outcome,
            yards=self._yards,
            events=self.event_log.history,
            duration=self.clock.current_time,
            passer_id=self._passer_id,
            receiver_id=self._receiver_id,
            defender_id=self._defender_id,
            phase_history=self.phases.history,
        )

    # =========================================================================
    # Setup
    # =========================================================================

    def initialize(
        self,
        offense: Sequence[FormationPlayer],
        defense: Sequence[FormationPlayer],
        roster: Sequence[RosterPlayer] = (),
        field_settings: Optional[FieldSettings] = None,
    ) -> None:
        """Load a play. Anything previously loaded is discarded."""
        self.reset()

        self.geometry = FieldGeometry.from_settings(field_settings or FieldSettings())

        qb = next((p for p in offense if p.is_quarterback), None)
        center = next((p for p in offense if p.is_center), None)
        self._qb_id = qb.id if qb else None
        self._center_id = center.id if center else None
        self._build_systems()

        roster = list(roster)
        for player in (*offense, *defense):
            self._agents[player.id] = self._create_agent(player, roster)

        start = center or qb
        if start is not None:
            self._ball = BallState(pos=start.pos, visible=True, in_flight=False)

        self.phases.transition_to(SimulationPhase.PRE_SNAP, reason="players set", time=0.0)
        self._publish()
        self._log(EventType.INFO, "Players set")
        logger.info(
            "Play loaded: %d offense, %d defense, QB=%s, C=%s, LOS y=%.3f",
            len(offense), len(defense), self._qb_id, self._center_id, self.geometry.los_y,
        )

    def initialize_preview(
        self,
        offense: Sequence[FormationPlayer],
        roster: Sequence[RosterPlayer] = (),
        field_settings: Optional[FieldSettings] = None,
    ) -> None:
        """Load an offense-only play, as in the designer's play-test mode."""
        self.initialize(
            [p for p in offense if p.side == Side.OFFENSE],
            [],
            roster,
            field_settings,
        )

    def _create_agent(self, player: FormationPlayer, roster: list[RosterPlayer]) -> PlayerAgent:
        return PlayerAgent(
            formation=player,
            roster=match_roster(player, roster),
            pos=player.pos,
            motion=PathProgress(build_motion_path(player)),
            route=PathProgress(build_route_path(player)),
            zone_target=player.zone_target or player.pos,
            is_rusher=player.is_rusher,
        )

    # =========================================================================
    # Frame loop
    # =========================================================================

    def start(self) -> None:
        """Begin requesting frames. No-op if idle, over or already running."""
        if self._running:
            return
        if self.phase in (SimulationPhase.IDLE, SimulationPhase.PLAY_OVER):
            logger.warning("start() ignored in phase %s", self.phase.value)
            return
        self._running = True
        self._last_timestamp = self.scheduler.now()
        self._frame_handle = self.scheduler.request_frame(self.tick)

    def pause(self) -> None:
        """Stop requesting frames. State is kept."""
        self._running = False
        if self._frame_handle is not None:
            self.scheduler.cancel_frame(self._frame_handle)
            self._frame_handle = None

    def stop(self) -> None:
        """Pause and return to IDLE, keeping the last published frame."""
        self.pause()
        self.phases.reset()

    def reset(self) -> None:
        """Stop and discard the loaded play."""
        self.stop()
        self.clock.reset()
        self.event_log.clear()
        self._agents = {}
        self._ball = BallState()
        self._positions = {}
        self._qb_id = None
        self._center_id = None
        self._throw = None
        self._flight_elapsed = 0.0
        self._outcome = None
        self._yards = 0
        self._passer_id = None
        self._receiver_id = None
        self._defender_id = None

    def tick(self, timestamp: float) -> None:
        """Frame callback: advance by the time since the previous frame."""
        self._frame_handle = None
        if not self._running:
            return

        raw_dt = max(0.0, timestamp - self._last_timestamp)
        self._last_timestamp = timestamp
        self._advance(self._scale_dt(raw_dt))

        if self.phase == SimulationPhase.PLAY_OVER:
            self.pause()
            return
        self._frame_handle = self.scheduler.request_frame(self.tick)

    def step(self, raw_dt: Optional[float] = None) -> None:
        """Advance one tick synchronously, outside the frame loop.

        Args:
            raw_dt: Wall-clock delta before clamping and playback speed,
                defaults to the configured frame interval

        Raises:
            SimulationNotInitialized: If no play is loaded
        """
        if self.phase == SimulationPhase.IDLE:
            raise SimulationNotInitialized("initialize() must be called before step()")
        if self.phase == SimulationPhase.PLAY_OVER:
            return
        if raw_dt is None:
            raw_dt = self.config.frame_interval
        self._advance(self._scale_dt(raw_dt))

    def run_to_completion(self, frame_dt: Optional[float] = None) -> PlayResult:
        """Step at a fixed frame interval until the play is over.

        Raises:
            SimulationNotInitialized: If no play is loaded
            ValueError: If frame_dt is not positive
        """
        if self.phase == SimulationPhase.IDLE:
            raise SimulationNotInitialized("initialize() must be called before run_to_completion()")
        if frame_dt is None:
            frame_dt = self.config.frame_interval
        if frame_dt <= 0:
            raise ValueError(f"frame_dt must be positive, got {frame_dt}")

        dt = self._scale_dt(frame_dt)
        if dt <= 0:
            raise ValueError(f"playback_speed must be positive, got {self.playback_speed}")
        # Every phase times out, so the play ends within this many ticks
        max_ticks = math.ceil(max_play_duration() / dt) + len(PHASE_MAX_DURATION) + 1

        ticks = 0
        while self.phase != SimulationPhase.PLAY_OVER and ticks < max_ticks:
            self.step(frame_dt)
            ticks += 1

        result = self.get_result()
        if result is None:
            raise SimulationError(f"Play did not finish after {ticks} ticks (phase {self.phase.value})")
        return result

    def _scale_dt(self, raw_dt: float) -> float:
        return min(raw_dt, self.config.max_frame_dt) * self.playback_speed

    def _advance(self, dt: float) -> None:
        self.clock.advance(dt)
        handler = self._handlers.get(self.phase)
        if handler is not None:
            handler(dt)
        self._publish()

    def _publish(self) -> None:
        self._positions = {agent.id: agent.pos for agent in self._agents.values()}
        for listener in list(self._listeners):
            listener(self)

    # =========================================================================
    # Phase handlers
    # =========================================================================

    def _tick_pre_snap(self, dt: float) -> None:
        if self._phase_timed_out():
            self._transition(SimulationPhase.SNAP, "snap count")
            self._log(EventType.SNAP, "Ball snapped!")

    def _tick_snap(self, dt: float) -> None:
        qb = self.qb
        if qb is None or self.center is None:
            if qb is not None:
                self._give_qb_ball(qb)
            self._finish_snap("no snap exchange")
            return

        distance = self._ball.pos.distance_to(qb.pos)
        if distance < SNAP_ARRIVAL_RADIUS or self._phase_timed_out():
            self._give_qb_ball(qb)
            self._finish_snap("ball secured")
        else:
            self._ball.pos = step_toward(self._ball.pos, qb.pos, SNAP_BALL_SPEED * dt)

    def _give_qb_ball(self, qb: PlayerAgent) -> None:
        self._ball.pos = qb.pos
        self._ball.visible = True
        qb.has_ball = True

    def _finish_snap(self, reason: str) -> None:
        self._transition(SimulationPhase.ROUTES_DEVELOPING, reason)
        if any(a.is_offense and not a.motion.done for a in self._agents.values()):
            self._log(EventType.MOTION, "Pre-snap motion")

    def _tick_routes_developing(self, dt: float) -> None:
        self._run_offense(dt)
        # Defenders wait a beat before reacting to the snap
        if self.clock.phase_time > DEFENSE_REACTION_DELAY:
            self._run_defense(dt)
        self._follow_qb_with_ball()

        if self._phase_timed_out():
            self._transition(SimulationPhase.QB_READING, "routes developed")

    def _tick_qb_reading(self, dt: float) -> None:
        self._run_offense(dt)
        self._run_defense(dt)
        self._follow_qb_with_ball()

        decision = self.qb_engine.decide(
            self.qb,
            self._rushers(),
            self._receivers(),
            self._defenders(),
            phase_time=self.clock.phase_time,
            timeout=PHASE_MAX_DURATION[SimulationPhase.QB_READING],
        )

        if decision.action == QBAction.SACK:
            sacker = decision.sacker
            qb = self.qb
            self._passer_id = qb.id
            self._end_play(
                PlayOutcome.SACK,
                f"Sack by {sacker.name}!",
                player_id=sacker.id,
                yards=self.geometry.yards_gained(qb.pos.y),
                defender_id=sacker.id,
            )
        elif decision.action == QBAction.THROW:
            self._start_throw(self.qb, decision.target)
        elif decision.action == QBAction.SCRAMBLE:
            qb = self.qb
            if qb is None:
                self._end_play(PlayOutcome.SCRAMBLE, "No QB")
            else:
                self._passer_id = qb.id
                self._end_play(
                    PlayOutcome.SCRAMBLE,
                    f"{qb.formation.name or 'QB'} scrambles, no open receiver",
                    player_id=qb.id,
                )

    def _tick_ball_in_air(self, dt: float) -> None:
        self._run_offense(dt)
        self._run_defense(dt)

        self._flight_elapsed += dt
        plan = self._throw
        self._ball.pos = plan.position_at(self._flight_elapsed)
        self._ball.in_flight = True

        if plan.arrived(self._flight_elapsed) or self._phase_timed_out():
            target = self.get_agent(plan.receiver_id)
            if target is None:
                self._end_play(PlayOutcome.INCOMPLETION, "Incomplete, no target")
                return
            self._resolve_catch(target)

    def _tick_after_catch(self, dt: float) -> None:
        carrier = self.ball_carrier
        if carrier is None:
            self._end_play(PlayOutcome.COMPLETION, "Play over")
            return

        self.ballcarrier.update(carrier, dt)
        self._ball.pos = carrier.pos
        self._ball.in_flight = False

        defenders = self._defenders()
        self.defense_ai.pursue_carrier(defenders, carrier, dt)

        yards = self.geometry.yards_gained(carrier.pos.y)

        pull = self.flag_pull_resolver.resolve(carrier, defenders, self.rng)
        if pull is not None:
            self._log(
                EventType.FLAG_PULL,
                f"Flag pulled by {pull.defender.name} on {carrier.name}!",
                pull.defender.id,
            )
            self._end_play(
                PlayOutcome.COMPLETION,
                f"{carrier.name} down after {yards} yards",
                player_id=carrier.id,
                yards=yards,
                defender_id=pull.defender.id,
            )
            return

        if carrier.pos.y < self.geometry.touchdown_y:
            self._end_play(
                PlayOutcome.TOUCHDOWN,
                f"TOUCHDOWN! {carrier.name} scores!",
                player_id=carrier.id,
                yards=yards,
            )
            return

        if self.geometry.is_out_of_bounds(carrier.pos.x):
            self._end_play(PlayOutcome.COMPLETION, "Out of bounds", player_id=carrier.id, yards=yards)
            return

        if self._phase_timed_out():
            self._end_play(PlayOutcome.COMPLETION, "Play ended", player_id=carrier.id, yards=yards)

    # =========================================================================
    # Passing
    # =========================================================================

    def _start_throw(self, qb: PlayerAgent, target: PlayerAgent) -> None:
        self._throw = plan_throw(qb, target, self.model, self.rng)
        self._flight_elapsed = 0.0
        self._passer_id = qb.id
        self._receiver_id = target.id

        qb.has_ball = False
        self._ball.pos = self._throw.start
        self._ball.in_flight = True

        self._transition(SimulationPhase.BALL_IN_AIR, f"pass to {target.id}")
        self._log(
            EventType.THROW,
            f"{qb.formation.name or 'QB'} throws to {target.name}",
            target.id,
        )

    def _resolve_catch(self, target: PlayerAgent) -> None:
        resolution = self.catch_resolver.resolve(target, self._defenders(), self.rng)
        logger.debug("Catch resolution: %s", resolution.to_dict())

        if resolution.result == CatchResult.INTERCEPTION:
            defender = resolution.defender
            defender.has_ball = True
            self._ball.pos = defender.pos
            self._ball.in_flight = False
            self._end_play(
                PlayOutcome.INTERCEPTION,
                f"Intercepted by {defender.name}!",
                player_id=defender.id,
                defender_id=defender.id,
            )
        elif resolution.result == CatchResult.INCOMPLETE:
            self._ball.in_flight = False
            self._end_play(PlayOutcome.INCOMPLETION, f"Incomplete pass to {target.name}", player_id=target.id)
        else:
            target.has_ball = True
            self._ball.pos = target.pos
            self._ball.in_flight = False
            self._yards = self.geometry.yards_gained(target.pos.y)
            self._transition(SimulationPhase.AFTER_CATCH, "catch")
            self._log(EventType.CATCH, f"Caught by {target.name}!", target.id)

    # =========================================================================
    # Movement helpers
    # =========================================================================

    def _run_offense(self, dt: float) -> None:
        agents = list(self._agents.values())
        self.route_runner.run_motion(agents, dt)
        for agent in self.route_runner.run_routes(agents, dt):
            self._log(EventType.ROUTE, f"{agent.name} completes route", agent.id)

    def _run_defense(self, dt: float) -> None:
        self.defense_ai.run(self._defenders(), self.qb, self._receivers(), dt)

    def _follow_qb_with_ball(self) -> None:
        qb = self.qb
        if qb is not None and qb.has_ball:
            self._ball.pos = qb.pos
            self._ball.in_flight = False

    def _defenders(self) -> list[PlayerAgent]:
        return [a for a in self._agents.values() if a.is_defense]

    def _rushers(self) -> list[PlayerAgent]:
        return [a for a in self._agents.values() if a.is_rusher]

    def _receivers(self) -> list[PlayerAgent]:
        return [a for a in self._agents.values() if self.route_runner.runs_routes(a)]

    # =========================================================================
    # State helpers
    # =========================================================================

    def _phase_timed_out(self) -> bool:
        return self.clock.phase_time >= self.phases.max_duration

    def _transition(self, phase: SimulationPhase, reason: str) -> None:
        self.phases.transition_to(
            phase,
            reason=reason,
            tick=self.clock.tick_count,
            time=self.clock.current_time,
        )

    def _on_transition(self, transition: PhaseTransition) -> None:
        self.clock.reset_phase()
        self.clock.mark_event(transition.to_phase.value)
        logger.debug(
            "[%.2fs] %s -> %s (%s)",
            transition.time, transition.from_phase.value, transition.to_phase.value, transition.reason,
        )

    def _end_play(
        self,
        outcome: PlayOutcome,
        message: str,
        player_id: Optional[str] = None,
        yards: int = 0,
        defender_id: Optional[str] = None,
    ) -> None:
        self._outcome = outcome
        self._yards = yards
        if defender_id is not None:
            self._defender_id = defender_id
        self._transition(SimulationPhase.PLAY_OVER, outcome.value)
        self._log(OUTCOME_EVENT_TYPES[outcome], message, player_id)
        logger.info("Play over: %s, %d yards (%.2fs)", outcome.value, yards, self.clock.current_time)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Play-by-play:\n%s", self.event_log.format_history())

    def _log(self, event_type: EventType, message: str, player_id: Optional[str] = None) -> None:
        self.event_log.emit_simple(event_type, self.clock.current_time, message, player_id)

    def __repr__(self) -> str:
        return f"Simulation(phase={self.phase.value}, agents={len(self._agents)}, {self.clock!r})"
