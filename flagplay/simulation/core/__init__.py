"""Core layer - foundational types and utilities."""

from .vec2 import Vec2
from .field import (
    DEFAULT_ENDZONE_SIZE,
    DEFAULT_FIELD_LENGTH,
    DEFAULT_FIELD_WIDTH,
    DEFAULT_LINE_OF_SCRIMMAGE,
    LEFT_SIDELINE,
    RIGHT_SIDELINE,
    FieldGeometry,
    FieldSettings,
)
from .attributes import AttributeLookup, AttributeSource, attr, resolve
from .entities import (
    BallState,
    FormationPlayer,
    PlayerAgent,
    RosterPlayer,
    RouteSegment,
    SegmentType,
    Side,
    match_roster,
)
from .clock import AsyncioScheduler, Clock, FrameScheduler, ManualScheduler
from .events import EventLog, EventType, SimulationEvent
from .phases import (
    PHASE_MAX_DURATION,
    InvalidPhaseTransition,
    PhaseStateMachine,
    PhaseTransition,
    SimulationError,
    SimulationPhase,
)
from .variance import RandomSource, make_random_source

__all__ = [
    "Vec2",
    "DEFAULT_ENDZONE_SIZE",
    "DEFAULT_FIELD_LENGTH",
    "DEFAULT_FIELD_WIDTH",
    "DEFAULT_LINE_OF_SCRIMMAGE",
    "LEFT_SIDELINE",
    "RIGHT_SIDELINE",
    "FieldGeometry",
    "FieldSettings",
    "AttributeLookup",
    "AttributeSource",
    "attr",
    "resolve",
    "BallState",
    "FormationPlayer",
    "PlayerAgent",
    "RosterPlayer",
    "RouteSegment",
    "SegmentType",
    "Side",
    "match_roster",
    "AsyncioScheduler",
    "Clock",
    "FrameScheduler",
    "ManualScheduler",
    "EventLog",
    "EventType",
    "SimulationEvent",
    "PHASE_MAX_DURATION",
    "InvalidPhaseTransition",
    "PhaseStateMachine",
    "PhaseTransition",
    "SimulationError",
    "SimulationPhase",
    "RandomSource",
    "make_random_source",
]
