"""Flag football play simulation.

Usage:
    from flagplay.simulation import Simulation, FieldSettings

    sim = Simulation()
    sim.initialize(offense, defense, roster, FieldSettings())
    result = sim.run_to_completion()
"""

from .config import SimulationConfig, get_config
from .core import (
    BallState,
    EventType,
    FieldGeometry,
    FieldSettings,
    FormationPlayer,
    InvalidPhaseTransition,
    RosterPlayer,
    RouteSegment,
    SegmentType,
    Side,
    SimulationError,
    SimulationEvent,
    SimulationPhase,
    Vec2,
)
from .export import FrameRecorder, FrameSnapshot
from .orchestrator import PlayOutcome, PlayResult, Simulation, SimulationNotInitialized

__all__ = [
    "SimulationConfig",
    "get_config",
    "BallState",
    "EventType",
    "FieldGeometry",
    "FieldSettings",
    "FormationPlayer",
    "InvalidPhaseTransition",
    "RosterPlayer",
    "RouteSegment",
    "SegmentType",
    "Side",
    "SimulationError",
    "SimulationEvent",
    "SimulationPhase",
    "Vec2",
    "FrameRecorder",
    "FrameSnapshot",
    "PlayOutcome",
    "PlayResult",
    "Simulation",
    "SimulationNotInitialized",
]
