"""Core entities: formation input, roster input, live agents and ball.

FormationPlayer and RosterPlayer are owned by the editor and roster
subsystems and are never mutated here. PlayerAgent is the simulation's
per-player state, created at initialize and discarded at reset.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

from .attributes import attr
from .vec2 import Vec2

if TYPE_CHECKING:
    from ..physics.paths import PathProgress


# Read order for receivers with no progression assigned
UNASSIGNED_READ_ORDER = 999

DEFAULT_COVERAGE_RADIUS = 5.0  # yards


class Side(str, Enum):
    """Which team a player lines up for."""
    OFFENSE = "offense"
    DEFENSE = "defense"


class SegmentType(str, Enum):
    """How a route leg was drawn."""
    STRAIGHT = "straight"
    CURVE = "curve"
    OPTION = "option"  # Drawn as a read option, not run in simulation


# =============================================================================
# Formation input
# =============================================================================

@dataclass(frozen=True)
class RouteSegment:
    """One leg of a receiver's route."""
    points: tuple[Vec2, ...]
    type: SegmentType = SegmentType.STRAIGHT
    read_order: Optional[int] = None

    @property
    def is_simulated(self) -> bool:
        return self.type != SegmentType.OPTION


@dataclass(frozen=True)
class FormationPlayer:
    """A player as placed on the play canvas.

    Attributes:
        id: Canvas player id
        x, y: Normalized start position
        side: Offense or defense
        position: Position label (QB, WR, C, DB, RSH, MLB)
        designation: Letter designation (Q, X, Y, Z, C, R, D1...)
        route: Route segments in order (empty = no route)
        motion_path: Points walked before the route begins
        zone_target: Coverage zone center, only when the zone was unlocked
        coverage_radius: Zone radius in yards
        primary_target: QB's first look regardless of read order
    """
    id: str
    x: float
    y: float
    side: Side
    position: str = ""
    designation: str = ""
    name: str = ""
    number: Optional[int] = None
    route: tuple[RouteSegment, ...] = ()
    motion_path: tuple[Vec2, ...] = ()
    zone_target: Optional[Vec2] = None
    coverage_radius: Optional[float] = None
    primary_target: bool = False

    @property
    def pos(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def is_quarterback(self) -> bool:
        return self.side == Side.OFFENSE and (
            self.position == "QB" or self.designation in ("Q", "QB")
        )

    @property
    def is_center(self) -> bool:
        return self.side == Side.OFFENSE and (self.position == "C" or self.designation == "C")

    @property
    def is_rusher(self) -> bool:
        return self.side == Side.DEFENSE and (self.designation == "R" or self.position == "RSH")

    @property
    def read_order(self) -> int:
        """Place in the QB's progression (lower is read first)."""
        if self.primary_target:
            return 0
        orders = [s.read_order for s in self.route if s.read_order is not None]
        return min(orders) if orders else UNASSIGNED_READ_ORDER

    @property
    def display_name(self) -> str:
        return self.name or self.designation or self.position or self.id


# =============================================================================
# Roster input
# =============================================================================

@dataclass(frozen=True)
class RosterPlayer:
    """A roster entry with abilities on a 1-10 scale."""
    id: str
    name: str = ""
    number: Optional[int] = None
    universal: dict[str, float] = field(default_factory=dict)
    offense: dict[str, float] = field(default_factory=dict)
    defense: dict[str, float] = field(default_factory=dict)


def match_roster(
    player: FormationPlayer,
    roster: list[RosterPlayer],
) -> Optional[RosterPlayer]:
    """Find the roster entry for a canvas player (by id, else name + number)."""
    for r in roster:
        if r.id == player.id:
            return r
    if not player.name:
        return None
    for r in roster:
        if r.name == player.name and r.number == player.number:
            return r
    return None


# =============================================================================
# Simulation state
# =============================================================================

@dataclass
class PlayerAgent:
    """Live state of one player during a simulated play."""
    formation: FormationPlayer
    roster: Optional[RosterPlayer]
    pos: Vec2
    motion: PathProgress
    route: PathProgress
    zone_target: Vec2
    is_rusher: bool = False
    reached_zone: bool = False
    has_ball: bool = False

    @property
    def id(self) -> str:
        return self.formation.id

    @property
    def side(self) -> Side:
        return self.formation.side

    @property
    def is_offense(self) -> bool:
        return self.formation.side == Side.OFFENSE

    @property
    def is_defense(self) -> bool:
        return self.formation.side == Side.DEFENSE

    @property
    def name(self) -> str:
        return self.formation.display_name

    def ability(self, key: str) -> float:
        return attr(self.roster, key)

    def __repr__(self) -> str:
        flags = []
        if self.has_ball:
            flags.append("BALL")
        if self.is_rusher:
            flags.append("RUSH")
        flag_str = f" [{','.join(flags)}]" if flags else ""
        return f"PlayerAgent({self.id} {self.side.value} @ {self.pos}{flag_str})"


@dataclass
class BallState:
    """Ball as shown to the renderer."""
    pos: Vec2 = field(default_factory=lambda: Vec2(0.5, 0.5))
    visible: bool = False
    in_flight: bool = False

    def copy(self) -> BallState:
        return BallState(pos=self.pos, visible=self.visible, in_flight=self.in_flight)

    def to_dict(self) -> dict:
        return {
            "x": self.pos.x,
            "y": self.pos.y,
            "visible": self.visible,
            "in_flight": self.in_flight,
        }
