"""Shared pytest fixtures for flagplay tests."""

from typing import Optional, Sequence

import pytest

from flagplay.simulation.config import SimulationConfig
from flagplay.simulation.core.entities import (
    FormationPlayer,
    PlayerAgent,
    RosterPlayer,
    RouteSegment,
    SegmentType,
    Side,
)
from flagplay.simulation.core.field import FieldGeometry, FieldSettings
from flagplay.simulation.core.vec2 import Vec2
from flagplay.simulation.physics.kinematics import KinematicModel
from flagplay.simulation.physics.paths import PathProgress, build_motion_path, build_route_path


class FixedRandom:
    """Scripted random source.

    Returns the given values in order, then keeps returning the last one.
    """

    def __init__(self, *values: float):
        self.values = list(values) or [0.5]
        self.calls = 0

    def random(self) -> float:
        index = min(self.calls, len(self.values) - 1)
        self.calls += 1
        return self.values[index]


# =============================================================================
# Field Fixtures
# =============================================================================


@pytest.fixture
def field_settings() -> FieldSettings:
    """Default 5v5 field: 50 yards, 7 yard endzones, LOS at the 5."""
    return FieldSettings()


@pytest.fixture
def geometry(field_settings) -> FieldGeometry:
    return FieldGeometry.from_settings(field_settings)


@pytest.fixture
def model(geometry) -> KinematicModel:
    return KinematicModel(geometry)


@pytest.fixture
def sim_config() -> SimulationConfig:
    """Config independent of the environment."""
    return SimulationConfig(
        playback_speed=1.0,
        max_frame_dt=0.05,
        frame_interval=1 / 60,
        seed=None,
        log_level="INFO",
    )


# =============================================================================
# Randomness
# =============================================================================


@pytest.fixture
def fixed_random():
    """Factory for scripted random sources."""
    return FixedRandom


# =============================================================================
# Player Fixtures
# =============================================================================


def _route(*points: tuple[float, float], read_order: Optional[int] = None) -> tuple[RouteSegment, ...]:
    if not points:
        return ()
    return (RouteSegment(
        points=tuple(Vec2(x, y) for x, y in points),
        type=SegmentType.STRAIGHT,
        read_order=read_order,
    ),)


@pytest.fixture
def make_player():
    """Factory for formation players.

    Usage:
        qb = make_player("qb", 0.5, 0.85, position="QB")
        wr = make_player("x", 0.8, 0.81, route=[(0.8, 0.7)])
    """

    def _make(
        player_id: str,
        x: float,
        y: float,
        side: Side = Side.OFFENSE,
        position: str = "",
        designation: str = "",
        name: str = "",
        number: Optional[int] = None,
        route: Sequence[tuple[float, float]] = (),
        segments: Sequence[RouteSegment] = (),
        motion: Sequence[tuple[float, float]] = (),
        zone: Optional[tuple[float, float]] = None,
        coverage_radius: Optional[float] = None,
        read_order: Optional[int] = None,
        primary_target: bool = False,
    ) -> FormationPlayer:
        return FormationPlayer(
            id=player_id,
            x=x,
            y=y,
            side=side,
            position=position,
            designation=designation,
            name=name,
            number=number,
            route=tuple(segments) or _route(*route, read_order=read_order),
            motion_path=tuple(Vec2(px, py) for px, py in motion),
            zone_target=Vec2(*zone) if zone else None,
            coverage_radius=coverage_radius,
            primary_target=primary_target,
        )

    return _make


@pytest.fixture
def make_roster_player():
    """Factory for roster entries with abilities in any of the three maps."""

    def _make(
        player_id: str,
        name: str = "",
        number: Optional[int] = None,
        universal: Optional[dict] = None,
        offense: Optional[dict] = None,
        defense: Optional[dict] = None,
    ) -> RosterPlayer:
        return RosterPlayer(
            id=player_id,
            name=name,
            number=number,
            universal=universal or {},
            offense=offense or {},
            defense=defense or {},
        )

    return _make


@pytest.fixture
def make_agent():
    """Factory for live agents built straight from a formation player."""

    def _make(
        player: FormationPlayer,
        roster: Optional[RosterPlayer] = None,
        pos: Optional[Vec2] = None,
    ) -> PlayerAgent:
        return PlayerAgent(
            formation=player,
            roster=roster,
            pos=pos or player.pos,
            motion=PathProgress(build_motion_path(player)),
            route=PathProgress(build_route_path(player)),
            zone_target=player.zone_target or player.pos,
            is_rusher=player.is_rusher,
        )

    return _make
