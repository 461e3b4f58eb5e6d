"""Pydantic schemas for the play simulation API.

Request models accept the play designer's canvas JSON as saved by the
editor (camelCase keys), including plays saved before routes were split
into segments.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from flagplay.simulation.core.entities import (
    FormationPlayer,
    RosterPlayer,
    RouteSegment,
    SegmentType,
    Side,
)
from flagplay.simulation.core.field import (
    DEFAULT_ENDZONE_SIZE,
    DEFAULT_FIELD_LENGTH,
    DEFAULT_FIELD_WIDTH,
    DEFAULT_LINE_OF_SCRIMMAGE,
    FieldSettings,
)
from flagplay.simulation.core.vec2 import Vec2


class PointSchema(BaseModel):
    """Normalized canvas point."""

    x: float = 0.0
    y: float = 0.0

    def to_vec2(self) -> Vec2:
        return Vec2(self.x, self.y)


class RouteSegmentSchema(BaseModel):
    """One leg of a drawn route."""

    model_config = ConfigDict(populate_by_name=True)

    points: list[PointSchema] = Field(default_factory=list)
    type: Literal["straight", "curve", "option"] = "straight"
    read_order: Optional[int] = Field(default=None, alias="readOrder")

    def to_segment(self) -> RouteSegment:
        return RouteSegment(
            points=tuple(p.to_vec2() for p in self.points),
            type=SegmentType(self.type),
            read_order=self.read_order,
        )


class CanvasRouteSchema(BaseModel):
    """A drawn route.

    Older plays stored a single polyline in `points` with one `type`;
    those are migrated to a single segment.
    """

    segments: list[RouteSegmentSchema] = Field(default_factory=list)
    points: Optional[list[PointSchema]] = None
    type: Optional[Literal["straight", "curve"]] = None
    color: Optional[str] = None

    @model_validator(mode="after")
    def migrate_legacy_route(self) -> "CanvasRouteSchema":
        if not self.segments and self.points:
            self.segments = [RouteSegmentSchema(points=self.points, type=self.type or "straight")]
        return self


class CanvasPlayerSchema(BaseModel):
    """A player as placed on the play canvas."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    x: float = Field(ge=0.0, le=1.0)
    y: float = Field(ge=0.0, le=1.0)
    side: Literal["offense", "defense"]
    position: str = ""
    designation: str = ""
    name: Optional[str] = None
    number: Optional[int] = None
    route: Optional[CanvasRouteSchema] = None
    motion_path: Optional[list[PointSchema]] = Field(default=None, alias="motionPath")
    coverage_radius: Optional[float] = Field(default=None, gt=0, alias="coverageRadius")
    coverage_zone_x: Optional[float] = Field(default=None, alias="coverageZoneX")
    coverage_zone_y: Optional[float] = Field(default=None, alias="coverageZoneY")
    coverage_zone_unlocked: bool = Field(default=False, alias="coverageZoneUnlocked")
    primary_target: bool = Field(default=False, alias="primaryTarget")

    def to_formation_player(self) -> FormationPlayer:
        zone_target = None
        if (
            self.coverage_zone_unlocked
            and self.coverage_zone_x is not None
            and self.coverage_zone_y is not None
        ):
            zone_target = Vec2(self.coverage_zone_x, self.coverage_zone_y)

        return FormationPlayer(
            id=self.id,
            x=self.x,
            y=self.y,
            side=Side(self.side),
            position=self.position,
            designation=self.designation,
            name=self.name or "",
            number=self.number,
            route=tuple(s.to_segment() for s in self.route.segments) if self.route else (),
            motion_path=tuple(p.to_vec2() for p in self.motion_path or []),
            zone_target=zone_target,
            coverage_radius=self.coverage_radius,
            primary_target=self.primary_target,
        )


class RosterPlayerSchema(BaseModel):
    """Roster entry with 1-10 ability maps."""

    id: str
    name: str = ""
    number: Optional[int] = None
    universal_attributes: dict[str, Optional[float]] = Field(default_factory=dict)
    offense_attributes: dict[str, Optional[float]] = Field(default_factory=dict)
    defense_attributes: dict[str, Optional[float]] = Field(default_factory=dict)

    def to_roster_player(self) -> RosterPlayer:
        return RosterPlayer(
            id=self.id,
            name=self.name,
            number=self.number,
            universal=dict(self.universal_attributes),
            offense=dict(self.offense_attributes),
            defense=dict(self.defense_attributes),
        )


class FieldSettingsSchema(BaseModel):
    """Field dimensions in yards. Out-of-range values are clamped."""

    field_length: float = DEFAULT_FIELD_LENGTH
    field_width: float = DEFAULT_FIELD_WIDTH
    endzone_size: float = DEFAULT_ENDZONE_SIZE
    line_of_scrimmage: float = DEFAULT_LINE_OF_SCRIMMAGE

    def to_settings(self) -> FieldSettings:
        return FieldSettings(
            field_length=self.field_length,
            field_width=self.field_width,
            endzone_size=self.endzone_size,
            line_of_scrimmage=self.line_of_scrimmage,
        ).clamped()


class RunPlayRequest(BaseModel):
    """Request to simulate one play to completion."""

    offense: list[CanvasPlayerSchema] = Field(min_length=1)
    defense: list[CanvasPlayerSchema] = Field(default_factory=list)
    roster: list[RosterPlayerSchema] = Field(default_factory=list)
    field_settings: FieldSettingsSchema = Field(default_factory=FieldSettingsSchema)
    seed: Optional[int] = None
    playback_speed: float = Field(default=1.0, gt=0, le=4.0)
    frame_interval: Optional[float] = Field(default=None, gt=0, le=0.05)
    record_frames: bool = False
    preview: bool = False  # Offense only, defense ignored


class SimulationEventSchema(BaseModel):
    """One narration entry."""

    time: float
    type: str
    message: str
    player_id: Optional[str] = None


class BallSchema(BaseModel):
    """Ball state."""

    x: float
    y: float
    visible: bool
    in_flight: bool


class RunPlayResponse(BaseModel):
    """Result of a simulated play."""

    outcome: str
    yards: int
    summary: str
    duration: float
    passer_id: Optional[str] = None
    receiver_id: Optional[str] = None
    defender_id: Optional[str] = None
    phases: list[str]
    events: list[SimulationEventSchema]
    positions: dict[str, PointSchema]
    ball: BallSchema
    frames: Optional[list[dict]] = None


class PlaySimDefaultsResponse(BaseModel):
    """Defaults the designer uses when nothing is configured."""

    field_settings: FieldSettingsSchema
    phase_timeouts: dict[str, float]
    playback_speed: float
    frame_interval: float
