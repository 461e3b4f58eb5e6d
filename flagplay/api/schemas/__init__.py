"""Pydantic schemas for API request/response models."""

from flagplay.api.schemas.play_sim import (
    BallSchema,
    CanvasPlayerSchema,
    CanvasRouteSchema,
    FieldSettingsSchema,
    PlaySimDefaultsResponse,
    PointSchema,
    RosterPlayerSchema,
    RouteSegmentSchema,
    RunPlayRequest,
    RunPlayResponse,
    SimulationEventSchema,
)

__all__ = [
    "BallSchema",
    "CanvasPlayerSchema",
    "CanvasRouteSchema",
    "FieldSettingsSchema",
    "PlaySimDefaultsResponse",
    "PointSchema",
    "RosterPlayerSchema",
    "RouteSegmentSchema",
    "RunPlayRequest",
    "RunPlayResponse",
    "SimulationEventSchema",
]
