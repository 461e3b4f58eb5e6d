"""Systems layer - per-tick player behavior."""

from .route_runner import RouteRunner
from .coverage import DefenseAI
from .passing import PressureLevel, QBAction, QBDecision, QBDecisionEngine, TargetScore
from .ballcarrier import BallcarrierSystem

__all__ = [
    "RouteRunner",
    "DefenseAI",
    "PressureLevel",
    "QBAction",
    "QBDecision",
    "QBDecisionEngine",
    "TargetScore",
    "BallcarrierSystem",
]
