"""Physics layer - paths, speeds and ball flight."""

from .paths import PathProgress, Polyline, build_motion_path, build_route_path, sample_polyline
from .kinematics import KinematicModel, speed_to_yards_per_second, step_toward
from .ball_flight import ThrowPlan, plan_throw

__all__ = [
    "PathProgress",
    "Polyline",
    "build_motion_path",
    "build_route_path",
    "sample_polyline",
    "KinematicModel",
    "speed_to_yards_per_second",
    "step_toward",
    "ThrowPlan",
    "plan_throw",
]
