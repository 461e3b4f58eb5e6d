"""API routers for different resource types."""

from flagplay.api.routers.play_sim import router as play_sim_router

__all__ = [
    "play_sim_router",
]
