"""API services for play simulation."""

from flagplay.api.services.play_sim_service import PlaySimService

__all__ = ["PlaySimService"]
