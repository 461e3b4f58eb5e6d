"""flagplay API package - FastAPI backend for the play simulator."""

from flagplay.api.main import app, create_app

__all__ = ["app", "create_app"]
