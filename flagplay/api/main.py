"""HTTP front end for the play designer.

Serves the play simulation routes under /api/v1 and lets the designer's
dev server call them cross-origin.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flagplay import __version__
from flagplay.api.routers import play_sim_router
from flagplay.simulation import get_config


logger = logging.getLogger(__name__)

API_NAME = "flagplay API"

# Designer dev server
DESIGNER_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    config = get_config()
    for problem in config.validate():
        logger.warning("Configuration problem: %s", problem)
    logger.info("%s %s ready (playback speed %.2fx)", API_NAME, __version__, config.playback_speed)
    yield
    logger.info("%s stopped", API_NAME)


def create_app() -> FastAPI:
    app = FastAPI(
        title=API_NAME,
        description="Run flag football plays drawn in the designer and get back the play-by-play",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=DESIGNER_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(play_sim_router, prefix="/api/v1")

    @app.get("/")
    async def root() -> dict:
        return {
            "name": API_NAME,
            "version": __version__,
            "description": "Flag football play simulation",
            "docs": "/docs",
        }

    return app


app = create_app()


def run(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Serve the API with uvicorn."""
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
