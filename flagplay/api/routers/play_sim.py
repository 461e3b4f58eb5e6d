"""REST API router for play simulation (formation + roster in, result out)."""

from fastapi import APIRouter

from flagplay.api.schemas.play_sim import (
    FieldSettingsSchema,
    PlaySimDefaultsResponse,
    RunPlayRequest,
    RunPlayResponse,
)
from flagplay.api.services.play_sim_service import PlaySimService
from flagplay.simulation import get_config
from flagplay.simulation.core.phases import PHASE_MAX_DURATION

router = APIRouter(prefix="/play-sim", tags=["play-sim"])


@router.post("/run", response_model=RunPlayResponse)
async def run_play(request: RunPlayRequest) -> RunPlayResponse:
    """Simulate a play to completion and return the result."""
    return PlaySimService().run(request)


@router.get("/defaults", response_model=PlaySimDefaultsResponse)
async def get_defaults() -> PlaySimDefaultsResponse:
    """Default field settings and phase timeouts."""
    config = get_config()
    return PlaySimDefaultsResponse(
        field_settings=FieldSettingsSchema(),
        phase_timeouts={phase.value: seconds for phase, seconds in PHASE_MAX_DURATION.items()},
        playback_speed=config.playback_speed,
        frame_interval=config.frame_interval,
    )
