"""Play simulation service wrapping the engine for API and CLI use."""

import logging
from dataclasses import replace
from typing import Optional

from flagplay.api.schemas.play_sim import (
    BallSchema,
    PointSchema,
    RunPlayRequest,
    RunPlayResponse,
    SimulationEventSchema,
)
from flagplay.simulation import FrameRecorder, Simulation, SimulationConfig, get_config
from flagplay.simulation.core.variance import make_random_source


logger = logging.getLogger(__name__)


class PlaySimService:
    """
    Runs plays headlessly, one request at a time.

    Each call builds a fresh Simulation, so nothing is shared between
    requests.
    """

    def __init__(self, config: Optional[SimulationConfig] = None) -> None:
        self.config = config or get_config()

    def build_simulation(self, request: RunPlayRequest) -> Simulation:
        """Create and initialize a simulation for a request."""
        overrides = {"playback_speed": request.playback_speed}
        if request.frame_interval is not None:
            overrides["frame_interval"] = request.frame_interval
        config = replace(self.config, **overrides)

        seed = request.seed if request.seed is not None else config.seed
        sim = Simulation(rng=make_random_source(seed), config=config)

        offense = [p.to_formation_player() for p in request.offense]
        roster = [r.to_roster_player() for r in request.roster]
        field_settings = request.field_settings.to_settings()

        if request.preview:
            sim.initialize_preview(offense, roster, field_settings)
        else:
            defense = [p.to_formation_player() for p in request.defense]
            sim.initialize(offense, defense, roster, field_settings)
        return sim

    def run(self, request: RunPlayRequest) -> RunPlayResponse:
        """Simulate a play to completion."""
        sim = self.build_simulation(request)

        recorder = None
        if request.record_frames:
            recorder = FrameRecorder()
            recorder.attach(sim)

        result = sim.run_to_completion()
        logger.info(
            "Simulated play: %s (%d yards, %.2fs, seed=%s)",
            result.outcome.value, result.yards, result.duration, request.seed,
        )

        ball = sim.ball
        return RunPlayResponse(
            outcome=result.outcome.value,
            yards=result.yards,
            summary=result.format_summary(),
            duration=round(result.duration, 3),
            passer_id=result.passer_id,
            receiver_id=result.receiver_id,
            defender_id=result.defender_id,
            phases=[t.to_phase.value for t in result.phase_history],
            events=[SimulationEventSchema(**e.to_dict()) for e in result.events],
            positions={pid: PointSchema(x=pos.x, y=pos.y) for pid, pos in sim.positions.items()},
            ball=BallSchema(**ball.to_dict()),
            frames=recorder.to_dict() if recorder else None,
        )
