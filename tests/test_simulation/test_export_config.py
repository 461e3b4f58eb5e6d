"""Tests for frame recording and environment configuration."""

import pytest

from flagplay.simulation import FrameRecorder, Simulation
from flagplay.simulation.config import SimulationConfig, get_config, set_config


@pytest.fixture
def loaded_sim(sim_config, fixed_random, make_player):
    sim = Simulation(rng=fixed_random(0.5), config=sim_config)
    qb = make_player("qb", 0.5, 0.85, position="QB")
    receiver = make_player("x", 0.8, 0.8125, route=[(0.8, 0.75), (0.99, 0.75)])
    sim.initialize([qb, receiver], [])
    return sim


class TestFrameRecorder:
    """Tests for per-frame snapshots."""

    def test_records_every_tick(self, loaded_sim):
        recorder = FrameRecorder()
        recorder.attach(loaded_sim)
        loaded_sim.run_to_completion()

        assert len(recorder) == loaded_sim.clock.tick_count
        assert recorder.frames[0].phase == "pre_snap"
        assert recorder.frames[-1].phase == "play_over"
        assert set(recorder.frames[-1].positions) == {"qb", "x"}

    def test_every_n_keeps_final_frame(self, loaded_sim):
        recorder = FrameRecorder(every_n=25)
        recorder.attach(loaded_sim)
        loaded_sim.run_to_completion()

        ticks = loaded_sim.clock.tick_count
        assert len(recorder) <= ticks // 25 + 2
        assert recorder.frames[-1].phase == "play_over"

    def test_detach(self, loaded_sim):
        recorder = FrameRecorder()
        recorder.attach(loaded_sim)
        loaded_sim.step()
        recorder.detach()
        loaded_sim.step()
        assert len(recorder) == 1

    def test_to_dict(self, loaded_sim):
        recorder = FrameRecorder()
        recorder.attach(loaded_sim)
        loaded_sim.step()

        frame = recorder.to_dict()[0]
        assert frame["tick"] == 1
        assert frame["positions"]["qb"] == {"x": 0.5, "y": 0.85}
        assert frame["ball"]["visible"] is True

        recorder.clear()
        assert len(recorder) == 0


class TestSimulationConfig:
    """Tests for env-driven configuration."""

    def test_defaults(self, monkeypatch):
        for name in ("FLAGPLAY_PLAYBACK_SPEED", "FLAGPLAY_FRAME_INTERVAL", "FLAGPLAY_SEED", "FLAGPLAY_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        config = SimulationConfig.from_env()
        assert config.playback_speed == 1.0
        assert config.frame_interval == pytest.approx(1 / 60)
        assert config.seed is None
        assert config.log_level == "INFO"
        assert config.validate() == []

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("FLAGPLAY_PLAYBACK_SPEED", "2.5")
        monkeypatch.setenv("FLAGPLAY_SEED", "7")
        monkeypatch.setenv("FLAGPLAY_LOG_LEVEL", "debug")
        config = SimulationConfig.from_env()
        assert config.playback_speed == 2.5
        assert config.seed == 7
        assert config.log_level == "DEBUG"

    def test_validate(self):
        config = SimulationConfig(playback_speed=0, frame_interval=-1, log_level="LOUD")
        errors = config.validate()
        assert len(errors) == 3

    def test_singleton(self, monkeypatch):
        monkeypatch.setenv("FLAGPLAY_SEED", "3")
        set_config(None)
        try:
            assert get_config() is get_config()
            assert get_config().seed == 3

            custom = SimulationConfig(seed=11)
            set_config(custom)
            assert get_config() is custom
        finally:
            set_config(None)
