"""
Simulation configuration.

Controls playback speed, frame pacing, seeding and logging.
All settings can be overridden via environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    return float(value) if value else default


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value else None


@dataclass
class SimulationConfig:
    """Configuration for play simulation."""

    # Playback
    playback_speed: float = field(
        default_factory=lambda: _env_float("FLAGPLAY_PLAYBACK_SPEED", 1.0)
    )
    max_frame_dt: float = 0.05  # Clamp on raw frame delta (seconds)
    frame_interval: float = field(
        default_factory=lambda: _env_float("FLAGPLAY_FRAME_INTERVAL", 1 / 60)
    )

    # Reproducibility - unset means a fresh random source per play
    seed: Optional[int] = field(default_factory=lambda: _env_int("FLAGPLAY_SEED"))

    log_level: str = field(
        default_factory=lambda: os.getenv("FLAGPLAY_LOG_LEVEL", "INFO").upper()
    )

    @classmethod
    def from_env(cls) -> "SimulationConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.playback_speed <= 0:
            errors.append("FLAGPLAY_PLAYBACK_SPEED must be positive")
        if self.max_frame_dt <= 0:
            errors.append("max_frame_dt must be positive")
        if self.frame_interval <= 0:
            errors.append("FLAGPLAY_FRAME_INTERVAL must be positive")
        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown FLAGPLAY_LOG_LEVEL: {self.log_level}")
        return errors


# Singleton config instance
_config: Optional[SimulationConfig] = None


def get_config() -> SimulationConfig:
    """Get the global simulation configuration."""
    global _config
    if _config is None:
        _config = SimulationConfig.from_env()
    return _config


def set_config(config: Optional[SimulationConfig]) -> None:
    """Replace the global configuration (None reloads from the environment on next use)."""
    global _config
    _config = config
