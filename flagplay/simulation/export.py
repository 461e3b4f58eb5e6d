"""Frame recording for replay and export.

A FrameRecorder subscribes to a Simulation and keeps a JSON-ready
snapshot of every published frame.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from .orchestrator import Simulation


@dataclass
class FrameSnapshot:
    """Everything a renderer needs to draw one frame."""
    time: float
    phase: str
    positions: dict[str, dict]
    ball: dict
    tick: int = 0

    def to_dict(self) -> dict:
        return {
            "time": round(self.time, 4),
            "tick": self.tick,
            "phase": self.phase,
            "positions": self.positions,
            "ball": self.ball,
        }


@dataclass
class FrameRecorder:
    """Collects frames from a simulation.

    Usage:
        recorder = FrameRecorder()
        recorder.attach(sim)
        sim.run_to_completion()
        frames = recorder.to_dict()
    """
    every_n: int = 1  # Keep every nth frame (the final frame is always kept)
    frames: list[FrameSnapshot] = field(default_factory=list)

    _unsubscribe: Optional[Callable[[], None]] = None
    _seen: int = 0

    def attach(self, simulation: Simulation) -> None:
        self.detach()
        self._unsubscribe = simulation.subscribe(self.record)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def record(self, simulation: Simulation) -> None:
        """Frame listener: snapshot the simulation's published state."""
        self._seen += 1
        keep = (self._seen - 1) % max(1, self.every_n) == 0
        if not keep and not simulation.phases.is_terminal:
            return
        self.frames.append(FrameSnapshot(
            time=simulation.clock.current_time,
            tick=simulation.clock.tick_count,
            phase=simulation.phase.value,
            positions={pid: pos.to_dict() for pid, pos in simulation.positions.items()},
            ball=simulation.ball.to_dict(),
        ))

    def clear(self) -> None:
        self.frames.clear()
        self._seen = 0

    def __len__(self) -> int:
        return len(self.frames)

    def to_dict(self) -> list[dict]:
        return [frame.to_dict() for frame in self.frames]
