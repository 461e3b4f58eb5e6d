"""Simulation clock and frame scheduling.

The clock tracks simulated time. Frame scheduling is abstracted behind
FrameScheduler so the same tick loop can be driven by an event loop in
production or stepped synchronously in tests.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol


FrameCallback = Callable[[float], None]


@dataclass
class Clock:
    """Simulated seconds for one play.

    Moves only when a tick hands it a (clamped, speed-scaled) delta, so a
    paused or throttled frame loop never skips play time. current_time
    counts from initialize(); phase_time restarts at every phase change.
    """
    current_time: float = 0.0
    phase_time: float = 0.0
    tick_count: int = 0

    _events: dict[str, float] = field(default_factory=dict)

    def advance(self, dt: float) -> None:
        self.current_time += dt
        self.phase_time += dt
        self.tick_count += 1

    def reset_phase(self) -> None:
        """Called by the orchestrator on every phase change."""
        self.phase_time = 0.0

    def reset(self) -> None:
        self.current_time = 0.0
        self.phase_time = 0.0
        self.tick_count = 0
        self._events.clear()

    # Named moments; the orchestrator marks each phase as it is entered

    def mark_event(self, name: str) -> None:
        self._events[name] = self.current_time

    def time_since(self, event_name: str) -> Optional[float]:
        """None until the moment has been marked."""
        if event_name not in self._events:
            return None
        return self.current_time - self._events[event_name]

    def time_at(self, event_name: str) -> Optional[float]:
        return self._events.get(event_name)

    def __repr__(self) -> str:
        return f"Clock(time={self.current_time:.3f}s, phase={self.phase_time:.3f}s, tick={self.tick_count})"


# =============================================================================
# Frame Scheduling
# =============================================================================

class FrameScheduler(Protocol):
    """Requests recurring frame callbacks, like a browser's animation frame.

    Callbacks receive a timestamp in seconds from the scheduler's own
    monotonic clock.
    """

    def now(self) -> float:
        ...

    def request_frame(self, callback: FrameCallback) -> object:
        ...

    def cancel_frame(self, handle: object) -> None:
        ...


class ManualScheduler:
    """Scheduler driven explicitly by the caller.

    Pending callbacks only fire when advance() is called, which makes
    tick timing fully deterministic.

    Usage:
        scheduler = ManualScheduler()
        sim = Simulation(scheduler=scheduler)
        sim.initialize(...)
        sim.start()
        scheduler.advance(1 / 60)   # fires one frame
    """

    def __init__(self, start_time: float = 0.0):
        self._time = start_time
        self._pending: dict[int, FrameCallback] = {}
        self._next_handle = 0

    def now(self) -> float:
        return self._time

    def request_frame(self, callback: FrameCallback) -> int:
        self._next_handle += 1
        self._pending[self._next_handle] = callback
        return self._next_handle

    def cancel_frame(self, handle: object) -> None:
        self._pending.pop(handle, None)

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    def advance(self, seconds: float) -> int:
        """Move time forward and fire the callbacks pending at that moment.

        Callbacks requested while firing wait for the next advance().

        Returns:
            Number of callbacks fired
        """
        self._time += seconds
        pending = list(self._pending.items())
        self._pending.clear()
        for _, callback in pending:
            callback(self._time)
        return len(pending)

    def run_until_idle(self, frame_interval: float, max_frames: int = 100_000) -> int:
        """Fire frames at a fixed interval until nothing is pending."""
        frames = 0
        while self._pending and frames < max_frames:
            self.advance(frame_interval)
            frames += 1
        return frames


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop.

    Frames are spaced frame_interval apart on the loop's clock. All
    callbacks run on the loop thread, one at a time.
    """

    def __init__(
        self,
        frame_interval: float = 1 / 60,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.frame_interval = frame_interval
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return self.loop.time()

    def request_frame(self, callback: FrameCallback) -> asyncio.TimerHandle:
        loop = self.loop
        return loop.call_later(self.frame_interval, lambda: callback(loop.time()))

    def cancel_frame(self, handle: object) -> None:
        if isinstance(handle, asyncio.TimerHandle):
            handle.cancel()
