"""Frame timing loop state: delta times, frame-time history and input."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Callable, Collection

from .input import Input

FRAME_HISTORY_SECONDS = 5
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600


@dataclass(frozen=True)
class FrameContext:
    """Per-frame information handed to the application."""

    width: int
    height: int
    delta_time: float


class EngineError(RuntimeError):
    """Raised when the engine meets a fatal failure."""


class Engine:
    """Tracks frame timing and input for a frame-driven application."""

    def __init__(
        self,
        refresh_rate: int = 60,
        clock: Callable[[], float] = time.perf_counter,
        input: Input | None = None,
    ) -> None:
        if refresh_rate < 1:
            raise ValueError(f"refresh rate must be positive, got {refresh_rate}")
        self._clock = clock
        self.input = input if input is not None else Input()
        self.should_close = False
        self._last_time = clock()
        self._frame_times = [0.0] * (FRAME_HISTORY_SECONDS * refresh_rate)
        self._frame_index = 0

    @property
    def frame_times(self) -> tuple[float, ...]:
        """Frame-time slots in storage order."""
        return tuple(self._frame_times)

    @property
    def frame_time_index(self) -> int:
        """Slot the next frame time will be written to."""
        return self._frame_index

    def begin_frame(self, key_state: Collection[int] = ()) -> FrameContext:
        """Record the elapsed time, update input and start a new frame."""
        now = self._clock()
        delta = now - self._last_time
        self._last_time = now
        self._frame_times[self._frame_index] = delta
        self._frame_index = (self._frame_index + 1) % len(self._frame_times)
        self.input.update(key_state)
        return FrameContext(DEFAULT_WIDTH, DEFAULT_HEIGHT, delta)

    def ordered_frame_times(self) -> list[float]:
        """All frame-time slots from oldest to newest."""
        i = self._frame_index
        return self._frame_times[i:] + self._frame_times[:i]

    def average_delta_time(self) -> float:
        """Mean over the whole frame-time history."""
        return sum(self._frame_times) / len(self._frame_times)

    def fail(self, message: str, fatal: bool = True) -> None:
        """Report a failure; raise EngineError when it is fatal."""
        print(f"Error: {message}", file=sys.stderr)
        if fatal:
            raise EngineError(message)