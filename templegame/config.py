"""Project constants, frame delta timing and frame-rate limiting."""

from __future__ import annotations

import time
from collections.abc import Callable

SUCCESS = 0
FAILURE = -1

WIN_MAX_X = 1280
WIN_MAX_Y = 720
COLOR_BIT = 32

FPS = 60

APP_NAME = "Temple"

DEBUG = True


class FrameTimer:
    """Measures the seconds between frames, capped at one refresh period."""

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        refresh_rate: float = FPS,
    ) -> None:
        self._clock = clock
        self.refresh_rate = refresh_rate
        self._old_time = 0.0
        self._delta = 0.0

    def tick(self) -> float:
        """Advance to the current time and return the new delta."""
        now = self._clock()
        delta = now - self._old_time
        self._old_time = now
        limit = 1.0 / self.refresh_rate
        if delta > limit:
            delta = limit
        self._delta = delta
        return delta

    def delta_second(self) -> float:
        """Delta measured by the last tick, in seconds."""
        return self._delta


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


def _sleep_ms(milliseconds: int) -> None:
    time.sleep(milliseconds / 1000.0)


class FpsCounter:
    """Limits the frame rate and measures the achieved one (milliseconds)."""

    def __init__(
        self,
        clock: Callable[[], int] = _now_ms,
        sleep: Callable[[int], None] = _sleep_ms,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self.frame_time = 0
        self.wait_time = 0
        self.last_time = 0
        self.now_time = 0
        self.update_time = 0
        self.last_update = 0
        self.count = 0.0
        self.fps = 0.0

    def set_limit_rate(self, refresh_rate: float) -> None:
        """Set the target frames per second."""
        self.frame_time = int(1000.0 / refresh_rate)

    def set_update_interval(self, update_interval: int) -> None:
        """Set how often, in milliseconds, the measured rate is recomputed."""
        self.update_time = update_interval

    def limit(self) -> None:
        """Sleep out whatever is left of the current frame."""
        self.now_time = self._clock()
        self.wait_time = self.frame_time - (self.now_time - self.last_time)
        if self.wait_time > 0:
            self._sleep(self.wait_time)
        self.last_time = self._clock()

    def update(self) -> None:
        """Count a frame and recompute the rate once the interval has passed."""
        now = self._clock()
        self.count += 1.0
        elapsed = now - self.last_update
        if self.update_time < elapsed:
            self.fps = self.count / float(elapsed) * 1000.0
            self.last_update = now
            self.count = 0.0

    def get(self) -> float:
        """Last measured frames per second."""
        return self.fps


_FPS_COUNTER = FpsCounter()


def get_fps_counter() -> FpsCounter:
    """The shared frame-rate counter."""
    return _FPS_COUNTER