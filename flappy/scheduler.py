"""
scheduler.py: Per-frame callback scheduling for the host loop.

Frame callbacks run once, on the next frame, with that frame's timestamp.
Other threads (the sprite loader) never touch game state directly; they hand
work back through ``call_soon_threadsafe`` and it runs on the main loop.
"""

import threading
import time
from typing import Callable, List

FrameCallback = Callable[[float], None]


class FrameScheduler:
    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._frames: List[FrameCallback] = []
        self._soon: List[Callable[[], None]] = []
        self._soon_lock = threading.Lock()

    def request_frame(self, callback: FrameCallback):
        """Queues ``callback`` for the next frame."""
        self._frames.append(callback)

    def call_soon_threadsafe(self, callback: Callable[[], None]):
        with self._soon_lock:
            self._soon.append(callback)

    @property
    def pending_frames(self) -> int:
        return len(self._frames)

    def run_pending(self) -> float:
        """
        Runs hand-offs from other threads, then this frame's callbacks.

        Callbacks requested while running are kept for the following frame.
        Returns the timestamp given to the callbacks.
        """
        with self._soon_lock:
            soon, self._soon = self._soon, []
        for callback in soon:
            callback()

        now = self._clock()
        frames, self._frames = self._frames, []
        for callback in frames:
            callback(now)
        return now
