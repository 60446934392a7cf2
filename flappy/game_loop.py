"""
game_loop.py: The loop driver.

Drives the engine and the render step from host frame callbacks:

    IDLE --start--> RUNNING --game over--> OVER --restart--> RUNNING

The host capabilities (frame scheduling, drawing, score display, restart
button visibility) are injected as plain callables.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from .data_models import PlayArea, Session
from .physics_engine import GameEngine

logger = logging.getLogger(__name__)


class LoopState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


def _ignore(*_args):
    pass


class GameLoop:
    def __init__(
        self,
        engine: GameEngine,
        area: PlayArea,
        request_frame: Callable[[Callable[[float], None]], None],
        render: Callable[[Session], None],
        show_score: Callable[[str], None] = _ignore,
        show_restart: Callable[[bool], None] = _ignore,
    ):
        """
        Args:
            engine: Simulation step and session factory.
            area: Shared play-area dimensions, resized by the host.
            request_frame: Schedules a callback for the next frame; the
                callback receives the frame timestamp in seconds.
            render: Paints a session.
            show_score: Receives the score text whenever it changes.
            show_restart: Shows (True) or hides (False) the restart affordance.
        """
        self.engine = engine
        self.area = area
        self._request_frame = request_frame
        self._render = render
        self._show_score = show_score
        self._show_restart = show_restart

        self.state = LoopState.IDLE
        self.session: Optional[Session] = None
        self.last_time: Optional[float] = None
        self.frames = 0

    def _reset(self):
        self.session = self.engine.new_session(self.area)
        self.last_time = None
        self.frames = 0
        self._show_score(str(self.session.score))
        self._show_restart(False)

    def start(self):
        """Begins a session. Ignored unless the loop is idle."""
        if self.state is not LoopState.IDLE:
            return
        self._reset()
        self.state = LoopState.RUNNING
        logger.info(f"Session started in {self.area.width}x{self.area.height} play area")
        self._request_frame(self._prime)

    def start_when_ready(self, asset):
        """Starts once ``asset`` has finished loading, whether or not it succeeded."""
        asset.on_settled(lambda _ready: self.start())

    def restart(self):
        """Resets and re-enters the running loop. Only valid once a session is over."""
        if self.state is not LoopState.OVER:
            return
        score = self.session.score
        self._reset()
        self.state = LoopState.RUNNING
        logger.info(f"Restarting after a score of {score}")
        self._request_frame(self._prime)

    def jump(self):
        if self.state is LoopState.RUNNING:
            self.engine.jump(self.session)

    def redraw(self):
        """Paints the current session again without advancing it."""
        if self.session is not None:
            self._render(self.session)

    def _prime(self, timestamp: float):
        # the first frame only records the clock so the first step has a sane dt
        self.last_time = timestamp
        self._request_frame(self._frame)

    def _frame(self, timestamp: float):
        if self.state is not LoopState.RUNNING:
            return

        dt = min(self.engine.config.physics.max_dt, max(0.0, timestamp - self.last_time))
        self.last_time = timestamp
        self.frames += 1

        score_before = self.session.score
        self.engine.update(self.session, dt)
        if self.session.score != score_before:
            self._show_score(str(self.session.score))

        if self.session.game_over:
            # button first, the final render must include it
            self.state = LoopState.OVER
            self._show_restart(True)
            self._render(self.session)
            logger.info(f"Loop stopped after {self.frames} frames")
            return

        self._render(self.session)
        self._request_frame(self._frame)
