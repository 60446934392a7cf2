"""
physics_engine.py: The single-player world simulation.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .config import GameConfig, get_config
from .data_models import Bird, PlayArea, Session
from .physics_core import PhysicsCore
from .pipe_spawner import PipeSpawner

logger = logging.getLogger(__name__)


@dataclass
class GameEngine:
    """
    Advances a Session one tick at a time.

    The engine holds configuration and the random pipe source only; every
    piece of mutable game state lives in the Session passed to it.
    """
    config: GameConfig = field(default_factory=get_config)
    seed: Optional[int] = None
    spawner: Optional[PipeSpawner] = None

    def __post_init__(self):
        self.core = PhysicsCore(self.config.physics)
        if self.spawner is None:
            self.spawner = PipeSpawner(self.config.pipes, seed=self.seed)

    def new_session(self, area: PlayArea) -> Session:
        """Fresh session: score 0, no pipes, timer 0, bird repositioned."""
        return Session(area=area, bird=Bird.spawn(area, self.config.bird))

    def jump(self, session: Session) -> bool:
        """Sets the jump velocity. Ignored once the session is over."""
        if session.game_over:
            return False
        session.bird.vy = self.core.flap()
        return True

    def update(self, session: Session, dt: float) -> Session:
        """
        The main simulation step. Mutates and returns the session.
        """
        if session.game_over:
            return session

        dt = self.core.clamp_dt(dt)
        bird, area = session.bird, session.area
        pipes_cfg = self.config.pipes

        # 1. Bird physics and screen bounds
        self.core.apply_gravity_and_movement(bird, dt)
        if self.core.hit_floor(bird, area):
            session.game_over = True
        self.core.clamp_ceiling(bird)

        # 2. Spawn timing, leftover time is dropped
        session.spawn_timer += dt
        if session.spawn_timer >= pipes_cfg.interval:
            session.pipes.append(self.spawner.spawn(area))
            session.spawn_timer = 0.0

        # 3. Move pipes, collide and score
        for pipe in session.pipes:
            pipe.x -= pipes_cfg.speed * dt

            if self.core.hits_pipe(bird, pipe, area):
                session.game_over = True

            if not pipe.passed and pipe.right < bird.x:
                pipe.passed = True
                session.score += 1

        # 4. Drop pipes that left the screen
        session.pipes = [p for p in session.pipes if p.right > 0]

        if session.game_over:
            logger.info(f"Game over: {session.summary()}")
        return session
