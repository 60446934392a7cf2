"""
physics_core.py: Bird kinematics, boundary handling and collision logic.
"""

from typing import Iterable

from .config import PhysicsConfig
from .data_models import Bird, Pipe, PlayArea


def rects_overlap(ax: float, ay: float, aw: float, ah: float,
                  bx: float, by: float, bw: float, bh: float) -> bool:
    """Axis-aligned overlap test. Rectangles that only touch do not overlap."""
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


class PhysicsCore:
    """
    Per-tick physics for the bird. Pipe spawning and scoring live in the engine.
    """

    def __init__(self, physics: PhysicsConfig):
        self.physics = physics

    def clamp_dt(self, dt: float) -> float:
        """Keeps a step within ``[0, max_dt]`` so large frame gaps cannot tunnel."""
        return min(max(dt, 0.0), self.physics.max_dt)

    def apply_gravity_and_movement(self, bird: Bird, dt: float):
        """Velocity first, then position, using the updated velocity."""
        bird.vy += self.physics.gravity * dt
        bird.y += bird.vy * dt

    def flap(self) -> float:
        """Returns the velocity a jump sets."""
        return self.physics.jump_vy

    def hit_floor(self, bird: Bird, area: PlayArea) -> bool:
        """Clamps the bird above the floor. True when it reached it."""
        floor = area.height - self.physics.floor_epsilon
        if bird.y + bird.h >= floor:
            bird.y = floor - bird.h
            return True
        return False

    def clamp_ceiling(self, bird: Bird):
        # soft boundary: no game over, just stop
        if bird.y <= 0:
            bird.y = 0.0
            bird.vy = 0.0

    def hits_pipe(self, bird: Bird, pipe: Pipe, area: PlayArea) -> bool:
        """Checks the bird box against both segments of one pipe."""
        hit_top = rects_overlap(bird.x, bird.y, bird.w, bird.h,
                                pipe.x, 0, pipe.w, pipe.top)
        hit_bottom = rects_overlap(bird.x, bird.y, bird.w, bird.h,
                                   pipe.x, area.height - pipe.bottom, pipe.w, pipe.bottom)
        return hit_top or hit_bottom

    def check_collision(self, bird: Bird, pipes: Iterable[Pipe], area: PlayArea) -> bool:
        return any(self.hits_pipe(bird, pipe, area) for pipe in pipes)
