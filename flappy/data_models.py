"""
data_models.py: Data structures for the game state.
"""

import math
from dataclasses import dataclass, field
from typing import List

from .config import BirdConfig


@dataclass
class PlayArea:
    """Logical drawing region in layout pixels. Overwritten on resize."""
    width: float
    height: float

    def resize(self, width: float, height: float):
        self.width = width
        self.height = height


@dataclass
class Bird:
    """The falling actor. ``x`` and the size stay fixed for a session."""
    x: float
    y: float
    w: float
    h: float
    vy: float = 0.0

    @classmethod
    def spawn(cls, area: PlayArea, cfg: BirdConfig) -> "Bird":
        """Creates a bird sized and placed relative to the play area."""
        size = max(cfg.min_size, min(cfg.max_size, math.floor(area.width * cfg.size_ratio)))
        return cls(
            x=max(cfg.min_x, math.floor(area.width * cfg.x_ratio)),
            y=area.height * cfg.start_y_ratio,
            w=size,
            h=size,
        )


@dataclass
class Pipe:
    """A gate: top and bottom segments with a passable gap between them."""
    x: float
    w: float
    top: float
    bottom: float
    gap: float
    passed: bool = False

    @property
    def right(self) -> float:
        return self.x + self.w


@dataclass
class Session:
    """Everything one game session owns. Replaced on restart."""
    area: PlayArea
    bird: Bird
    pipes: List[Pipe] = field(default_factory=list)
    score: int = 0
    game_over: bool = False
    spawn_timer: float = 0.0

    def summary(self):
        """Small dictionary used for log lines."""
        return {
            "score": self.score,
            "over": self.game_over,
            "pipes": len(self.pipes),
            "bird_y": round(self.bird.y, 2),
            "bird_vy": round(self.bird.vy, 2),
        }
