"""
Pipe Spawner
============

Generates gates with a random gap size and a random gap position. The random
source is seedable so a sequence of pipes can be reproduced.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Optional

from .config import PipeConfig
from .data_models import Pipe, PlayArea

logger = logging.getLogger(__name__)


class PipeSpawner:
    """
    Creates pipes at the right edge of the play area.

    The gap is drawn uniformly from ``[gap_min, gap_max]`` and the top segment
    from ``[margin_top, height - margin_bottom - gap]``. The bottom segment is
    whatever remains, so ``top + gap + bottom == height`` always holds.
    """

    def __init__(
        self,
        config: PipeConfig,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            config: Pipe geometry settings.
            seed: Random seed for reproducibility. Random if None.
            rng: Explicit random source; takes precedence over ``seed``.
        """
        self._config = config
        self._rng = rng if rng is not None else random.Random(seed)

    def reset(self, seed: Optional[int] = None) -> None:
        """Re-seed the random source. Keeps the current one if None."""
        if seed is not None:
            self._rng = random.Random(seed)

    def spawn(self, area: PlayArea) -> Pipe:
        cfg = self._config
        height = max(area.height, 0)

        gap = min(self._rng.randint(cfg.gap_min, cfg.gap_max), math.floor(height))

        upper = max(cfg.margin_top, math.floor(height - cfg.margin_bottom - gap))
        top = self._rng.randint(cfg.margin_top, upper)
        # too short for the margins: shrink the top so nothing goes negative
        top = max(0, min(top, math.floor(height - gap)))

        pipe = Pipe(
            x=area.width,
            w=cfg.width,
            top=top,
            bottom=height - top - gap,
            gap=gap,
        )
        logger.debug(f"Spawned pipe at x={pipe.x} top={pipe.top} gap={pipe.gap} bottom={pipe.bottom}")
        return pipe
