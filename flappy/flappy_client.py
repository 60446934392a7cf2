#!/usr/bin/env python3
"""
flappy_client.py

pygame host for the game: window, events, frame scheduling and drawing.
"""

import argparse
import logging
from typing import Optional

import pygame

from .assets import SpriteAsset
from .config import GameConfig, load_config
from .constants import RENDER_FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from .controls import Command, InputMapper
from .data_models import PlayArea, Session
from .game_loop import GameLoop, LoopState
from .hud import RestartButton, ScoreLabel
from .physics_engine import GameEngine
from .renderer import PygameSurface, render
from .scheduler import FrameScheduler

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Console logging for the game window."""
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)


class FlappyClient:
    def __init__(
        self,
        config: GameConfig,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        fps: int = RENDER_FPS,
        seed: Optional[int] = None,
        sprite_path: Optional[str] = None,
    ):
        pygame.init()
        self.fps = fps
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Flappy")

        self.clock = pygame.time.Clock()
        self.scheduler = FrameScheduler()
        self.area = PlayArea(width, height)
        self.surface = PygameSurface(self.screen)

        # --- HUD collaborators ---
        self.score_label = ScoreLabel()
        self.restart_button = RestartButton()
        self.restart_button.layout(width, height)
        self.input = InputMapper(self.restart_button)

        self.sprite = SpriteAsset(sprite_path, dispatch=self.scheduler.call_soon_threadsafe)

        self.loop = GameLoop(
            engine=GameEngine(config=config, seed=seed),
            area=self.area,
            request_frame=self.scheduler.request_frame,
            render=self._present,
            show_score=self.score_label.set_text,
            show_restart=self._set_restart_visible,
        )
        self.running = False

    def _present(self, session: Session):
        render(session, self.surface, self.sprite)
        self.score_label.draw(self.surface, self.area.width)
        self.restart_button.draw(self.surface)
        pygame.display.flip()

    def _set_restart_visible(self, visible: bool):
        self.restart_button.visible = visible

    def _resize(self, width: int, height: int):
        # pygame 2 resizes the display surface itself; only layout changes here
        self.screen = pygame.display.get_surface()
        self.surface.target = self.screen
        self.area.resize(width, height)
        self.restart_button.layout(width, height)
        logger.debug(f"Play area resized to {width}x{height}")
        if self.loop.state is not LoopState.RUNNING:
            self.loop.redraw()

    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.VIDEORESIZE:
            self._resize(event.w, event.h)
            return

        command = self.input.translate(event)
        if command is Command.QUIT:
            self.running = False
        elif command is Command.JUMP:
            self.loop.jump()
        elif command is Command.RESTART:
            self.loop.restart()

    def run(self):
        """The main client execution loop."""
        self.running = True
        self.sprite.load_async()
        self.loop.start_when_ready(self.sprite)

        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.scheduler.run_pending()
            self.clock.tick(self.fps)

        pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play Flappy")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH, help="Window width")
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT, help="Window height")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="Target FPS")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for pipe placement")
    parser.add_argument("--sprite", default=None, help="Image used for the bird")
    parser.add_argument("--config", default=None, help="YAML file with tuning overrides")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    config = load_config(args.config)

    client = FlappyClient(
        config,
        width=args.width,
        height=args.height,
        fps=args.fps,
        seed=args.seed,
        sprite_path=args.sprite,
    )
    client.run()


if __name__ == "__main__":
    main()
