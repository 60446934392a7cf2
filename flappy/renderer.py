"""
renderer.py: Paints a Session onto a draw surface.

The render step only reads the session. Drawing goes through the small
DrawSurface protocol so the scene can be painted onto a pygame window or onto
a recording double in tests.
"""

from typing import Dict, Optional, Protocol, Tuple

import pygame

from .constants import (
    BIRD_COLOR, EYE_COLOR, GAME_OVER_TEXT, OVERLAY_COLOR, PIPE_COLOR,
    SKY_COLOR, TEXT_COLOR
)
from .data_models import Bird, Session

Color = Tuple[int, ...]


class DrawSurface(Protocol):
    """Primitive drawing operations over logical layout pixels."""

    def clear(self, color: Color) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...

    def fill_ellipse(self, cx: float, cy: float, rx: float, ry: float, color: Color) -> None: ...

    def blit_image(self, image, x: float, y: float, w: float, h: float) -> None: ...

    def draw_text(self, text: str, x: float, y: float, size: int, color: Color,
                  bold: bool = False, align: str = "center") -> None: ...


class Sprite(Protocol):
    ready: bool
    image: object


def render(session: Session, surface: DrawSurface, sprite: Optional[Sprite] = None):
    """Paints background, pipes, bird and the game-over overlay."""
    area = session.area
    surface.clear(SKY_COLOR)

    for pipe in session.pipes:
        surface.fill_rect(pipe.x, 0, pipe.w, max(0, pipe.top), PIPE_COLOR)
        surface.fill_rect(pipe.x, area.height - pipe.bottom, pipe.w, max(0, pipe.bottom), PIPE_COLOR)

    draw_bird(session.bird, surface, sprite)

    if session.game_over:
        surface.fill_rect(0, 0, area.width, area.height, OVERLAY_COLOR)
        surface.draw_text(GAME_OVER_TEXT, area.width / 2, area.height / 2 - 10,
                          28, TEXT_COLOR, bold=True)
        surface.draw_text(f"Score: {session.score}", area.width / 2, area.height / 2 + 22,
                          20, TEXT_COLOR, bold=True)


def draw_bird(bird: Bird, surface: DrawSurface, sprite: Optional[Sprite] = None):
    # readiness is asked every frame, the sprite may finish loading at any time
    if sprite is not None and sprite.ready:
        surface.blit_image(sprite.image, bird.x, bird.y, bird.w, bird.h)
        return

    surface.fill_ellipse(bird.x + bird.w / 2, bird.y + bird.h / 2, bird.w / 2, bird.h / 2, BIRD_COLOR)
    surface.fill_rect(bird.x + bird.w * 0.2, bird.y + bird.h * 0.35,
                      bird.w * 0.15, bird.h * 0.15, EYE_COLOR)


class PygameSurface:
    """DrawSurface backed by a pygame Surface."""

    def __init__(self, target: pygame.Surface, font_name: Optional[str] = None):
        pygame.font.init()
        self.target = target
        self.font_name = font_name
        self._fonts: Dict[Tuple[int, bool], pygame.font.Font] = {}
        self._scaled: Dict[Tuple[int, int, int], pygame.Surface] = {}

    def _font(self, size: int, bold: bool) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            font = pygame.font.Font(self.font_name, size)
            font.set_bold(bold)
            self._fonts[key] = font
        return self._fonts[key]

    def clear(self, color):
        self.target.fill(color)

    def fill_rect(self, x, y, w, h, color):
        w, h = max(0, round(w)), max(0, round(h))
        if w == 0 or h == 0:
            return
        if len(color) == 4:
            overlay = pygame.Surface((w, h), pygame.SRCALPHA)
            overlay.fill(color)
            self.target.blit(overlay, (round(x), round(y)))
        else:
            pygame.draw.rect(self.target, color, pygame.Rect(round(x), round(y), w, h))

    def fill_ellipse(self, cx, cy, rx, ry, color):
        rect = pygame.Rect(round(cx - rx), round(cy - ry), max(0, round(2 * rx)), max(0, round(2 * ry)))
        pygame.draw.ellipse(self.target, color, rect)

    def blit_image(self, image, x, y, w, h):
        size = (max(1, round(w)), max(1, round(h)))
        key = (id(image),) + size
        scaled = self._scaled.get(key)
        if scaled is None:
            self._scaled.clear()
            scaled = pygame.transform.smoothscale(image, size)
            self._scaled[key] = scaled
        self.target.blit(scaled, (round(x), round(y)))

    def draw_text(self, text, x, y, size, color, bold=False, align="center"):
        surf = self._font(size, bold).render(text, True, color[:3])
        if align == "center":
            pos = (round(x - surf.get_width() / 2), round(y - surf.get_height() / 2))
        else:
            pos = (round(x), round(y))
        self.target.blit(surf, pos)
