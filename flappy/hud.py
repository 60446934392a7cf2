"""
hud.py: Score display and restart button drawn over the scene.
"""

from dataclasses import dataclass

from .constants import BUTTON_COLOR, TEXT_COLOR
from .renderer import DrawSurface


@dataclass
class ScoreLabel:
    text: str = "0"
    size: int = 40

    def set_text(self, text: str):
        self.text = text

    def draw(self, surface: DrawSurface, width: float):
        surface.draw_text(self.text, width / 2, 32, self.size, TEXT_COLOR, bold=True)


@dataclass
class RestartButton:
    """Hidden while a game runs, shown once it is over."""
    label: str = "Restart"
    width: float = 160
    height: float = 48
    visible: bool = False
    x: float = 0
    y: float = 0

    def layout(self, area_width: float, area_height: float):
        """Centers the button below the game-over text."""
        self.x = (area_width - self.width) / 2
        self.y = area_height / 2 + 56

    def hit(self, pos) -> bool:
        if not self.visible:
            return False
        px, py = pos
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height

    def draw(self, surface: DrawSurface):
        if not self.visible:
            return
        surface.fill_rect(self.x, self.y, self.width, self.height, BUTTON_COLOR)
        surface.draw_text(self.label, self.x + self.width / 2, self.y + self.height / 2,
                          24, TEXT_COLOR, bold=True)
