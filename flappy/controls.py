"""
controls.py: Maps pygame events to game commands.
"""

from enum import Enum
from typing import Optional

import pygame

from .hud import RestartButton


class Command(Enum):
    JUMP = "jump"
    RESTART = "restart"
    QUIT = "quit"


JUMP_KEYS = {pygame.K_SPACE, pygame.K_UP, pygame.K_w}
RESTART_KEYS = {pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r}


class InputMapper:
    """
    Turns raw events into commands. The game only ever sees the command, not
    whether it came from a mouse, a finger or a key.
    """

    def __init__(self, restart_button: RestartButton):
        self.restart_button = restart_button

    def translate(self, event: pygame.event.Event) -> Optional[Command]:
        """Returns the command for ``event``, or None if the event is not consumed."""
        if event.type == pygame.QUIT:
            return Command.QUIT

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return Command.QUIT
            if event.key in JUMP_KEYS:
                return Command.JUMP
            if event.key in RESTART_KEYS and self.restart_button.visible:
                return Command.RESTART
            return None

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.restart_button.hit(event.pos):
                return Command.RESTART
            return Command.JUMP

        if event.type == pygame.FINGERDOWN:
            return Command.JUMP

        return None
