"""
assets.py: Background loading of the bird sprite.

A failed load is not an error for the game; the renderer falls back to a
drawn ellipse for as long as no image is available.
"""

import logging
import threading
from pathlib import Path
from typing import Callable, Optional, Union

import pygame

logger = logging.getLogger(__name__)

SettledCallback = Callable[[bool], None]
Dispatcher = Callable[[Callable[[], None]], None]


class SpriteAsset:
    def __init__(self, path: Optional[Union[str, Path]], dispatch: Optional[Dispatcher] = None):
        """
        Args:
            path: Image file to load. None means "no sprite", which settles as a failure.
            dispatch: Hands the settle notification back to the main loop
                (``FrameScheduler.call_soon_threadsafe``). Called inline if None.
        """
        self.path = Path(path) if path is not None else None
        self._dispatch = dispatch
        self.image: Optional[pygame.Surface] = None
        self.failed = False
        self.settled = False
        self._listeners = []
        self._thread: Optional[threading.Thread] = None

    @property
    def ready(self) -> bool:
        return self.image is not None

    def on_settled(self, callback: SettledCallback):
        """Runs ``callback(ready)`` once loading finishes, or now if it already has."""
        if self.settled:
            callback(self.ready)
        else:
            self._listeners.append(callback)

    def load_async(self, on_settled: Optional[SettledCallback] = None):
        if on_settled is not None:
            self.on_settled(on_settled)
        if self._thread is not None or self.settled:
            return
        self._thread = threading.Thread(target=self._load, name="sprite-loader", daemon=True)
        self._thread.start()

    def _load(self):
        image = None
        if self.path is None:
            logger.info("No sprite configured, drawing the fallback bird")
        else:
            try:
                image = pygame.image.load(str(self.path))
                logger.info(f"Loaded sprite {self.path} ({image.get_width()}x{image.get_height()})")
            except (pygame.error, FileNotFoundError, OSError) as e:
                logger.warning(f"Could not load sprite {self.path}: {e}. Using fallback shape.")

        if self._dispatch is None:
            self._settle(image)
        else:
            self._dispatch(lambda: self._settle(image))

    def _convert(self, image: pygame.Surface) -> Optional[pygame.Surface]:
        """32-bit copy of ``image``; smoothscale rejects palette and 16-bit surfaces."""
        try:
            if pygame.display.get_init() and pygame.display.get_surface() is not None:
                return image.convert_alpha()
            # no window yet: copy onto a plain 32-bit surface instead
            converted = pygame.Surface(image.get_size(), pygame.SRCALPHA, 32)
            converted.blit(image, (0, 0))
            return converted
        except pygame.error as e:
            logger.warning(f"Could not convert sprite {self.path}: {e}. Using fallback shape.")
            return None

    def _settle(self, image: Optional[pygame.Surface]):
        if image is not None:
            image = self._convert(image)
        self.image = image
        self.failed = image is None
        self.settled = True
        listeners, self._listeners = self._listeners, []
        for callback in listeners:
            callback(self.ready)
