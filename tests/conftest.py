"""
Shared fixtures and test doubles.
"""

import os
from dataclasses import replace

# no window or sound card needed for any test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy.config import load_config
from flappy.data_models import PlayArea
from flappy.physics_engine import GameEngine


class RecordingSurface:
    """DrawSurface double that remembers every call."""

    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def fill_ellipse(self, cx, cy, rx, ry, color):
        self.calls.append(("ellipse", cx, cy, rx, ry, color))

    def blit_image(self, image, x, y, w, h):
        self.calls.append(("image", image, x, y, w, h))

    def draw_text(self, text, x, y, size, color, bold=False, align="center"):
        self.calls.append(("text", text, x, y, size, color))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


class FakeScheduler:
    """Collects frame requests; ``fire`` plays one frame."""

    def __init__(self):
        self.callbacks = []

    def request_frame(self, callback):
        self.callbacks.append(callback)

    def fire(self, timestamp):
        callbacks, self.callbacks = self.callbacks, []
        for callback in callbacks:
            callback(timestamp)


class FixedRandom:
    """Stands in for random.Random; always picks the low end of a range."""

    def randint(self, a, b):
        return a


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def floating_config(config):
    """Near-zero gravity so the bird hovers where it spawned."""
    return replace(
        config,
        physics=replace(config.physics, gravity=1e-6),
    )


@pytest.fixture
def area():
    return PlayArea(480, 720)


@pytest.fixture
def engine(config):
    return GameEngine(config=config, seed=42)


@pytest.fixture
def session(engine, area):
    return engine.new_session(area)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scheduler():
    return FakeScheduler()
