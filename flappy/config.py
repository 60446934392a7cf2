"""
Configuration Loader
====================

Groups the tuning constants into typed, immutable sections and optionally
overrides them from a YAML file.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from . import constants as C


@dataclass(frozen=True)
class PhysicsConfig:
    """Bird kinematics and step limits."""
    gravity: float = C.GRAVITY          # pixels/s^2, positive is down
    jump_vy: float = C.JUMP_VY          # velocity set on jump, negative is up
    floor_epsilon: float = C.FLOOR_EPSILON
    max_dt: float = C.MAX_DT            # cap on a single step, seconds


@dataclass(frozen=True)
class PipeConfig:
    """Pipe motion, cadence and gap geometry."""
    speed: float = C.PIPE_SPEED
    interval: float = C.PIPE_INTERVAL
    width: int = C.PIPE_WIDTH
    gap_min: int = C.GAP_MIN
    gap_max: int = C.GAP_MAX
    margin_top: int = C.MARGIN_TOP
    margin_bottom: int = C.MARGIN_BOTTOM


@dataclass(frozen=True)
class BirdConfig:
    """How the bird is sized and placed from the play-area dimensions."""
    min_size: int = C.BIRD_MIN_SIZE
    max_size: int = C.BIRD_MAX_SIZE
    size_ratio: float = C.BIRD_SIZE_RATIO
    min_x: int = C.BIRD_MIN_X
    x_ratio: float = C.BIRD_X_RATIO
    start_y_ratio: float = C.BIRD_START_Y_RATIO


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration.

    All values are immutable so a running session cannot drift from the
    configuration it was started with.
    """
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    pipes: PipeConfig = field(default_factory=PipeConfig)
    bird: BirdConfig = field(default_factory=BirdConfig)


def _parse_section(section_cls, raw: Optional[dict], name: str):
    """Build a config section from defaults plus the overrides in ``raw``."""
    section = section_cls()
    if raw is None:
        return section
    if not isinstance(raw, dict):
        raise ValueError(f"Section '{name}' must be a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(section_cls)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"Unknown keys in section '{name}': {sorted(unknown)}")

    overrides: dict[str, Any] = {}
    for key, value in raw.items():
        default = getattr(section, key)
        # YAML gives bools and strings too; only plain numbers are accepted
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Invalid value for {name}.{key}: {value!r}")
        if isinstance(default, int) and not float(value).is_integer():
            raise ValueError(f"Invalid value for {name}.{key}: {value!r}")
        overrides[key] = type(default)(value)
    return replace(section, **overrides)


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    physics, pipes, bird = config.physics, config.pipes, config.bird

    if physics.gravity <= 0:
        raise ValueError(f"physics.gravity must be positive, got {physics.gravity}")
    if physics.jump_vy >= 0:
        raise ValueError(f"physics.jump_vy must be negative (upward), got {physics.jump_vy}")
    if physics.max_dt <= 0:
        raise ValueError(f"physics.max_dt must be positive, got {physics.max_dt}")
    if physics.floor_epsilon < 0:
        raise ValueError(f"physics.floor_epsilon must be >= 0, got {physics.floor_epsilon}")

    for key in ("speed", "interval", "width", "gap_min"):
        if getattr(pipes, key) <= 0:
            raise ValueError(f"pipes.{key} must be positive, got {getattr(pipes, key)}")
    if pipes.gap_min > pipes.gap_max:
        raise ValueError(
            f"pipes.gap_min ({pipes.gap_min}) must not exceed "
            f"pipes.gap_max ({pipes.gap_max})"
        )
    if pipes.margin_top < 0 or pipes.margin_bottom < 0:
        raise ValueError("pipe margins must be >= 0")

    if not 0 < bird.min_size <= bird.max_size:
        raise ValueError(
            f"bird sizes must satisfy 0 < min_size <= max_size, "
            f"got {bird.min_size}..{bird.max_size}"
        )


def load_config(config_path: Optional[Union[str, Path]] = None) -> GameConfig:
    """
    Load and validate the game configuration.

    Args:
        config_path: YAML file with overrides. Built-in defaults if None.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config = GameConfig()
        _validate_config(config)
        return config

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config root must be a mapping: {config_path}")

    unknown = set(raw) - {"physics", "pipes", "bird"}
    if unknown:
        raise ValueError(f"Unknown config sections: {sorted(unknown)}")

    config = GameConfig(
        physics=_parse_section(PhysicsConfig, raw.get("physics"), "physics"),
        pipes=_parse_section(PipeConfig, raw.get("pipes"), "pipes"),
        bird=_parse_section(BirdConfig, raw.get("bird"), "bird"),
    )
    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached default configuration, building it if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config
