"""
Tests for configuration loading and validation.
"""

import pytest

from flappy import constants as C
from flappy.config import GameConfig, get_config, load_config


def write_yaml(tmp_path, text):
    path = tmp_path / "game_config.yaml"
    path.write_text(text)
    return path


class TestDefaults:

    def test_defaults_match_constants(self):
        config = load_config()

        assert config.physics.gravity == C.GRAVITY
        assert config.physics.jump_vy == C.JUMP_VY
        assert config.physics.max_dt == C.MAX_DT
        assert config.pipes.speed == C.PIPE_SPEED
        assert config.pipes.interval == C.PIPE_INTERVAL
        assert config.pipes.width == C.PIPE_WIDTH
        assert (config.pipes.gap_min, config.pipes.gap_max) == (C.GAP_MIN, C.GAP_MAX)

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_config_is_frozen(self):
        config = GameConfig()
        with pytest.raises(AttributeError):
            config.physics.gravity = 1.0


class TestYamlOverrides:

    def test_partial_override(self, tmp_path):
        path = write_yaml(tmp_path, "physics:\n  gravity: 1500\npipes:\n  gap_max: 200\n")
        config = load_config(path)

        assert config.physics.gravity == 1500.0
        assert isinstance(config.physics.gravity, float)
        assert config.pipes.gap_max == 200
        # untouched values keep defaults
        assert config.pipes.gap_min == C.GAP_MIN
        assert config.bird.min_size == C.BIRD_MIN_SIZE

    def test_empty_file_gives_defaults(self, tmp_path):
        path = write_yaml(tmp_path, "")
        assert load_config(path) == GameConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_unknown_section(self, tmp_path):
        path = write_yaml(tmp_path, "network:\n  port: 1\n")
        with pytest.raises(ValueError, match="Unknown config sections"):
            load_config(path)

    def test_unknown_key(self, tmp_path):
        path = write_yaml(tmp_path, "pipes:\n  colour: green\n")
        with pytest.raises(ValueError, match="Unknown keys"):
            load_config(path)

    def test_bad_value_type(self, tmp_path):
        path = write_yaml(tmp_path, "pipes:\n  speed: fast\n")
        with pytest.raises(ValueError, match="pipes.speed"):
            load_config(path)

    @pytest.mark.parametrize("text", [
        "pipes:\n  width: 60.9\n",
        "pipes:\n  gap_min: true\n",
        "physics:\n  gravity: yes\n",
        "bird:\n  min_size: '30'\n",
    ])
    def test_no_silent_coercion(self, tmp_path, text):
        """Booleans, strings and fractional ints are rejected, not truncated."""
        path = write_yaml(tmp_path, text)
        with pytest.raises(ValueError, match="Invalid value"):
            load_config(path)

    def test_integral_float_accepted_for_int(self, tmp_path):
        path = write_yaml(tmp_path, "pipes:\n  width: 64.0\n")
        config = load_config(path)

        assert config.pipes.width == 64
        assert isinstance(config.pipes.width, int)

    @pytest.mark.parametrize("text", [
        "pipes:\n  gap_min: 200\n  gap_max: 150\n",
        "physics:\n  gravity: 0\n",
        "physics:\n  jump_vy: 100\n",
        "physics:\n  max_dt: 0\n",
        "pipes:\n  interval: -1\n",
        "bird:\n  min_size: 50\n  max_size: 40\n",
    ])
    def test_invalid_values(self, tmp_path, text):
        path = write_yaml(tmp_path, text)
        with pytest.raises(ValueError):
            load_config(path)

    def test_shipped_example_loads(self):
        from pathlib import Path
        path = Path(__file__).parent.parent / "game_config.yaml"
        assert load_config(path) == GameConfig()
