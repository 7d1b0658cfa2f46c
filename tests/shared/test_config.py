"""Tests for configuration management."""

from pathlib import Path

import pydantic
import pytest
import yaml

from equity_input.constants import DEFAULT_ITERATIONS
from equity_input.shared.config import Config, InputDefaults
from equity_input.shared.config_loader import get_config, load_config, set_config
from equity_input.shared.dicts import deep_merge_dicts, nest_flat_keys


def _write_yaml(path: Path, data: dict) -> Path:
    path.write_text(yaml.safe_dump(data))
    return path


class TestConfig:
    """Tests for the Config schema."""

    def test_defaults(self):
        config = Config.default()

        assert config.defaults.board == ""
        assert config.defaults.board_size == 5
        assert config.defaults.hand_size == 2
        assert config.defaults.iterations == DEFAULT_ITERATIONS
        assert config.defaults.num_decks == 1
        assert config.defaults.return_hand_stats is False
        assert config.system.seed is None
        assert config.api.port == 8000

    def test_from_dict_merges_over_defaults(self):
        config = Config.from_dict({"defaults": {"iterations": 50}})

        assert config.defaults.iterations == 50
        assert config.defaults.board_size == 5

    def test_merge_returns_new_config(self):
        base = Config.default()
        merged = base.merge({"system": {"seed": 3}})

        assert merged.system.seed == 3
        assert base.system.seed is None

    def test_to_dict(self):
        config_dict = Config.default().to_dict()

        assert set(config_dict) == {"defaults", "system", "api"}

    def test_frozen(self):
        config = Config.default()
        with pytest.raises(pydantic.ValidationError):
            config.system = None

    @pytest.mark.parametrize(
        "overrides",
        [
            {"defaults": {"iterations": 0}},
            {"defaults": {"num_decks": 0}},
            {"defaults": {"board_size": -1}},
            {"defaults": {"unknown": 1}},
            {"system": {"log_level": "TRACE"}},
            {"api": {"port": 70000}},
        ],
    )
    def test_invalid_overrides(self, overrides):
        with pytest.raises(pydantic.ValidationError):
            Config.from_dict(overrides)


class TestInputDefaults:
    def test_default_board_must_fit(self):
        with pytest.raises(pydantic.ValidationError, match="board_size"):
            InputDefaults(board="As,Kd,Qh", board_size=2)

    def test_default_board_must_parse(self):
        with pytest.raises(pydantic.ValidationError):
            InputDefaults(board="Zz")

    def test_custom_default_board(self):
        assert InputDefaults(board="2c,3c,4c").board == "2c,3c,4c"


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_default_config(self):
        assert load_config() == Config.default()

    def test_keyword_overrides(self):
        config = load_config(defaults__iterations=5000, system__seed=11)

        assert config.defaults.iterations == 5000
        assert config.system.seed == 11

    def test_load_from_file(self, tmp_path):
        path = _write_yaml(tmp_path / "precise.yaml", {"defaults": {"iterations": 1_000_000}})

        assert load_config(path).defaults.iterations == 1_000_000

    def test_file_then_keyword_overrides(self, tmp_path):
        path = _write_yaml(tmp_path / "c.yaml", {"defaults": {"iterations": 10, "num_decks": 2}})

        config = load_config(path, defaults__iterations=20)

        assert config.defaults.iterations == 20
        assert config.defaults.num_decks == 2

    def test_extends_chain(self, tmp_path):
        _write_yaml(tmp_path / "base.yaml", {"defaults": {"iterations": 10, "hand_size": 4}})
        _write_yaml(
            tmp_path / "mid.yaml",
            {"extends": "base.yaml", "defaults": {"iterations": 20}, "system": {"seed": 1}},
        )
        path = _write_yaml(tmp_path / "top.yaml", {"extends": "mid.yaml", "system": {"seed": 2}})

        config = load_config(path)

        assert config.defaults.iterations == 20
        assert config.defaults.hand_size == 4
        assert config.system.seed == 2

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(path) == Config.default()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_circular_extends(self, tmp_path):
        _write_yaml(tmp_path / "a.yaml", {"extends": "b.yaml"})
        _write_yaml(tmp_path / "b.yaml", {"extends": "a.yaml"})

        with pytest.raises(ValueError, match="Circular"):
            load_config(tmp_path / "a.yaml")

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ValueError, match="mapping"):
            load_config(path)


class TestActiveConfig:
    def test_get_config_defaults(self):
        assert get_config() == Config.default()

    def test_set_and_reset(self):
        custom = load_config(defaults__iterations=9)
        set_config(custom)
        assert get_config() is custom

        set_config(None)
        assert get_config().defaults.iterations == DEFAULT_ITERATIONS


class TestDicts:
    def test_deep_merge(self):
        base = {"a": 1, "b": {"x": 10}}
        merged = deep_merge_dicts(base, {"b": {"y": 20}, "c": 3})

        assert merged == {"a": 1, "b": {"x": 10, "y": 20}, "c": 3}
        assert base == {"a": 1, "b": {"x": 10}}

    def test_nest_flat_keys(self):
        assert nest_flat_keys({"defaults__iterations": 5, "system__seed": 1, "top": 2}) == {
            "defaults": {"iterations": 5},
            "system": {"seed": 1},
            "top": 2,
        }
