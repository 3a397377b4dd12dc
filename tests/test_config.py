"""Tests for linear_reorder.config.

Coverage: defaults, YAML loading from explicit path, environment variable and
default location, the optional ``reorder`` section, and rejection of unknown
keys, bad values, bad YAML and missing files.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from textwrap import dedent

import pytest

from linear_reorder.config import CONFIG_ENV_VAR, DEFAULT_MAX_LEVEL, Config
from linear_reorder.exceptions import ConfigError


class TestConfigDefaults:
    """Built-in defaults."""

    def test_defaults(self) -> None:
        """A bare Config validates levels up to 126 with no range cap."""
        config = Config()
        assert config.validate_levels is True
        assert config.max_level == DEFAULT_MAX_LEVEL == 126
        assert config.max_ranges is None
        assert config.log_level == "WARNING"

    def test_load_without_any_file_gives_defaults(self) -> None:
        """Config.load() with no file anywhere returns defaults."""
        assert Config.load() == Config()

    def test_log_level_is_normalized(self) -> None:
        """Lowercase level names are accepted and upper-cased."""
        assert Config(log_level="debug").log_level == "DEBUG"

    def test_to_dict(self) -> None:
        """to_dict returns every setting."""
        assert Config(max_ranges=8).to_dict() == {
            "validate_levels": True,
            "max_level": 126,
            "max_ranges": 8,
            "log_level": "WARNING",
        }


class TestConfigLoad:
    """Loading YAML files."""

    def test_load_explicit_path(self, write_config: Callable[..., Path]) -> None:
        """Top-level keys in an explicit file are applied."""
        path = write_config(
            dedent("""
            validate_levels: false
            max_level: 61
            max_ranges: 16
            log_level: info
        """)
        )
        config = Config.load(path)
        assert config.validate_levels is False
        assert config.max_level == 61
        assert config.max_ranges == 16
        assert config.log_level == "INFO"

    def test_load_reorder_section(self, write_config: Callable[..., Path]) -> None:
        """Settings nested under a reorder section are applied."""
        path = write_config(
            dedent("""
            reorder:
              max_level: 10
        """)
        )
        config = Config.load(str(path))
        assert config.max_level == 10
        assert config.validate_levels is True

    def test_load_from_environment(
        self, write_config: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """$LINEAR_REORDER_CONFIG is used when no path is given."""
        path = write_config("max_ranges: 4\n", name="env.yaml")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert Config.load().max_ranges == 4

    def test_missing_environment_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A missing file named by the environment is an error."""
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "absent.yaml"))
        with pytest.raises(ConfigError, match="not found"):
            Config.load()

    def test_load_from_default_location(self, tmp_path: Path) -> None:
        """~/.config/linear-reorder/config.yaml is picked up."""
        config_dir = tmp_path / "home" / ".config" / "linear-reorder"
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("max_level: 20\n", encoding="utf-8")
        assert Config.load().max_level == 20

    def test_empty_file_gives_defaults(self, write_config: Callable[..., Path]) -> None:
        """An empty YAML file yields the defaults."""
        assert Config.load(write_config("")) == Config()

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        """An explicit path that does not exist is an error."""
        with pytest.raises(ConfigError, match="Config file not found"):
            Config.load(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, write_config: Callable[..., Path]) -> None:
        """Malformed YAML raises ConfigError."""
        path = write_config("max_level: [1, 2\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            Config.load(path)


class TestConfigValidation:
    """Rejection of bad settings."""

    def test_unknown_key(self, write_config: Callable[..., Path]) -> None:
        """Unknown keys are reported by name."""
        path = write_config("max_depth: 3\nfoo: 1\n")
        with pytest.raises(ConfigError, match="Unknown config keys: foo, max_depth"):
            Config.load(path)

    def test_non_mapping_document(self, write_config: Callable[..., Path]) -> None:
        """A YAML list is not a valid config."""
        with pytest.raises(ConfigError, match="must be a mapping"):
            Config.load(write_config("- 1\n- 2\n"))

    def test_non_mapping_section(self) -> None:
        """The reorder section must itself be a mapping."""
        with pytest.raises(ConfigError, match="'reorder' section"):
            Config.from_dict({"reorder": [1]})

    @pytest.mark.parametrize(
        ("settings", "message"),
        [
            ({"validate_levels": "yes"}, "validate_levels"),
            ({"max_level": -1}, "max_level"),
            ({"max_level": True}, "max_level"),
            ({"max_ranges": 0}, "max_ranges"),
            ({"max_ranges": 2.5}, "max_ranges"),
            ({"log_level": "LOUD"}, "log_level"),
        ],
    )
    def test_bad_values(self, settings: dict[str, object], message: str) -> None:
        """Out-of-range or mistyped values raise ConfigError."""
        with pytest.raises(ConfigError, match=message):
            Config.from_dict(settings)
