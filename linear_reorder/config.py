"""Configuration for linear-reorder.

Settings come from, in order of precedence:
- an explicit path passed to ``Config.load()``
- the file named by ``$LINEAR_REORDER_CONFIG``
- ``~/.config/linear-reorder/config.yaml``
- built-in defaults

Example config file::

    reorder:
      validate_levels: true
      max_level: 126
      max_ranges: null
      log_level: WARNING
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from linear_reorder.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LINEAR_REORDER_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/linear-reorder/config.yaml")

# UAX #9 max_depth is 125; implicit resolution (I1/I2) can add one more.
MAX_DEPTH = 125
DEFAULT_MAX_LEVEL = MAX_DEPTH + 1

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Reordering settings.

    Attributes:
        validate_levels: Check level sequences before the sweep.
        max_level: Highest level accepted by validation.
        max_ranges: Cap on simultaneously open ranges, None for no cap.
        log_level: Logging level name used by the command line.
    """

    validate_levels: bool = True
    max_level: int = DEFAULT_MAX_LEVEL
    max_ranges: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not isinstance(self.validate_levels, bool):
            raise ConfigError(
                f"validate_levels must be a boolean, got {self.validate_levels!r}"
            )
        if (
            not isinstance(self.max_level, int)
            or isinstance(self.max_level, bool)
            or self.max_level < 0
        ):
            raise ConfigError(
                f"max_level must be a non-negative integer, got {self.max_level!r}"
            )
        if self.max_ranges is not None and (
            not isinstance(self.max_ranges, int)
            or isinstance(self.max_ranges, bool)
            or self.max_ranges < 1
        ):
            raise ConfigError(
                f"max_ranges must be a positive integer or null, got {self.max_ranges!r}"
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}"
            )
        self.log_level = self.log_level.upper()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a Config from a mapping, rejecting unknown keys.

        Args:
            data: Mapping of setting names to values. A nested ``reorder``
                section is accepted in place of top-level keys.

        Returns:
            Validated Config.

        Raises:
            ConfigError: If the mapping holds unknown keys or bad values.
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

        section = data.get("reorder", data)
        if not isinstance(section, dict):
            raise ConfigError("'reorder' section must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(section) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        return cls(**section)

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load configuration from YAML, falling back to defaults.

        Args:
            path: Explicit config file. When given it must exist.

        Returns:
            Loaded Config.

        Raises:
            ConfigError: If the file cannot be read or parsed, or holds bad values.
        """
        if path is not None:
            config_path = Path(path).expanduser()
            if not config_path.is_file():
                raise ConfigError(f"Config file not found: {config_path}")
        elif os.environ.get(CONFIG_ENV_VAR):
            config_path = Path(os.environ[CONFIG_ENV_VAR]).expanduser()
            if not config_path.is_file():
                raise ConfigError(
                    f"Config file from ${CONFIG_ENV_VAR} not found: {config_path}"
                )
        else:
            config_path = DEFAULT_CONFIG_PATH.expanduser()
            if not config_path.is_file():
                return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e

        logger.debug("Loaded config from %s", config_path)
        if data is None:
            return cls()
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Return settings as a plain dict."""
        return asdict(self)
