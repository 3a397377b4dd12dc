"""Pytest configuration and shared fixtures for linear-reorder tests."""

from __future__ import annotations

import random
from collections.abc import Callable
from pathlib import Path

import pytest

from linear_reorder.config import CONFIG_ENV_VAR

# UAX #9 L2 worked example: levels of five single-run spans
CANONICAL_LEVELS = [0, 1, 2, 1, 0]
CANONICAL_VISUAL_ORDER = [0, 3, 2, 1, 4]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user and environment config files out of every test."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def canonical_levels() -> list[int]:
    """Return the logical levels of the canonical example."""
    return list(CANONICAL_LEVELS)


@pytest.fixture
def random_levels() -> Callable[..., list[list[int]]]:
    """Return a factory for reproducible random level sequences."""

    def make(
        count: int, max_length: int = 20, max_level: int = 7, seed: int = 0
    ) -> list[list[int]]:
        rng = random.Random(seed)
        return [
            [rng.randint(0, max_level) for _ in range(rng.randint(0, max_length))]
            for _ in range(count)
        ]

    return make


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes YAML text to a config file."""

    def write(content: str, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return write


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
