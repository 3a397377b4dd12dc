"""Boundary checks for embedding-level sequences."""

from __future__ import annotations

from collections.abc import Iterable

from linear_reorder.config import DEFAULT_MAX_LEVEL
from linear_reorder.exceptions import LevelSequenceError


def check_level(index: int, level: object, max_level: int = DEFAULT_MAX_LEVEL) -> int:
    """Validate a single run level.

    Args:
        index: Logical index of the run, used in the error.
        level: Value to check.
        max_level: Highest accepted level.

    Returns:
        The level, unchanged.

    Raises:
        LevelSequenceError: If the level is not an int in ``[0, max_level]``.
    """
    # bool is an int subclass but never a meaningful level
    if not isinstance(level, int) or isinstance(level, bool):
        raise LevelSequenceError(
            f"Run {index}: level must be an integer, got {type(level).__name__} {level!r}",
            index=index,
            level=level,
        )
    if level < 0:
        raise LevelSequenceError(
            f"Run {index}: level must be non-negative, got {level}",
            index=index,
            level=level,
        )
    if level > max_level:
        raise LevelSequenceError(
            f"Run {index}: level {level} exceeds maximum embedding level {max_level}",
            index=index,
            level=level,
        )
    return level


def validate_levels(
    levels: Iterable[object], max_level: int = DEFAULT_MAX_LEVEL
) -> list[int]:
    """Validate a whole level sequence.

    Args:
        levels: Levels in logical order.
        max_level: Highest accepted level.

    Returns:
        The levels as a list.

    Raises:
        LevelSequenceError: On the first invalid level.
    """
    return [check_level(index, level, max_level) for index, level in enumerate(levels)]


def parse_levels(
    text: str, max_level: int | None = DEFAULT_MAX_LEVEL
) -> list[int]:
    """Parse levels written as integers separated by whitespace or commas.

    Args:
        text: Level list, e.g. "0 1 2" or "0,1,2".
        max_level: Highest accepted level, or None to skip validation and
            only parse.

    Raises:
        LevelSequenceError: If a token is not an integer or fails validation.
    """
    tokens = text.replace(",", " ").split()
    levels: list[int] = []
    for index, token in enumerate(tokens):
        try:
            value = int(token)
        except ValueError:
            raise LevelSequenceError(
                f"Run {index}: {token!r} is not an integer level",
                index=index,
                level=token,
            ) from None
        if max_level is not None:
            check_level(index, value, max_level)
        levels.append(value)
    return levels
