"""Exception hierarchy for linear-reorder."""

from __future__ import annotations


class LinearReorderError(Exception):
    """Base exception for all linear-reorder errors."""


class LevelSequenceError(LinearReorderError, ValueError):
    """Raised when a level sequence is not a valid embedding-level assignment.

    Attributes:
        index: Logical index of the offending run.
        level: The rejected level value.
    """

    def __init__(self, message: str, index: int, level: object) -> None:
        super().__init__(message)
        self.index = index
        self.level = level


class ReorderInvariantError(LinearReorderError):
    """Raised when the range stack reaches a state the sweep cannot continue from.

    This means either a malformed level sequence slipped past validation or
    the stack ordering itself was broken.

    Attributes:
        index: Logical index of the run being processed, or None during
            finalization.
        level: Level of that run, or None during finalization.
    """

    def __init__(
        self, message: str, index: int | None = None, level: int | None = None
    ) -> None:
        super().__init__(message)
        self.index = index
        self.level = level


class RangeStackExhaustedError(LinearReorderError, MemoryError):
    """Raised when a new range cannot be allocated on the range stack.

    Attributes:
        capacity: Configured range capacity, or None when the interpreter
            itself ran out of memory.
    """

    def __init__(self, message: str, capacity: int | None = None) -> None:
        super().__init__(message)
        self.capacity = capacity


class ConfigError(LinearReorderError):
    """Raised for unreadable or invalid configuration."""
