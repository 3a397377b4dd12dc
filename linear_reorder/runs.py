"""Runs and lines.

A ``Line`` is an arena of ``Run`` records plus a parallel list of successor
indices. Reordering rewrites only the successor indices and the head, so the
Run objects the caller handed in keep their identity and payload.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

# Successor index that ends a line.
TERMINATOR = -1


@dataclass(eq=False, slots=True)
class Run:
    """One maximal span of text at a single embedding level.

    Runs compare by identity so that two runs with equal fields stay distinct.

    Attributes:
        level: Embedding level; even is left-to-right, odd is right-to-left.
        payload: Caller data (text, glyphs, ...). Never touched by reordering.
    """

    level: int
    payload: Any = None

    @property
    def is_rtl(self) -> bool:
        """True when the caller must reverse this run's content for display."""
        return self.level % 2 == 1


@dataclass
class Line:
    """Runs of one line linked by index.

    Attributes:
        runs: Run arena; index positions never change.
        links: ``links[i]`` is the index of the run after run ``i``, or
            ``TERMINATOR`` for the last run.
        head: Index of the first run in the current order, ``TERMINATOR`` if
            the line is empty.
    """

    runs: list[Run] = field(default_factory=list)
    links: list[int] = field(default_factory=list)
    head: int = TERMINATOR

    @classmethod
    def from_runs(cls, runs: Iterable[Run]) -> Line:
        """Build a line linked in logical (given) order."""
        run_list = list(runs)
        count = len(run_list)
        links = list(range(1, count)) + [TERMINATOR] if count else []
        return cls(runs=run_list, links=links, head=0 if count else TERMINATOR)

    @classmethod
    def from_levels(
        cls, levels: Iterable[int], payloads: Sequence[Any] | None = None
    ) -> Line:
        """Build a line of fresh runs from a level sequence.

        Args:
            levels: Embedding level of each run, in logical order.
            payloads: Optional payload for each run; must match ``levels`` in length.

        Raises:
            ValueError: If ``payloads`` has a different length than ``levels``.
        """
        level_list = list(levels)
        if payloads is None:
            return cls.from_runs(Run(level) for level in level_list)
        if len(payloads) != len(level_list):
            raise ValueError(
                f"Got {len(payloads)} payloads for {len(level_list)} levels"
            )
        return cls.from_runs(
            Run(level, payload) for level, payload in zip(level_list, payloads)
        )

    def __len__(self) -> int:
        return len(self.runs)

    def __iter__(self) -> Iterator[Run]:
        for index in self.indices():
            yield self.runs[index]

    def indices(self) -> Iterator[int]:
        """Yield run indices by following the links from ``head``.

        Raises:
            ValueError: If the links revisit a run instead of terminating.
        """
        index = self.head
        steps = 0
        while index != TERMINATOR:
            steps += 1
            if steps > len(self.runs):
                raise ValueError("Line links form a cycle")
            yield index
            index = self.links[index]

    def levels(self) -> list[int]:
        """Return levels in the current link order."""
        return [run.level for run in self]
