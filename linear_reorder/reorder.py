"""One-pass linear-time UAX #9 rule L2.

Sweep the runs in logical order keeping a stack of ranges. On each run,
flatten the ranges before it whose level is higher than the run by merging
them, reordering as we go. Then either attach the run to the top range or push
a new range for it, depending on how the levels compare.

Every run causes at most one push, so the total number of merges is bounded
by the number of runs and the whole sweep is linear. No recursion is used.

The caller is responsible for reversing the content of every run whose level
is odd; only the run order is computed here.

Example:
    >>> from linear_reorder import visual_order
    >>> visual_order([0, 1, 2, 1, 0])
    [0, 3, 2, 1, 4]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from linear_reorder.config import Config
from linear_reorder.exceptions import RangeStackExhaustedError, ReorderInvariantError
from linear_reorder.runs import TERMINATOR, Line, Run
from linear_reorder.validation import validate_levels

logger = logging.getLogger(__name__)

# Range index meaning "no range beneath".
NO_RANGE = -1


@dataclass(slots=True)
class Range:
    """Runs already in correct relative visual order.

    Following the links from ``left`` eventually reaches ``right``. The link
    of ``right`` is undefined until the range is closed.

    Attributes:
        level: Lowest level of any run in the range.
        left: Index of the leftmost run.
        right: Index of the rightmost run.
        previous: Stack index of the range beneath, or ``NO_RANGE``.
    """

    level: int
    left: int
    right: int
    previous: int = NO_RANGE


class RangeStack:
    """Arena of open ranges used as a LIFO stack.

    Ranges are addressed by their position in the arena. Levels strictly
    increase from the bottom of the stack to the top.
    """

    def __init__(self, links: list[int], capacity: int | None = None) -> None:
        """Initialize stack.

        Args:
            links: Successor list the ranges splice runs into.
            capacity: Maximum number of open ranges, None for no limit.
        """
        self._links = links
        self._ranges: list[Range] = []
        self.capacity = capacity
        self.peak = 0

    def __len__(self) -> int:
        return len(self._ranges)

    @property
    def top(self) -> Range | None:
        return self._ranges[-1] if self._ranges else None

    def beneath(self, range_: Range) -> Range | None:
        """Return the range under ``range_``, or None at the bottom."""
        if range_.previous == NO_RANGE:
            return None
        return self._ranges[range_.previous]

    def push(self, level: int, run: int) -> Range:
        """Open a new range holding only ``run``.

        Raises:
            ReorderInvariantError: If ``level`` is not above the top range's level.
            RangeStackExhaustedError: If the capacity is reached or memory runs out.
        """
        if self._ranges and level <= self._ranges[-1].level:
            raise ReorderInvariantError(
                f"Cannot push run {run} at level {level} onto range "
                f"at level {self._ranges[-1].level}",
                level=level,
            )
        if self.capacity is not None and len(self._ranges) >= self.capacity:
            raise RangeStackExhaustedError(
                f"Range stack capacity of {self.capacity} exhausted at level {level}",
                capacity=self.capacity,
            )
        try:
            range_ = Range(level, run, run, len(self._ranges) - 1)
            self._ranges.append(range_)
        except MemoryError as e:
            raise RangeStackExhaustedError(
                f"Out of memory allocating range {len(self._ranges)}"
            ) from e
        self.peak = max(self.peak, len(self._ranges))
        return range_

    def attach(self, range_: Range, level: int, run: int) -> None:
        """Add ``run`` to ``range_`` and lower the range to the run's level."""
        if level % 2:
            # Odd, range goes to the right of run.
            self._links[run] = range_.left
            range_.left = run
        else:
            # Even, range goes to the left of run.
            self._links[range_.right] = run
            range_.right = run
        range_.level = level

    def merge_top(self, index: int | None = None, level: int | None = None) -> Range:
        """Merge the top range into the one beneath it and release the top.

        Args:
            index: Logical index of the run being processed, for diagnostics.
            level: Level of that run, for diagnostics.

        Returns:
            The range beneath, now holding both spans.

        Raises:
            ReorderInvariantError: If there is no range beneath the top, or
                the two ranges are not in increasing level order.
        """
        if not self._ranges:
            raise ReorderInvariantError(
                _describe("Cannot merge: range stack is empty", index, level),
                index=index,
                level=level,
            )
        range_ = self._ranges[-1]
        if range_.previous == NO_RANGE:
            raise ReorderInvariantError(
                _describe(
                    f"Cannot merge: no range beneath top range at level {range_.level}",
                    index,
                    level,
                ),
                index=index,
                level=level,
            )
        previous = self._ranges[range_.previous]
        if previous.level >= range_.level:
            raise ReorderInvariantError(
                _describe(
                    f"Range stack out of order: level {previous.level} "
                    f"beneath level {range_.level}",
                    index,
                    level,
                ),
                index=index,
                level=level,
            )

        if previous.level % 2:
            # Odd, previous goes to the right of range.
            left, right = range_, previous
        else:
            # Even, previous goes to the left of range.
            left, right = previous, range_
        self._links[left.right] = right.left

        previous.left = left.left
        previous.right = right.right

        self._ranges.pop()
        return previous

    def clear(self) -> None:
        """Release every open range."""
        self._ranges.clear()


def _describe(message: str, index: int | None, level: int | None) -> str:
    if index is None:
        return f"{message} (during finalization)"
    return f"{message} (at run {index}, level {level})"


class Reorderer:
    """Reorders lines of runs from logical to visual order.

    Args:
        config: Settings; defaults are used when omitted.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()

    def reorder_line(self, line: Line) -> Line:
        """Relink ``line`` into visual order.

        The line is handed in and handed back: its links and head are
        rewritten in place, the runs themselves are untouched. On error the
        line keeps its original links.

        Args:
            line: Runs linked in logical order.

        Returns:
            The same line, linked in visual order.

        Raises:
            LevelSequenceError: If validation is on and a level is invalid.
            ReorderInvariantError: If the sweep reaches an impossible stack state.
            RangeStackExhaustedError: If a range cannot be allocated.
        """
        order = list(line.indices())
        if not order:
            return line

        levels = [line.runs[index].level for index in order]
        if self.config.validate_levels:
            validate_levels(levels, self.config.max_level)

        links = list(line.links)
        head = self._sweep(order, levels, links)

        line.links[:] = links
        line.head = head
        return line

    def _sweep(
        self, order: Sequence[int], levels: Sequence[int], links: list[int]
    ) -> int:
        stack = RangeStack(links, capacity=self.config.max_ranges)
        try:
            for position, (run, level) in enumerate(zip(order, levels)):
                range_ = stack.top
                while range_ is not None and range_.level > level:
                    previous = stack.beneath(range_)
                    if previous is None or previous.level < level:
                        break
                    range_ = stack.merge_top(position, level)

                if range_ is not None and range_.level >= level:
                    stack.attach(range_, level, run)
                else:
                    stack.push(level, run)

            while len(stack) > 1:
                stack.merge_top()

            range_ = stack.top
            if range_ is None:
                raise ReorderInvariantError(
                    "Range stack empty after sweeping a non-empty line"
                )
            # Terminate.
            links[range_.right] = TERMINATOR
            logger.debug(
                "Reordered %d runs, peak range stack depth %d", len(order), stack.peak
            )
            return range_.left
        finally:
            stack.clear()

    def reorder(self, runs: Iterable[Run]) -> list[Run]:
        """Return ``runs`` in visual order as a new list of the same objects."""
        return list(self.reorder_line(Line.from_runs(runs)))

    def visual_order(self, levels: Iterable[int]) -> list[int]:
        """Return logical indices of a level sequence in visual order."""
        line = self.reorder_line(Line.from_levels(levels))
        return list(line.indices())


def reorder_line(line: Line, config: Config | None = None) -> Line:
    """Relink ``line`` into visual order. See ``Reorderer.reorder_line``."""
    return Reorderer(config).reorder_line(line)


def reorder(runs: Iterable[Run], config: Config | None = None) -> list[Run]:
    """Return ``runs`` (logical order) as a new list in visual order."""
    return Reorderer(config).reorder(runs)


def visual_order(levels: Iterable[int], config: Config | None = None) -> list[int]:
    """Return the logical indices of ``levels`` in visual order."""
    return Reorderer(config).visual_order(levels)
