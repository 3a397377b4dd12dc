"""Brute-force UAX #9 rule L2.

Applies the rule exactly as written: from the highest level on the line down
to the lowest odd level, reverse every contiguous sequence of runs at that
level or higher. Quadratic in the worst case; used as an oracle for the
linear sweep in ``linear_reorder.reorder``.
"""

from __future__ import annotations

from collections.abc import Sequence


def _reverse_contiguous_sequences(
    order: list[int], levels: Sequence[int], level: int
) -> None:
    start: int | None = None
    for position in range(len(order) + 1):
        at_or_above = position < len(order) and levels[order[position]] >= level
        if at_or_above:
            if start is None:
                start = position
        elif start is not None:
            order[start:position] = order[start:position][::-1]
            start = None


def reorder_by_reversal(levels: Sequence[int]) -> list[int]:
    """Return logical run indices in visual order.

    Args:
        levels: Embedding level of each run, in logical order.

    Returns:
        A permutation of ``range(len(levels))``; position 0 is the leftmost run.
    """
    order = list(range(len(levels)))
    odd_levels = [level for level in levels if level % 2]
    if not odd_levels:
        return order

    highest_level = max(levels)
    lowest_odd_level = min(odd_levels)
    for level in range(highest_level, lowest_odd_level - 1, -1):
        _reverse_contiguous_sequences(order, levels, level)
    return order
