"""linear-reorder: one-pass linear-time UAX #9 rule L2 run reordering.

This library takes runs of text tagged with bidi embedding levels, in logical
order, and relinks them into visual (left-to-right display) order:
- Single sweep with an explicit range stack, no recursion
- Arena-and-index line representation, runs are never copied
- Boundary validation of level sequences
- Brute-force reference implementation for cross-checking

Reversing the content of odd-level runs is left to the caller.

Example:
    >>> from linear_reorder import Run, reorder
    >>> runs = [Run(0, "abc"), Run(1, "XYZ"), Run(0, "def")]
    >>> [run.payload for run in reorder(runs)]
    ['abc', 'XYZ', 'def']
"""

from linear_reorder.config import Config
from linear_reorder.exceptions import (
    ConfigError,
    LevelSequenceError,
    LinearReorderError,
    RangeStackExhaustedError,
    ReorderInvariantError,
)
from linear_reorder.reference import reorder_by_reversal
from linear_reorder.reorder import (
    Range,
    RangeStack,
    Reorderer,
    reorder,
    reorder_line,
    visual_order,
)
from linear_reorder.runs import TERMINATOR, Line, Run
from linear_reorder.validation import parse_levels, validate_levels

__version__ = "0.1.0"

__all__ = [
    # Main API
    "Reorderer",
    "reorder",
    "reorder_line",
    "visual_order",
    "Config",
    # Data model
    "Run",
    "Line",
    "Range",
    "RangeStack",
    "TERMINATOR",
    # Levels
    "validate_levels",
    "parse_levels",
    "reorder_by_reversal",
    # Exceptions
    "LinearReorderError",
    "LevelSequenceError",
    "ReorderInvariantError",
    "RangeStackExhaustedError",
    "ConfigError",
    # Metadata
    "__version__",
]
