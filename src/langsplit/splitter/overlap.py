"""Overlap strategies.

An overlap condition is any callable ``(windows) -> windows`` that may move
window starts earlier so that a chunk repeats the tail of its predecessor.
Window ends are never touched.
"""

import math
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from loguru import logger

from langsplit.entities.split_point import SplitPoint
from langsplit.errors import ConfigurationError, InvalidWindowError


@runtime_checkable
class OverlapCondition(Protocol):
    """Maps the non-overlapping partition to the final windows."""

    def __call__(self, windows: Sequence[SplitPoint]) -> list[SplitPoint]: ...


class NoOverlapCondition:
    """Identity overlap: the final windows are the partition itself."""

    def __call__(self, windows: Sequence[SplitPoint]) -> list[SplitPoint]:
        return list(windows)

    def __repr__(self) -> str:
        return "NoOverlapCondition()"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class PercentageOverlapCondition:
    """Borrows a percentage of each window's span from its predecessor.

    For every window after the first, ``round(span * percent / 100)``
    characters are borrowed, where ``span`` is the window's own width before
    overlap. The borrowed start is clipped so that it never drops below 0
    and always stays strictly after the previous window's final start.

    Example:
        Windows ``(0, 20), (20, 50), (50, 80), (80, 100)`` at 10 percent become
        ``(0, 20), (17, 50), (47, 80), (78, 100)``.

    Attributes:
        percent: Overlap percentage in ``[0, 100)``
    """

    def __init__(self, percent: float):
        if not isinstance(percent, (int, float)) or isinstance(percent, bool):
            raise ConfigurationError(
                "overlap percent must be a number",
                details={"percent": percent},
            )
        if math.isnan(percent) or not 0 <= percent < 100:
            raise ConfigurationError(
                "overlap percent must be in [0, 100)",
                details={"percent": percent},
            )
        self.percent = float(percent)

    def borrow(self, window: SplitPoint) -> int:
        """Number of characters to borrow for ``window`` before clipping."""
        return _round_half_up(window.length * self.percent / 100)

    def __call__(self, windows: Sequence[SplitPoint]) -> list[SplitPoint]:
        if not windows:
            return []

        final = [windows[0]]
        for window in windows[1:]:
            floor = max(0, final[-1].start + 1)
            start = max(window.start - self.borrow(window), floor)
            final.append(window.with_start(min(start, window.start)))

        logger.debug(f"Applied {self.percent:g}% overlap to {len(final)} windows")
        return final

    def __repr__(self) -> str:
        return f"PercentageOverlapCondition({self.percent:g})"


def validate_overlap(
    original: Sequence[SplitPoint], final: Sequence[SplitPoint]
) -> list[SplitPoint]:
    """Check that an overlap strategy only moved window starts earlier.

    Raises:
        InvalidWindowError: If the window count, any end, or the order changed,
            or if a start moved later
    """
    final = list(final)
    if len(final) != len(original):
        raise InvalidWindowError(
            "Overlap condition changed the number of windows",
            details={"expected": len(original), "actual": len(final)},
        )

    previous_start = -1
    for i, (before, after) in enumerate(zip(original, final)):
        if not isinstance(after, SplitPoint):
            raise InvalidWindowError(
                "Overlap condition returned a non-SplitPoint value",
                details={"index": i, "type": type(after).__name__},
            )
        if after.end != before.end:
            raise InvalidWindowError(
                "Overlap condition moved a window end",
                details={"index": i, "expected": before.end, "actual": after.end},
            )
        if after.start > before.start:
            raise InvalidWindowError(
                "Overlap condition moved a window start later",
                details={"index": i, "expected_at_most": before.start, "actual": after.start},
            )
        if after.start < previous_start:
            raise InvalidWindowError(
                "Overlap condition reordered windows",
                details={"index": i, "start": after.start, "previous_start": previous_start},
            )
        previous_start = after.start

    return final
