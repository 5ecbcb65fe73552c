"""Window construction: boundary offsets to a gap-free partition."""

from collections.abc import Iterable

from loguru import logger

from langsplit.entities.split_point import SplitPoint
from langsplit.utils.iterables import adjacent_pairs, strictly_increasing


def normalize_boundaries(offsets: Iterable[int], length: int) -> list[int]:
    """Sort boundary offsets, dropping duplicates and values outside ``(0, length)``.

    Offsets equal to 0 or ``length`` would only produce empty windows.
    """
    offsets = list(offsets)
    kept = strictly_increasing(offset for offset in offsets if 0 < offset < length)
    if len(kept) != len(offsets):
        logger.debug(f"Discarded {len(offsets) - len(kept)} duplicate or out-of-range boundaries")
    return kept


def build_windows(offsets: Iterable[int], length: int) -> list[SplitPoint]:
    """Partition ``[0, length)`` into consecutive windows cut at ``offsets``.

    Transforms ``[2, 10, 20]`` over a document of length 100 into
    ``(0, 2), (2, 10), (10, 20), (20, 100)``. Without boundaries the result
    is a single window spanning the document; an empty document yields the
    single window ``(0, 0)``.

    Args:
        offsets: Boundary offsets, in any order
        length: Length of the document text

    Returns:
        Windows sorted by start, with ``window[i].end == window[i + 1].start``
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    if length == 0:
        return [SplitPoint(0, 0)]

    bounds = [0, *normalize_boundaries(offsets, length), length]
    return [SplitPoint(a, b) for a, b in adjacent_pairs(bounds) if a < b]
