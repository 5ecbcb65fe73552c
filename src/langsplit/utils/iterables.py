"""Small combinators over ordered sequences."""

from collections.abc import Iterable, Iterator
from itertools import pairwise
from typing import TypeVar

T = TypeVar("T")


def adjacent_pairs(items: Iterable[T]) -> Iterator[tuple[T, T]]:
    """Slide a window of size 2, stride 1, over ``items``.

    Sequences with fewer than two elements produce nothing.

    Examples:
        >>> list(adjacent_pairs([0, 2, 10]))
        [(0, 2), (2, 10)]
        >>> list(adjacent_pairs([5]))
        []
    """
    return pairwise(items)


def strictly_increasing(values: Iterable[int]) -> list[int]:
    """Sort ``values`` and drop duplicates."""
    return sorted(set(values))
