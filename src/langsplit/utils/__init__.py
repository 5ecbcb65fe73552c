"""Utility functions for LangSplit."""

from .async_helpers import collect_text, run_async_in_sync_context
from .iterables import adjacent_pairs, strictly_increasing
from .performance import timer

__all__ = [
    "adjacent_pairs",
    "collect_text",
    "run_async_in_sync_context",
    "strictly_increasing",
    "timer",
]
