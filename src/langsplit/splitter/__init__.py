"""Splitter module: boundary detection, windowing, overlap and assembly.

This module provides the document splitting pipeline and the pluggable
strategies it is composed of.
"""

from .assembler import assemble_chunks
from .conditions import (
    CountSplitCondition,
    MatchFinder,
    MatchFinderFactory,
    RegexMatchFinder,
    SplitCondition,
    count_split_condition,
)
from .overlap import (
    NoOverlapCondition,
    OverlapCondition,
    PercentageOverlapCondition,
    validate_overlap,
)
from .splitter import Splitter, SplitStage
from .windows import build_windows, normalize_boundaries

__all__ = [
    "CountSplitCondition",
    "MatchFinder",
    "MatchFinderFactory",
    "NoOverlapCondition",
    "OverlapCondition",
    "PercentageOverlapCondition",
    "RegexMatchFinder",
    "SplitCondition",
    "SplitStage",
    "Splitter",
    "assemble_chunks",
    "build_windows",
    "count_split_condition",
    "normalize_boundaries",
    "validate_overlap",
]
