"""
LangSplit - document splitting for retrieval pipelines.

This package turns long documents into ordered, bounded, optionally
overlapping text chunks, with pluggable boundary and overlap strategies.
"""

__version__ = "0.1.0"

# Configuration
from .config import Settings, SplitterConfig, configure_logging, settings

# Entities
from .entities import (
    AsyncBaseDocument,
    AsyncFragmentDocument,
    BaseDocument,
    Chunk,
    FileDocument,
    FragmentDocument,
    SplitPoint,
    TextDocument,
)

# Errors
from .errors import ConfigurationError, InvalidWindowError, LangSplitError

# Splitting pipeline
from .splitter import (
    CountSplitCondition,
    MatchFinderFactory,
    NoOverlapCondition,
    OverlapCondition,
    PercentageOverlapCondition,
    RegexMatchFinder,
    SplitCondition,
    Splitter,
    SplitStage,
)

# Utilities
from .utils import adjacent_pairs

__all__ = [
    # Version
    "__version__",
    # Config
    "Settings",
    "SplitterConfig",
    "configure_logging",
    "settings",
    # Entities
    "AsyncBaseDocument",
    "AsyncFragmentDocument",
    "BaseDocument",
    "Chunk",
    "FileDocument",
    "FragmentDocument",
    "SplitPoint",
    "TextDocument",
    # Errors
    "ConfigurationError",
    "InvalidWindowError",
    "LangSplitError",
    # Splitter
    "CountSplitCondition",
    "MatchFinderFactory",
    "NoOverlapCondition",
    "OverlapCondition",
    "PercentageOverlapCondition",
    "RegexMatchFinder",
    "SplitCondition",
    "SplitStage",
    "Splitter",
    # Utilities
    "adjacent_pairs",
]
