"""Entities shared across the splitting pipeline."""

from .chunk import Chunk
from .document import (
    AsyncBaseDocument,
    AsyncFragmentDocument,
    BaseDocument,
    FileDocument,
    FragmentDocument,
    TextDocument,
)
from .split_point import SplitPoint

__all__ = [
    "AsyncBaseDocument",
    "AsyncFragmentDocument",
    "BaseDocument",
    "Chunk",
    "FileDocument",
    "FragmentDocument",
    "SplitPoint",
    "TextDocument",
]
