"""Chunk assembly: slicing the document text per final window."""

from collections.abc import Iterable, Iterator
from typing import Any

from langsplit.entities.chunk import Chunk
from langsplit.entities.split_point import SplitPoint


def assemble_chunks(
    text: str,
    windows: Iterable[SplitPoint],
    trim_whitespace: bool = False,
    metadata: dict[str, Any] | None = None,
) -> Iterator[Chunk]:
    """Lazily yield one chunk per window, in window order.

    Trimming only strips the extracted slice. The chunk keeps the window
    offsets, and a window made entirely of whitespace yields an empty chunk.

    Args:
        text: The full document text
        windows: Final windows over ``text``
        trim_whitespace: Strip leading/trailing whitespace from each slice
        metadata: Document metadata merged into every chunk

    Yields:
        Chunks carrying ``chunk_index``, ``start_char`` and ``end_char`` metadata
    """
    metadata = metadata or {}

    for index, window in enumerate(windows):
        content = text[window.start:window.end]
        if trim_whitespace:
            content = content.strip()

        yield Chunk(
            content=content,
            index=index,
            start=window.start,
            end=window.end,
            metadata={
                **metadata,
                "chunk_index": index,
                "start_char": window.start,
                "end_char": window.end,
            },
        )
