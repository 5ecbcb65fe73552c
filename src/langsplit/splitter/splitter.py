"""Splitter facade: the document-to-chunks pipeline.

The pipeline runs five stages in order:

1. Read the document fragments into one text
2. Detect boundary offsets with the split condition
3. Build the non-overlapping windows
4. Apply the overlap condition
5. Assemble chunks lazily

Stages 2-5 are pure functions of the text, so running the same splitter
twice over the same document yields identical chunks.
"""

from collections.abc import AsyncIterator, Iterable, Iterator
from contextlib import contextmanager
from enum import StrEnum
from typing import Any

from loguru import logger

from langsplit.config.models import SplitterConfig
from langsplit.entities.chunk import Chunk
from langsplit.entities.document import AsyncBaseDocument, BaseDocument
from langsplit.entities.split_point import SplitPoint
from langsplit.errors import ConfigurationError
from langsplit.utils.async_helpers import collect_text, run_async_in_sync_context
from langsplit.utils.performance import timer

from .assembler import assemble_chunks
from .conditions import SplitCondition, count_split_condition
from .overlap import (
    NoOverlapCondition,
    OverlapCondition,
    PercentageOverlapCondition,
    validate_overlap,
)
from .windows import build_windows


class SplitStage(StrEnum):
    READ_DOCUMENT = "read_document"
    DETECT_BOUNDARIES = "detect_boundaries"
    BUILD_WINDOWS = "build_windows"
    APPLY_OVERLAP = "apply_overlap"
    ASSEMBLE_CHUNKS = "assemble_chunks"


@contextmanager
def _tag_errors(stage: SplitStage):
    """Tag any exception escaping the block with the stage name.

    The exception itself is re-raised unchanged.
    """
    try:
        yield
    except Exception as e:
        e.add_note(f"Raised during splitter stage '{stage}'")
        logger.error(f"Splitter stage '{stage}' failed: {type(e).__name__}: {e}")
        raise


@contextmanager
def _stage(stage: SplitStage):
    with timer(f"Splitter stage '{stage}'"), _tag_errors(stage):
        yield


class Splitter:
    """Splits documents into ordered, optionally overlapping chunks.

    Attributes:
        split_condition: Callable ``(text, budget) -> offsets``
        max_units_per_chunk: Budget passed to the split condition
        overlap_condition: Callable ``(windows) -> windows``
        trim_whitespace: Strip whitespace around chunk content

    Example:
        >>> splitter = Splitter.from_config(
        ...     SplitterConfig(max_units_per_chunk=4, overlap_percent=30, trim_whitespace=True)
        ... )
        >>> chunks = list(splitter.split_document(TextDocument(text)))
    """

    def __init__(
        self,
        split_condition: SplitCondition | None,
        max_units_per_chunk: int = 1,
        overlap_condition: OverlapCondition | None = None,
        trim_whitespace: bool = False,
    ):
        """Initialize the splitter.

        Args:
            split_condition: Boundary detector
            max_units_per_chunk: Budget passed to the boundary detector
            overlap_condition: Overlap strategy, no overlap if None
            trim_whitespace: Whether to strip chunk content

        Raises:
            ConfigurationError: If the detector is missing or not callable,
                the budget is not a positive integer, or the overlap
                strategy is not callable
        """
        if split_condition is None:
            raise ConfigurationError("A split condition is required")
        if not callable(split_condition):
            raise ConfigurationError(
                "split_condition must be callable",
                details={"type": type(split_condition).__name__},
            )
        if (
            not isinstance(max_units_per_chunk, int)
            or isinstance(max_units_per_chunk, bool)
            or max_units_per_chunk <= 0
        ):
            raise ConfigurationError(
                "max_units_per_chunk must be a positive integer",
                details={"max_units_per_chunk": max_units_per_chunk},
            )
        if overlap_condition is None:
            overlap_condition = NoOverlapCondition()
        elif not callable(overlap_condition):
            raise ConfigurationError(
                "overlap_condition must be callable",
                details={"type": type(overlap_condition).__name__},
            )

        self.split_condition = split_condition
        self.max_units_per_chunk = max_units_per_chunk
        self.overlap_condition = overlap_condition
        self.trim_whitespace = trim_whitespace

        logger.info(
            f"Initialized Splitter: condition={split_condition!r}, "
            f"units_per_chunk={max_units_per_chunk}, "
            f"overlap={overlap_condition!r}, trim={trim_whitespace}"
        )

    @classmethod
    def from_config(
        cls,
        config: SplitterConfig | dict[str, Any],
        split_condition: SplitCondition | None = None,
        overlap_condition: OverlapCondition | None = None,
    ) -> "Splitter":
        """Build a splitter from named options.

        Without a custom split condition the built-in count splitter over
        ``config.unit`` is used and ``max_units_per_chunk`` is required. A
        custom condition receives ``max_units_per_chunk`` (default 1) as
        its budget. A custom overlap condition takes precedence over
        ``overlap_percent``.

        Raises:
            ConfigurationError: If the options are invalid
        """
        if isinstance(config, dict):
            config = SplitterConfig.parse(config)

        if split_condition is None:
            if config.max_units_per_chunk is None:
                raise ConfigurationError(
                    "max_units_per_chunk is required when no split condition is given"
                )
            split_condition = count_split_condition(config.unit)
        elif config.unit != SplitterConfig.model_fields["unit"].default:
            logger.warning(f"unit='{config.unit}' ignored in favour of {split_condition!r}")
        budget = config.max_units_per_chunk if config.max_units_per_chunk is not None else 1

        # Validates the percent even when a custom strategy replaces it
        percentage = PercentageOverlapCondition(config.overlap_percent)
        if overlap_condition is not None:
            if config.overlap_percent:
                logger.warning(
                    f"overlap_percent={config.overlap_percent:g} ignored "
                    f"in favour of {overlap_condition!r}"
                )
        elif config.overlap_percent > 0:
            overlap_condition = percentage

        return cls(
            split_condition=split_condition,
            max_units_per_chunk=budget,
            overlap_condition=overlap_condition,
            trim_whitespace=config.trim_whitespace,
        )

    def compute_windows(self, text: str) -> list[SplitPoint]:
        """Compute the final (possibly overlapping) windows over ``text``."""
        with _stage(SplitStage.DETECT_BOUNDARIES):
            offsets = self.split_condition(text, self.max_units_per_chunk)

        with _stage(SplitStage.BUILD_WINDOWS):
            windows = build_windows(offsets, len(text))

        with _stage(SplitStage.APPLY_OVERLAP):
            final = validate_overlap(windows, self.overlap_condition(windows))

        return final

    def split_text(self, text: str, metadata: dict[str, Any] | None = None) -> Iterator[Chunk]:
        """Lazily split an in-memory text into chunks."""
        windows = self.compute_windows(text)
        logger.debug(f"Splitting {len(text)} characters into {len(windows)} chunks")

        chunks = assemble_chunks(text, windows, self.trim_whitespace, metadata)
        while True:
            with _tag_errors(SplitStage.ASSEMBLE_CHUNKS):
                chunk = next(chunks, None)
            if chunk is None:
                return
            yield chunk

    def split_document(self, document: BaseDocument | AsyncBaseDocument) -> Iterator[Chunk]:
        """Lazily split a document into chunks.

        The document is drained on the first ``next()``, and every window is
        computed before the first chunk is produced, so a failing source
        never yields partial results. Async documents are drained on a
        private event loop.

        Args:
            document: The document to split

        Yields:
            Chunks in document order
        """
        with _stage(SplitStage.READ_DOCUMENT):
            if isinstance(document, AsyncBaseDocument):
                text = run_async_in_sync_context(collect_text(document.aget_content()))
            else:
                text = "".join(document.get_content())

        yield from self.split_text(text, document.metadata)

    async def asplit_document(
        self, document: BaseDocument | AsyncBaseDocument
    ) -> AsyncIterator[Chunk]:
        """Split a document whose fragments may arrive asynchronously.

        The only suspension point is awaiting the next fragment. Once the
        text is resolved, chunks are produced without further awaits.
        Cancelling while the document is being read aborts before any chunk
        is yielded.
        """
        with _stage(SplitStage.READ_DOCUMENT):
            if isinstance(document, AsyncBaseDocument):
                text = await collect_text(document.aget_content())
            else:
                text = "".join(document.get_content())

        for chunk in self.split_text(text, document.metadata):
            yield chunk

    def split(self, documents: Iterable[BaseDocument | AsyncBaseDocument]) -> list[Chunk]:
        """Split several documents and collect every chunk.

        Chunk indices restart at 0 for each document.
        """
        chunks = []
        count = 0

        for document in documents:
            doc_chunks = list(self.split_document(document))
            chunks.extend(doc_chunks)
            count += 1
            logger.debug(f"Split document into {len(doc_chunks)} chunks")

        logger.info(f"Created {len(chunks)} chunks from {count} documents")
        return chunks

    def __repr__(self) -> str:
        return (
            f"Splitter(split_condition={self.split_condition!r}, "
            f"max_units_per_chunk={self.max_units_per_chunk}, "
            f"overlap_condition={self.overlap_condition!r}, "
            f"trim_whitespace={self.trim_whitespace})"
        )
