"""Document sources consumed by the splitter.

A document is a read-only, lazy sequence of text fragments. The splitter
treats the in-order concatenation of the fragments as one logical text.
Errors raised while producing fragments propagate to the caller as-is.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Callable, Iterable, Iterator
from pathlib import Path
from typing import Any

from loguru import logger


class BaseDocument(ABC):
    """Abstract base class for synchronous document sources.

    Attributes:
        metadata: Document-level metadata copied into every chunk
    """

    def __init__(self, metadata: dict[str, Any] | None = None):
        self.metadata = dict(metadata or {})

    @abstractmethod
    def get_content(self) -> Iterator[str]:
        """Yield the text fragments of this document, in order.

        Each call starts a fresh pass over the source.
        """
        pass


class AsyncBaseDocument(ABC):
    """Abstract base class for document sources that fetch asynchronously."""

    def __init__(self, metadata: dict[str, Any] | None = None):
        self.metadata = dict(metadata or {})

    @abstractmethod
    def aget_content(self) -> AsyncIterator[str]:
        """Yield the text fragments of this document, in order."""
        pass


class TextDocument(BaseDocument):
    """A document backed by a single in-memory string."""

    def __init__(self, text: str, metadata: dict[str, Any] | None = None):
        super().__init__(metadata)
        self.text = text

    def get_content(self) -> Iterator[str]:
        yield self.text


class FragmentDocument(BaseDocument):
    """A document made of several fragments, such as extracted pages.

    Attributes:
        fragments: The fragments, kept so that the document can be re-read
        separator: Text inserted between consecutive fragments
    """

    def __init__(
        self,
        fragments: Iterable[str],
        separator: str = "",
        metadata: dict[str, Any] | None = None,
    ):
        super().__init__(metadata)
        self.fragments = tuple(fragments)
        self.separator = separator

    def get_content(self) -> Iterator[str]:
        for i, fragment in enumerate(self.fragments):
            if i and self.separator:
                yield self.separator
            yield fragment


class FileDocument(BaseDocument):
    """A text file read lazily in fixed-size blocks.

    Attributes:
        path: Path to the text file
        encoding: Character encoding used to decode the file
        block_size: Number of characters read per fragment
    """

    def __init__(
        self,
        path: str | Path,
        encoding: str = "utf-8",
        block_size: int = 65536,
        metadata: dict[str, Any] | None = None,
    ):
        if block_size <= 0:
            raise ValueError("block_size must be positive")

        self.path = Path(path)
        self.encoding = encoding
        self.block_size = block_size
        super().__init__({
            "source": str(self.path.absolute()),
            "filename": self.path.name,
            "extension": self.path.suffix,
            **(metadata or {}),
        })

    def get_content(self) -> Iterator[str]:
        """Yield the file contents block by block.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If path is not a file
        """
        if not self.path.exists():
            raise FileNotFoundError(f"File not found: {self.path}")

        if not self.path.is_file():
            raise ValueError(f"Not a file: {self.path}")

        logger.debug(f"Reading {self.path} in blocks of {self.block_size} characters")
        # newline="" keeps \r\n intact so offsets match the file text
        with open(self.path, encoding=self.encoding, newline="") as handle:
            while block := handle.read(self.block_size):
                yield block


class AsyncFragmentDocument(AsyncBaseDocument):
    """A document whose fragments arrive from an async source.

    The source is given as a factory so that every pass over the document
    restarts it, e.g. a function opening a new HTTP stream.

    Example:
        >>> async def pages():
        ...     for page in ("one", "two"):
        ...         yield page
        >>> doc = AsyncFragmentDocument(pages)
    """

    def __init__(
        self,
        factory: Callable[[], AsyncIterator[str]],
        metadata: dict[str, Any] | None = None,
    ):
        super().__init__(metadata)
        self.factory = factory

    async def aget_content(self) -> AsyncIterator[str]:
        async for fragment in self.factory():
            yield fragment
