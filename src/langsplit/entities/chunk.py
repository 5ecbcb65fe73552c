"""Chunk entity representing one emitted slice of a document."""

from typing import Any

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """Represents a chunk of text cut from a document.

    ``start`` and ``end`` are the offsets of the window the content was
    extracted from. When whitespace trimming is enabled the content may be
    shorter than ``end - start``; the offsets are never adjusted for it.

    Attributes:
        content: The (possibly trimmed) text of this chunk, may be empty
        index: Position of the chunk in the output sequence
        start: Window start offset in the document text
        end: Window end offset in the document text
        metadata: Document metadata plus chunk position keys
    """

    content: str
    index: int = Field(..., ge=0)
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = {
        "frozen": True,
    }

    @property
    def contents(self) -> str:
        return self.content

    def get_meta(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)
