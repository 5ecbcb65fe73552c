"""Shared test fixtures for all test types."""

import random
from pathlib import Path

import pytest

from langsplit.entities.document import FragmentDocument


@pytest.fixture
def sample_paragraphs() -> list[str]:
    """Provide sample paragraph contents."""
    return [
        "Machine learning is a subset of artificial intelligence. "
        "It focuses on teaching computers to learn from data.",
        "Python is a high-level programming language. "
        "It is widely used in data science, web development, and automation.",
        "Natural language processing (NLP) is a field of AI. "
        "It deals with the interaction between computers and human language.",
        "Vector databases enable semantic search. "
        "They store embeddings produced from document chunks.",
        "Chunking strategy strongly affects retrieval quality.",
    ]


@pytest.fixture
def markdown_text() -> str:
    return (
        "Intro line\n"
        "# Title\n"
        "Some text.\n"
        "\n"
        "## Section A\n"
        "Alpha body.\n"
        "## Section B\n"
        "Beta body.\n"
    )


@pytest.fixture
def paged_document(sample_paragraphs) -> FragmentDocument:
    """A document whose pages are joined by blank lines."""
    return FragmentDocument(sample_paragraphs, separator="\n\n", metadata={"source": "pages"})


@pytest.fixture
def sample_text_file(tmp_path, sample_paragraphs) -> Path:
    """Create a temporary text file with sample paragraphs."""
    file_path = tmp_path / "sample.txt"
    file_path.write_text("\n\n".join(sample_paragraphs), encoding="utf-8")
    return file_path


def _random_document(rng: random.Random) -> tuple[str, list[int]]:
    length = rng.randint(0, 300)
    alphabet = "abc \n#."
    text = "".join(rng.choice(alphabet) for _ in range(length))
    boundaries = [rng.randint(-5, length + 5) for _ in range(rng.randint(0, 12))]
    return text, boundaries


@pytest.fixture
def random_documents() -> list[tuple[str, list[int]]]:
    """Seeded random texts paired with arbitrary (unsorted, out-of-range) boundaries."""
    rng = random.Random(1234)
    return [_random_document(rng) for _ in range(200)]
