"""Pytest configuration and global fixtures for LangSplit tests."""

import tempfile
from pathlib import Path

import pytest

from langsplit.entities.document import TextDocument
from langsplit.splitter import CountSplitCondition, RegexMatchFinder

# Import shared fixtures
from tests.fixtures.common import (  # noqa: F401
    markdown_text,
    paged_document,
    random_documents,
    sample_paragraphs,
    sample_text_file,
)


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def header_text():
    return "AAA\n#H1\nBBB\n#H2\nCCC"


@pytest.fixture
def header_condition():
    return CountSplitCondition(RegexMatchFinder(r"\n#"))


@pytest.fixture
def sample_document(sample_paragraphs):
    return TextDocument("\n\n".join(sample_paragraphs), metadata={"source": "sample.txt"})


def fixed_boundaries(*offsets: int):
    """Build a split condition that always returns ``offsets``."""
    def condition(text: str, budget: int) -> list[int]:
        return list(offsets)
    return condition


@pytest.fixture
def make_fixed_condition():
    return fixed_boundaries


# ==================== Pytest Configuration ====================

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests")


def pytest_collection_modifyitems(config, items):
    for item in items:
        rel_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if "unit" in rel_path.parts:
            item.add_marker(pytest.mark.unit)
        elif "smoke" in rel_path.parts:
            item.add_marker(pytest.mark.smoke)
