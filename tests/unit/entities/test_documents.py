"""Tests for document sources."""

import asyncio

import pytest

from langsplit.entities.document import (
    AsyncFragmentDocument,
    BaseDocument,
    FileDocument,
    FragmentDocument,
    TextDocument,
)


class TestTextDocument:

    def test_yields_single_fragment(self):
        doc = TextDocument("hello world")
        assert list(doc.get_content()) == ["hello world"]

    def test_can_be_read_twice(self):
        doc = TextDocument("hello")
        assert list(doc.get_content()) == list(doc.get_content())

    def test_metadata_copied(self):
        metadata = {"source": "a.txt"}
        doc = TextDocument("x", metadata=metadata)
        metadata["source"] = "changed"
        assert doc.metadata == {"source": "a.txt"}

    def test_base_document_is_abstract(self):
        with pytest.raises(TypeError):
            BaseDocument()


class TestFragmentDocument:

    def test_concatenation_without_separator(self):
        doc = FragmentDocument(["ab", "cd", "ef"])
        assert "".join(doc.get_content()) == "abcdef"

    def test_separator_between_fragments_only(self):
        doc = FragmentDocument(["page 1", "page 2"], separator="\n\n")
        assert "".join(doc.get_content()) == "page 1\n\npage 2"

    def test_accepts_generator_and_rereads(self):
        doc = FragmentDocument(str(i) for i in range(3))
        assert "".join(doc.get_content()) == "012"
        assert "".join(doc.get_content()) == "012"

    def test_empty(self):
        assert list(FragmentDocument([]).get_content()) == []


class TestFileDocument:

    def test_reads_in_blocks(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("abcdefghij", encoding="utf-8")

        doc = FileDocument(path, block_size=4)

        assert list(doc.get_content()) == ["abcd", "efgh", "ij"]

    def test_preserves_crlf(self, tmp_path):
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"one\r\ntwo")

        doc = FileDocument(path)

        assert "".join(doc.get_content()) == "one\r\ntwo"

    def test_metadata(self, tmp_path):
        path = tmp_path / "notes.md"
        path.write_text("# notes", encoding="utf-8")

        doc = FileDocument(path, metadata={"author": "me"})

        assert doc.metadata["filename"] == "notes.md"
        assert doc.metadata["extension"] == ".md"
        assert doc.metadata["author"] == "me"

    def test_missing_file_raises_on_read(self, tmp_path):
        doc = FileDocument(tmp_path / "missing.txt")
        with pytest.raises(FileNotFoundError):
            list(doc.get_content())

    def test_directory_rejected_on_read(self, tmp_path):
        doc = FileDocument(tmp_path)
        with pytest.raises(ValueError, match="Not a file"):
            list(doc.get_content())

    def test_invalid_block_size(self, tmp_path):
        with pytest.raises(ValueError, match="block_size must be positive"):
            FileDocument(tmp_path / "x.txt", block_size=0)


class TestAsyncFragmentDocument:

    @pytest.mark.asyncio
    async def test_yields_fragments(self):
        async def pages():
            for page in ("one", "two"):
                await asyncio.sleep(0)
                yield page

        doc = AsyncFragmentDocument(pages)
        fragments = [fragment async for fragment in doc.aget_content()]

        assert fragments == ["one", "two"]

    @pytest.mark.asyncio
    async def test_factory_restarts_source(self):
        calls = []

        async def pages():
            calls.append(1)
            yield "text"

        doc = AsyncFragmentDocument(pages)
        [f async for f in doc.aget_content()]
        [f async for f in doc.aget_content()]

        assert len(calls) == 2
