#!/usr/bin/env python3
"""
LangSplit Demo Application

Demonstrates the two ways of configuring the splitter: a custom split
condition that cuts a markdown document at its headers, and the built-in
paragraph splitter with overlap.
"""

import logging
import sys

# Setup basic logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("main")

# Import LangSplit components
try:
    from langsplit import (
        CountSplitCondition,
        FragmentDocument,
        NoOverlapCondition,
        RegexMatchFinder,
        Splitter,
        SplitterConfig,
        TextDocument,
        configure_logging,
    )
except ImportError as e:
    import traceback
    traceback.print_exc()
    logger.error(f"Failed to import langsplit components: {e}")
    sys.exit(1)


EXAMPLE_MARKDOWN = """# Benefits overview
Employees can choose between two health plans.

## Northwind Health Plus
Covers medical, vision and dental services.
Includes prescription drug coverage.

## Northwind Standard
Covers medical and vision services only.

# Enrollment
Enrollment opens every November.
"""

EXAMPLE_PAGES = [
    "Retrieval-Augmented Generation (RAG) combines information retrieval\n"
    "with text generation.\n\n"
    "It lets language models consult external knowledge bases.\n\n",
    "The RAG process has two phases: indexing and retrieval.\n\n"
    "During indexing, documents are parsed, chunked, embedded and stored.\n\n",
    "During retrieval, queries are embedded and similar chunks are returned.\n\n"
    "Chunking strategy strongly affects retrieval quality.\n",
]


def use_custom_splitter() -> None:
    """Split a markdown document into one chunk per header section."""
    # A newline followed by one or more '#' characters
    headers = RegexMatchFinder(r"(\r?\n|\r)\s*#+")

    splitter = Splitter(
        split_condition=CountSplitCondition(headers),
        max_units_per_chunk=1,
        overlap_condition=NoOverlapCondition(),
        trim_whitespace=True,
    )

    chunks = [chunk.content for chunk in splitter.split_document(TextDocument(EXAMPLE_MARKDOWN))]
    logger.info(f"Custom splitter produced {len(chunks)} chunks")
    print("\n============\n".join(chunks))


def use_inbuilt_splitter() -> None:
    """Split a paged document, four paragraphs per chunk with 30% overlap."""
    splitter = Splitter.from_config(
        SplitterConfig(max_units_per_chunk=4, overlap_percent=30.0, trim_whitespace=True)
    )

    for chunk in splitter.split_document(FragmentDocument(EXAMPLE_PAGES)):
        print("=========")
        print(chunk.content)


def main():
    configure_logging("WARNING")
    logger.info("Starting LangSplit Demo")

    use_custom_splitter()
    use_inbuilt_splitter()

    logger.info("Demo complete!")


if __name__ == "__main__":
    main()
