"""Tests for boundary detection strategies."""

import re

import pytest

from langsplit.errors import ConfigurationError
from langsplit.splitter.conditions import (
    CountSplitCondition,
    MatchFinderFactory,
    RegexMatchFinder,
    SplitCondition,
    count_split_condition,
)


class TestRegexMatchFinder:

    def test_reports_match_starts(self):
        finder = RegexMatchFinder(r"\n#")
        assert finder("AAA\n#H1\nBBB\n#H2\nCCC") == [3, 11]

    def test_compiled_pattern(self):
        finder = RegexMatchFinder(re.compile(r"x"))
        assert finder("axbx") == [1, 3]

    def test_flags(self):
        finder = RegexMatchFinder(r"x", re.IGNORECASE)
        assert finder("aXbx") == [1, 3]

    def test_flags_with_compiled_pattern_rejected(self):
        with pytest.raises(ConfigurationError, match="flags"):
            RegexMatchFinder(re.compile(r"x"), re.IGNORECASE)

    def test_invalid_pattern(self):
        with pytest.raises(ConfigurationError, match="Invalid match pattern"):
            RegexMatchFinder(r"(unclosed")


class TestCountSplitCondition:

    def test_budget_one_cuts_at_every_match(self, header_condition, header_text):
        assert header_condition(header_text, 1) == [3, 11]

    def test_every_budget_th_match(self):
        condition = CountSplitCondition(lambda text: [10, 20, 30, 40, 50])
        assert condition("x" * 60, 2) == [20, 40]
        assert condition("x" * 60, 3) == [30]

    def test_partial_group_not_closed_by_condition(self):
        condition = CountSplitCondition(lambda text: [10, 20, 30])
        # Trailing match 30 is closed by the document end, not reported
        assert condition("x" * 40, 2) == [20]

    def test_budget_larger_than_matches(self):
        condition = CountSplitCondition(lambda text: [10, 20])
        assert condition("x" * 40, 5) == []

    def test_matches_outside_text_ignored(self):
        condition = CountSplitCondition(lambda text: [0, 5, 10, 10, 99])
        assert condition("x" * 10, 1) == [5]

    def test_unsorted_matches_are_sorted(self):
        condition = CountSplitCondition(lambda text: [8, 2, 5])
        assert condition("x" * 10, 1) == [2, 5, 8]

    def test_no_matches(self):
        condition = CountSplitCondition(lambda text: [])
        assert condition("plain text", 1) == []

    def test_non_positive_budget(self):
        condition = CountSplitCondition(lambda text: [1])
        with pytest.raises(ConfigurationError, match="budget must be positive"):
            condition("abc", 0)

    def test_match_finder_must_be_callable(self):
        with pytest.raises(ConfigurationError, match="callable"):
            CountSplitCondition("not callable")

    def test_plain_function_is_a_split_condition(self):
        def custom(text: str, budget: int) -> list[int]:
            return []

        assert isinstance(custom, SplitCondition)
        assert isinstance(CountSplitCondition(lambda t: []), SplitCondition)

    def test_match_finder_errors_propagate(self):
        def broken(text):
            raise RuntimeError("finder broke")

        with pytest.raises(RuntimeError, match="finder broke"):
            CountSplitCondition(broken)("abc", 1)


class TestBuiltinUnits:

    def test_paragraph_breaks(self):
        text = "one\n\ntwo\n\n\nthree"
        assert MatchFinderFactory.create("paragraph")(text) == [3, 8]

    def test_paragraph_break_with_blank_spaces(self):
        text = "one\n  \ntwo"
        assert MatchFinderFactory.create("paragraph")(text) == [3]

    def test_single_newline_is_not_a_paragraph_break(self):
        assert MatchFinderFactory.create("paragraph")("one\ntwo") == []

    def test_lines(self):
        assert MatchFinderFactory.create("line")("a\nb\r\nc\rd") == [1, 3, 6]

    def test_sentences(self):
        text = "First one. Second one! Third?"
        assert MatchFinderFactory.create("sentence")(text) == [10, 22]

    def test_words(self):
        assert MatchFinderFactory.create("word")("alpha beta  gamma ") == [5, 10]

    def test_markdown_headers(self, markdown_text):
        finder = MatchFinderFactory.create("markdown_header")
        offsets = finder(markdown_text)
        assert [markdown_text[o:].lstrip().split("\n")[0] for o in offsets] == [
            "# Title",
            "## Section A",
            "## Section B",
        ]

    def test_unknown_unit(self):
        with pytest.raises(ConfigurationError, match="Unknown unit: 'chapter'"):
            MatchFinderFactory.create("chapter")

    def test_register_unit(self):
        MatchFinderFactory.register("comma", RegexMatchFinder(","))
        try:
            assert "comma" in MatchFinderFactory.list_units()
            assert count_split_condition("comma")("a,b,c", 1) == [1, 3]
        finally:
            MatchFinderFactory._registry.pop("comma")

    def test_register_requires_callable(self):
        with pytest.raises(TypeError):
            MatchFinderFactory.register("bad", 42)

    def test_list_units(self):
        assert set(MatchFinderFactory.list_units()) >= {
            "paragraph", "line", "sentence", "word", "markdown_header"
        }
