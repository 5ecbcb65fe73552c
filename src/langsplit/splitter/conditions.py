"""Boundary detection strategies.

A split condition is any callable ``(text, budget) -> offsets`` returning
the internal offsets at which the text should be cut. The count splitter
composes with a *match finder*, a callable ``text -> offsets`` that locates
structural units (paragraph breaks, markdown headers, ...), and decides how
many matches make up one chunk.
"""

import re
from collections.abc import Callable, Iterable, Sequence
from typing import Protocol, runtime_checkable

from loguru import logger

from langsplit.errors import ConfigurationError
from langsplit.utils.iterables import strictly_increasing

MatchFinder = Callable[[str], Iterable[int]]


@runtime_checkable
class SplitCondition(Protocol):
    """Returns the ordered boundary offsets of ``text`` for a unit budget."""

    def __call__(self, text: str, budget: int) -> Sequence[int]: ...


class RegexMatchFinder:
    """Finds the start offset of every match of a regular expression.

    Attributes:
        pattern: Compiled pattern whose match starts are reported
    """

    def __init__(self, pattern: str | re.Pattern[str], flags: int = 0):
        if isinstance(pattern, re.Pattern):
            if flags:
                raise ConfigurationError("flags cannot be combined with a compiled pattern")
            self.pattern = pattern
        else:
            try:
                self.pattern = re.compile(pattern, flags)
            except re.error as e:
                raise ConfigurationError(
                    f"Invalid match pattern: {pattern!r}",
                    original_error=e,
                ) from e

    def __call__(self, text: str) -> list[int]:
        return [match.start() for match in self.pattern.finditer(text)]

    def __repr__(self) -> str:
        return f"RegexMatchFinder({self.pattern.pattern!r})"


class CountSplitCondition:
    """Cuts the text after every ``budget``-th structural unit.

    Matches at offset 0 or at the end of the text do not separate two
    units and are ignored. Given matches ``m0 < m1 < ...``, the boundaries
    are ``m[budget-1], m[2*budget-1], ...``. A trailing group with fewer
    than ``budget`` units is closed by the end of the document, so the
    condition never reports the document length itself.

    Example:
        >>> condition = CountSplitCondition(RegexMatchFinder(r"\\n#"))
        >>> condition("AAA\\n#H1\\nBBB\\n#H2\\nCCC", 1)
        [3, 11]
    """

    def __init__(self, match_finder: MatchFinder):
        if not callable(match_finder):
            raise ConfigurationError(
                "match_finder must be callable",
                details={"type": type(match_finder).__name__},
            )
        self.match_finder = match_finder

    def __call__(self, text: str, budget: int) -> list[int]:
        if budget <= 0:
            raise ConfigurationError(
                "budget must be positive",
                details={"budget": budget},
            )

        length = len(text)
        matches = strictly_increasing(
            offset for offset in self.match_finder(text) if 0 < offset < length
        )
        boundaries = matches[budget - 1::budget]

        logger.debug(
            f"Found {len(matches)} units, {len(boundaries)} boundaries "
            f"at {budget} units per chunk"
        )
        return boundaries

    def __repr__(self) -> str:
        return f"CountSplitCondition({self.match_finder!r})"


class MatchFinderFactory:
    """Registry of the built-in structural units.

    Every unit is located by the start of the separator that precedes it,
    so the separator travels with the following chunk.
    """

    _registry: dict[str, MatchFinder] = {
        # Blank-line breaks between paragraphs
        "paragraph": RegexMatchFinder(r"(?:\r?\n|\r)[ \t]*(?:\r?\n|\r)\s*"),
        "line": RegexMatchFinder(r"\r?\n|\r"),
        # Whitespace after sentence-ending punctuation
        "sentence": RegexMatchFinder(r"(?<=[.!?。！？])\s+"),
        "word": RegexMatchFinder(r"\s+(?=\S)"),
        # A newline followed by one or more '#'
        "markdown_header": RegexMatchFinder(r"(?:\r?\n|\r)\s*#+"),
    }

    @classmethod
    def create(cls, unit: str) -> MatchFinder:
        """Look up a match finder by unit name.

        Raises:
            ConfigurationError: If the unit is not registered
        """
        if unit not in cls._registry:
            available = ", ".join(cls._registry.keys())
            raise ConfigurationError(
                f"Unknown unit: '{unit}'. Available units: {available}"
            )
        return cls._registry[unit]

    @classmethod
    def register(cls, unit: str, match_finder: MatchFinder):
        """Register a new unit.

        Raises:
            TypeError: If match_finder is not callable
        """
        if not callable(match_finder):
            raise TypeError(f"Match finder for '{unit}' must be callable")

        cls._registry[unit] = match_finder
        logger.info(f"Registered unit '{unit}': {match_finder!r}")

    @classmethod
    def list_units(cls) -> list[str]:
        return list(cls._registry.keys())


def count_split_condition(unit: str) -> CountSplitCondition:
    """Build a count splitter over a built-in unit."""
    return CountSplitCondition(MatchFinderFactory.create(unit))
