"""SplitPoint entity: a half-open window over document offsets."""

from dataclasses import dataclass

from langsplit.errors import InvalidWindowError


@dataclass(frozen=True, slots=True)
class SplitPoint:
    """A ``[start, end)`` window over the concatenated document text.

    Offsets are character positions. Windows are non-empty except for the
    single ``(0, 0)`` window that covers an empty document.

    Attributes:
        start: First offset inside the window
        end: First offset past the window
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise InvalidWindowError(
                "SplitPoint start must be non-negative",
                details={"start": self.start, "end": self.end},
            )
        if self.end < self.start:
            raise InvalidWindowError(
                "SplitPoint end must not precede start",
                details={"start": self.start, "end": self.end},
            )

    @property
    def length(self) -> int:
        return self.end - self.start

    def with_start(self, start: int) -> "SplitPoint":
        """Return a copy of this window beginning at ``start``."""
        return SplitPoint(start, self.end)
