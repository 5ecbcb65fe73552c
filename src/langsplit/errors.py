"""
LangSplit Error Classification System.

This module provides the exceptions raised by the splitting pipeline.

Error Categories:
-----------------
1. Configuration Errors: raised while constructing a pipeline
   - Non-positive unit budget
   - Overlap percent outside [0, 100)
   - Missing or non-callable split / overlap strategy
   - Unknown unit name

2. Window Errors: offsets that break the window contract
   - Negative or inverted SplitPoint offsets
   - Overlap strategies that move a window's end or grow its start

Errors raised by a document source or by a caller-supplied strategy are
NOT wrapped. They reach the caller unchanged; the pipeline only attaches a
note naming the stage that failed.

Usage:
------
    from langsplit.errors import ConfigurationError, LangSplitError

    try:
        splitter = Splitter.from_config(SplitterConfig(max_units_per_chunk=0))
    except ConfigurationError as e:
        logger.error(f"Bad splitter configuration: {e}")
"""

from typing import Any


class LangSplitError(Exception):
    """
    Base exception for all LangSplit errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error (optional)
        original_error: The underlying exception that caused this error (optional)
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        parts = [self.message]
        parts.extend(f"{key}={value!r}" for key, value in self.details.items())
        if self.original_error is not None:
            parts.append(f"cause: {self.original_error!r}")
        return "; ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Structured form of the error, for log records."""
        data: dict[str, Any] = {"error": type(self).__name__, "message": self.message, **self.details}
        if self.original_error is not None:
            data["cause"] = repr(self.original_error)
        return data


class ConfigurationError(LangSplitError, ValueError):
    """
    Raised when a splitter is configured with invalid options.

    Always raised at construction time, never while a document is being
    split.

    Common causes:
    - max_units_per_chunk <= 0
    - overlap_percent < 0 or >= 100
    - No split condition and no unit budget
    """

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class InvalidWindowError(LangSplitError, ValueError):
    """Raised when a window violates the offset contract."""

    def __init__(
        self,
        message: str = "Invalid window",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


def is_configuration_error(error: Exception) -> bool:
    """
    Check if an error was caused by pipeline configuration.

    Args:
        error: The exception to check

    Returns:
        True if the error is an instance of ConfigurationError
    """
    return isinstance(error, ConfigurationError)
