"""Configuration models for the splitter.

A splitter is configured with a handful of named options. Strategy
overrides (custom split or overlap conditions) are code, not data, and are
passed next to the config when building a ``Splitter``.
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from langsplit.errors import ConfigurationError

from .settings import Settings


def _invalid_config(error: ValidationError) -> ConfigurationError:
    return ConfigurationError(
        "Invalid splitter configuration",
        details={"errors": error.errors(include_url=False)},
        original_error=error,
    )


class SplitterConfig(BaseModel):
    """Options recognized by the splitting pipeline.

    Invalid options raise ``ConfigurationError`` whether the config is built
    with keyword arguments or with ``parse``.

    Attributes:
        max_units_per_chunk: Budget for the count splitter (units per chunk)
        unit: Built-in unit counted by the count splitter (e.g. "paragraph")
        overlap_percent: Share of each chunk's span borrowed from its predecessor
        trim_whitespace: Strip leading/trailing whitespace from chunk content
    """

    max_units_per_chunk: int | None = None
    unit: str = "paragraph"
    overlap_percent: float = Field(default=0.0, allow_inf_nan=False)
    trim_whitespace: bool = False

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise _invalid_config(e) from e

    @classmethod
    def parse(cls, data: dict[str, Any]) -> "SplitterConfig":
        """Build a config from a plain dictionary.

        Raises:
            ConfigurationError: If the dictionary does not describe a valid config
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise _invalid_config(e) from e

    @classmethod
    def from_settings(cls, settings: Settings) -> "SplitterConfig":
        """Build a config from environment-backed settings."""
        return cls(
            max_units_per_chunk=settings.MAX_UNITS_PER_CHUNK,
            unit=settings.UNIT,
            overlap_percent=settings.OVERLAP_PERCENT,
            trim_whitespace=settings.TRIM_WHITESPACE,
        )
