import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from langsplit.errors import ConfigurationError

# Load .env file from the project root
# This file: src/langsplit/config/settings.py
SERVER_ROOT = Path(__file__).resolve().parent.parent.parent.parent
ENV_PATH = SERVER_ROOT / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    # Fallback to simple load_dotenv which looks in cwd
    load_dotenv()

# Settings field -> environment variable
ENV_VARS = {
    "LOG_LEVEL": "LANGSPLIT_LOG_LEVEL",
    "MAX_UNITS_PER_CHUNK": "LANGSPLIT_MAX_UNITS_PER_CHUNK",
    "UNIT": "LANGSPLIT_UNIT",
    "OVERLAP_PERCENT": "LANGSPLIT_OVERLAP_PERCENT",
    "TRIM_WHITESPACE": "LANGSPLIT_TRIM_WHITESPACE",
}


class Settings(BaseModel):
    """Global splitter settings"""

    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    # Splitter defaults
    MAX_UNITS_PER_CHUNK: int | None = Field(default=None, description="Units per chunk for the count splitter")
    UNIT: str = Field(default="paragraph", description="Built-in unit counted by the count splitter")
    OVERLAP_PERCENT: float = Field(default=0.0, description="Percentage of each chunk borrowed from its predecessor")
    TRIM_WHITESPACE: bool = Field(default=False, description="Strip whitespace around chunk content")

    model_config = {
        "frozen": True,
    }


def load_settings() -> Settings:
    """Load settings from environment variables.

    Unset or empty variables keep their defaults; pydantic coerces the rest.

    Raises:
        ConfigurationError: If a variable holds a value of the wrong type
    """
    raw = {
        field: value
        for field, name in ENV_VARS.items()
        if (value := os.getenv(name, "").strip())
    }
    try:
        return Settings.model_validate(raw)
    except ValidationError as e:
        invalid = [ENV_VARS[str(error["loc"][0])] for error in e.errors(include_url=False)]
        raise ConfigurationError(
            f"Invalid environment settings: {', '.join(invalid)}",
            details={"variables": invalid},
            original_error=e,
        ) from e


def _load_global_settings() -> Settings:
    try:
        return load_settings()
    except ConfigurationError as e:
        logger.warning(f"{e.message}; falling back to default settings")
        return Settings()


def configure_logging(level: str | None = None) -> None:
    """Route loguru output to stderr at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=(level or settings.LOG_LEVEL).upper())


# Global settings instance; a bad variable must not break importing the package
settings = _load_global_settings()
