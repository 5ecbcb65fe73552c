"""Configuration for LangSplit."""

from .models import SplitterConfig
from .settings import Settings, configure_logging, load_settings, settings

__all__ = ["Settings", "SplitterConfig", "configure_logging", "load_settings", "settings"]
