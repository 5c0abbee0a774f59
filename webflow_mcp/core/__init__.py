"""Core infrastructure utilities."""

from .config import RuntimeSettings, WebflowSettings, get_runtime_settings, load_settings
from .logging_config import configure_logging, get_logger

__all__ = [
    "RuntimeSettings",
    "WebflowSettings",
    "configure_logging",
    "get_logger",
    "get_runtime_settings",
    "load_settings",
]
