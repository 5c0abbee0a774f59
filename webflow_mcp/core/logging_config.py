"""Structlog setup for the MCP server.

Everything is rendered as one plain-text line per event and written to
stderr (stdout is reserved for the stdio transport), plus ``LOG_FILE`` when
configured.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import structlog

from .config import RuntimeSettings, get_runtime_settings, resolved_env_file

_CONFIGURED = False
_QUIET_LOGGERS = ("httpx", "httpcore")


def _render_line(_: Any, __: str, event_dict: dict[str, Any]) -> str:
    """``<timestamp> [LEVEL] event key=value ...``; ``None`` values are dropped."""

    head = [
        event_dict.pop("timestamp", ""),
        f"[{str(event_dict.pop('level', 'info')).upper()}]",
        str(event_dict.pop("event", "")),
    ]
    tail = [f"{key}={value}" for key, value in event_dict.items() if value is not None]
    return " ".join(part for part in head + tail if part)


def _handlers(settings: RuntimeSettings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    log_file = (settings.log_file or "").strip()
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, _render_line],
    )
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(settings.log_level)
    return handlers


def configure_logging() -> None:
    """Configure structlog and the root logger once per process."""

    global _CONFIGURED
    if _CONFIGURED and logging.getLogger().handlers:
        return

    settings = get_runtime_settings()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(handlers=_handlers(settings), level=settings.log_level, format="%(message)s")

    # httpx logs every request URL at INFO.
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _CONFIGURED = True
    structlog.get_logger(__name__).info(
        "logging_configured",
        env=settings.app_env,
        level=settings.log_level,
        log_file=settings.log_file or "stderr-only",
        env_file=resolved_env_file() or "not-found",
    )


def get_logger(*args: Any, **kwargs: Any) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, configuring logging on first use."""

    configure_logging()
    return structlog.get_logger(*args, **kwargs)
