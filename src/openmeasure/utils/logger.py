# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""Logging helpers for OpenMeasure.

Everything here sits on top of the standard :mod:`logging` module.  Library
code asks :func:`get_logger` for a child of the ``openmeasure`` logger; the
first call attaches a single :class:`OpenMeasureHandler` to the root logger
unless the application configured one already via :func:`setup_logger`.
"""

from __future__ import annotations

from collections.abc import Callable
import json
import logging
import os
from typing import Any, ClassVar, Final


RESET: Final[str] = "\033[0m"
BLUE: Final[str] = "\033[94m"

DEFAULT_LOGGER_NAME: Final[str] = "openmeasure"
ENV_LOG_LEVEL: Final[str] = "OPENMEASURE_LOG_LEVEL"
ENV_LOG_JSON: Final[str] = "OPENMEASURE_LOG_JSON"
ENV_NO_COLOR: Final[str] = "NO_COLOR"
DEFAULT_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT: Final[str] = "%Y-%m-%d %H:%M:%S"

JsonSerializer = Callable[[dict[str, Any]], str]

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_ATTRS: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys() | {"message", "asctime", "context"}
)


class ColoredFormatter(logging.Formatter):
    """Plain-text formatter that tints the level and logger name."""

    LEVEL_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[1;31m",
        "CRITICAL": "\033[1;35m",
    }

    def format(self, record: logging.LogRecord) -> str:
        levelname, name = record.levelname, record.name
        record.levelname = f"{self.LEVEL_COLORS.get(levelname, '')}{levelname}{RESET}"
        record.name = f"{BLUE}{name}{RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname, record.name = levelname, name


class OpenMeasureHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler owned by OpenMeasure, used to detect prior setup."""


class StructuredJSONFormatter(logging.Formatter):
    """Render each record as one JSON object.

    Values passed through ``extra={"context": {...}}`` are merged into the
    ``context`` key together with any other non-standard record attribute.
    """

    def __init__(self, serializer: JsonSerializer | None = None, *, datefmt: str | None = None) -> None:
        super().__init__(datefmt=datefmt)
        self._serializer = serializer or _dump_json

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        context: dict[str, Any] = {}
        supplied = getattr(record, "context", None)
        if isinstance(supplied, dict):
            context.update(supplied)
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                context.setdefault(key, value)
        if context:
            payload["context"] = context

        return self._serializer(payload)


def _dump_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, default=str)


def _env_flag(key: str) -> bool:
    value = os.getenv(key)
    return value is not None and value.strip().lower() in {"1", "true", "yes", "on"}


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv(ENV_LOG_LEVEL) or logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _installed_handler(root: logging.Logger) -> OpenMeasureHandler | None:
    for handler in root.handlers:
        if isinstance(handler, OpenMeasureHandler):
            return handler
    return None


def setup_logger(
    *,
    level: int | str | None = None,
    use_json: bool | None = None,
    use_color: bool | None = None,
    json_serializer: JsonSerializer | None = None,
    fmt: str | None = None,
    datefmt: str | None = DEFAULT_DATEFMT,
    force: bool = False,
) -> None:
    """Attach the OpenMeasure handler to the root logger.

    Args:
        level: Log level; falls back to ``OPENMEASURE_LOG_LEVEL`` then INFO.
        use_json: Emit JSON lines.  Defaults to ``OPENMEASURE_LOG_JSON``.
        use_color: Colorize plain output.  Defaults to on unless ``NO_COLOR``
            is set or JSON output is active.
        json_serializer: Replacement for :func:`json.dumps`, e.g. ``orjson``.
        fmt: Format string for plain-text output.
        datefmt: Date format for both plain and JSON output.
        force: Replace a previously installed OpenMeasure handler.
    """
    root = logging.getLogger()
    existing = _installed_handler(root)
    if existing is not None:
        if not force:
            return
        root.removeHandler(existing)
        existing.close()

    resolved_level = _resolve_level(level)
    json_output = _env_flag(ENV_LOG_JSON) if use_json is None else use_json
    if use_color is None:
        use_color = not json_output and not os.getenv(ENV_NO_COLOR)

    formatter: logging.Formatter
    if json_output:
        formatter = StructuredJSONFormatter(json_serializer, datefmt=datefmt)
    elif use_color:
        formatter = ColoredFormatter(fmt or DEFAULT_FORMAT, datefmt=datefmt)
    else:
        formatter = logging.Formatter(fmt or DEFAULT_FORMAT, datefmt=datefmt)

    handler = OpenMeasureHandler()
    handler.setLevel(resolved_level)
    handler.setFormatter(formatter)
    root.setLevel(resolved_level)
    root.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``name`` (default ``openmeasure``), configuring logging on first use."""
    if _installed_handler(logging.getLogger()) is None:
        setup_logger()
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)


__all__ = [
    "DEFAULT_LOGGER_NAME",
    "ColoredFormatter",
    "OpenMeasureHandler",
    "StructuredJSONFormatter",
    "get_logger",
    "setup_logger",
]
