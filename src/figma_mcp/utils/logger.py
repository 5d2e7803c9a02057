# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

"""Logging setup for the Figma MCP server.

Everything goes to ``stderr``: the STDIO transport owns ``stdout`` for
JSON-RPC frames, so a stray print or a handler bound to ``stdout`` would
corrupt the protocol stream.

Three output styles are available: colored text for terminals, plain text
(``NO_COLOR`` or non-interactive use) and one-JSON-object-per-line for log
shippers. Records carrying a ``duration_ms`` attribute get a ``[12.35 ms]``
suffix in the text styles.
"""

from __future__ import annotations

from collections.abc import Callable
import json
import logging
import os
import sys
from typing import Any, ClassVar, Final


RESET: Final[str] = "\033[0m"

DEBUG_COLOR: Final[str] = "\033[36m"
INFO_COLOR: Final[str] = "\033[32m"
WARNING_COLOR: Final[str] = "\033[33m"
ERROR_COLOR: Final[str] = "\033[1;31m"
CRITICAL_COLOR: Final[str] = "\033[1;35m"
LOGGER_COLOR: Final[str] = "\033[94m"
DURATION_COLOR: Final[str] = "\033[90m"

DEFAULT_LOGGER_NAME: Final[str] = "figma_mcp"
ENV_LOG_LEVEL: Final[str] = "FIGMA_MCP_LOG_LEVEL"
ENV_LOG_JSON: Final[str] = "FIGMA_MCP_LOG_JSON"
ENV_NO_COLOR: Final[str] = "NO_COLOR"
DEFAULT_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT: Final[str] = "%Y-%m-%d %H:%M:%S"

JsonSerializer = Callable[[dict[str, Any]], str]

# Attributes every LogRecord has; anything else was passed through ``extra``.
_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "context", "duration_ms", "taskName"}


def _duration_suffix(record: logging.LogRecord) -> str:
    duration = getattr(record, "duration_ms", None)
    if duration is None:
        return ""
    return f" [{float(duration):.2f} ms]"


class PlainFormatter(logging.Formatter):
    """Text formatter without escape codes."""

    def format(self, record: logging.LogRecord) -> str:
        return super().format(record) + _duration_suffix(record)


class ColoredFormatter(logging.Formatter):
    """Text formatter that colors the level name, logger name and duration."""

    LEVEL_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": DEBUG_COLOR,
        "INFO": INFO_COLOR,
        "WARNING": WARNING_COLOR,
        "ERROR": ERROR_COLOR,
        "CRITICAL": CRITICAL_COLOR,
    }

    def format(self, record: logging.LogRecord) -> str:
        levelname, name = record.levelname, record.name
        record.levelname = f"{self.LEVEL_COLORS.get(levelname, '')}{levelname}{RESET}"
        record.name = f"{LOGGER_COLOR}{name}{RESET}"
        try:
            rendered = super().format(record)
        finally:
            record.levelname, record.name = levelname, name

        suffix = _duration_suffix(record)
        if suffix:
            rendered = f"{rendered}{DURATION_COLOR}{suffix}{RESET}"
        return rendered


class StructuredJSONFormatter(logging.Formatter):
    """Render each record as a single JSON document."""

    def __init__(self, serializer: JsonSerializer | None = None, *, datefmt: str | None = None) -> None:
        super().__init__(datefmt=datefmt)
        self._serializer = serializer or _default_json_serializer

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        duration = getattr(record, "duration_ms", None)
        if duration is not None:
            payload["duration_ms"] = round(float(duration), 3)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        context: dict[str, Any] = {}
        explicit = getattr(record, "context", None)
        if isinstance(explicit, dict):
            context.update(explicit)
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                context.setdefault(key, value)
        if context:
            payload["context"] = context

        return self._serializer(payload)


class FigmaMCPHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """The stderr handler installed by :func:`setup_logger`."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)


def _default_json_serializer(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, default=str)


def _installed_handlers(root: logging.Logger) -> list[FigmaMCPHandler]:
    return [handler for handler in root.handlers if isinstance(handler, FigmaMCPHandler)]


def _env_flag(key: str) -> bool:
    value = os.getenv(key)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def resolve_level(level: int | str | None) -> int:
    """Map ``level`` (or ``FIGMA_MCP_LOG_LEVEL`` when ``None``) to a logging constant."""
    if level is None:
        level = os.getenv(ENV_LOG_LEVEL) or logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


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
    """Configure the root logger.

    Args:
        level: Log level. Falls back to ``FIGMA_MCP_LOG_LEVEL``, then INFO.
        use_json: Emit JSON lines. Falls back to ``FIGMA_MCP_LOG_JSON``.
        use_color: Colorize text output. Defaults to on unless ``NO_COLOR``
            is set or JSON output is selected.
        json_serializer: Replacement for :func:`json.dumps` in JSON mode.
        fmt: Format string for text output.
        datefmt: Date format for both styles.
        force: Replace a handler installed by an earlier call.
    """
    root = logging.getLogger()
    existing = _installed_handlers(root)
    if existing and not force:
        return
    for handler in existing:
        root.removeHandler(handler)
        handler.close()

    resolved_level = resolve_level(level)
    root.setLevel(resolved_level)

    json_mode = use_json if use_json is not None else _env_flag(ENV_LOG_JSON)
    if use_color is None:
        use_color = not json_mode and not os.getenv(ENV_NO_COLOR)

    formatter: logging.Formatter
    if json_mode:
        formatter = StructuredJSONFormatter(json_serializer, datefmt=datefmt)
    elif use_color:
        formatter = ColoredFormatter(fmt or DEFAULT_FORMAT, datefmt=datefmt)
    else:
        formatter = PlainFormatter(fmt or DEFAULT_FORMAT, datefmt=datefmt)

    handler = FigmaMCPHandler()
    handler.setLevel(resolved_level)
    handler.setFormatter(formatter)
    root.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger, installing the default handler on first use."""
    if not _installed_handlers(logging.getLogger()):
        setup_logger()
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)


__all__ = [
    "DEFAULT_LOGGER_NAME",
    "ColoredFormatter",
    "FigmaMCPHandler",
    "PlainFormatter",
    "StructuredJSONFormatter",
    "get_logger",
    "resolve_level",
    "setup_logger",
]
