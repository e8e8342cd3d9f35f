"""Loguru structured logging configuration.

Provides human-readable and JSON-formatted logging with configurable log
level.  Optionally writes to a rotating log file when a ``log_dir`` is
provided.

Every sink receives records that went through ``redact_extra``, so record
objects bound into the log context reach the sinks as masked mappings.
"""

import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from loguru import logger

from safelog.lib.redaction import REDACTED_TEXT, to_safe_map
from safelog.lib.redaction.engine import PRIMITIVE_TYPES

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"

# Context values that are passed to sinks as-is
_PASSTHROUGH_TYPES: tuple[type, ...] = (*PRIMITIVE_TYPES, bytes, set, frozenset)

# Nesting depth of bound dicts and lists that is walked for record objects
_MAX_CONTAINER_DEPTH = 4


def _safe_extra_value(value: Any, depth: int = 0) -> Any:
    if value is None or isinstance(value, _PASSTHROUGH_TYPES):
        return value
    if isinstance(value, Mapping | list | tuple):
        if depth >= _MAX_CONTAINER_DEPTH:
            return REDACTED_TEXT
        if isinstance(value, Mapping):
            return {key: _safe_extra_value(item, depth + 1) for key, item in value.items()}
        items = [_safe_extra_value(item, depth + 1) for item in value]
        return items if isinstance(value, list) else tuple(items)
    return to_safe_map(value)


def redact_extra(record: Any) -> None:
    """Loguru patcher replacing bound record objects with their safe mapping.

    Record objects nested inside bound dicts, lists and tuples are replaced
    too.  Containers nested deeper than ``_MAX_CONTAINER_DEPTH`` are
    replaced with the redaction marker.

    Args:
        record: The Loguru record dict, modified in place.
    """
    extra = record["extra"]
    for key, value in extra.items():
        extra[key] = _safe_extra_value(value)


def setup_logging(log_level: str = "INFO", log_dir: str | None = None, *, serialize: bool = False) -> None:
    """Configure Loguru for redacted structured logging.

    Args:
        log_level: Minimum log level to emit.
        log_dir: Optional directory for log files.  When set, a rotating
            file sink is added (rotated every 24 hours, retained 7 days).
        serialize: Emit every stderr record as JSON instead of only those
            bound with ``json_output=True``.
    """
    logger.remove()
    logger.configure(patcher=redact_extra)
    if serialize:
        logger.add(sys.stderr, level=log_level.upper(), serialize=True)
    else:
        logger.add(
            sys.stderr,
            level=log_level.upper(),
            format=_LOG_FORMAT,
            serialize=False,
        )
        logger.add(
            sys.stderr,
            level=log_level.upper(),
            serialize=True,
            filter=lambda record: record["extra"].get("json_output", False),
        )

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / "safelog.log",
            level=log_level.upper(),
            format=_LOG_FORMAT,
            rotation="24h",
            retention="7 days",
        )
