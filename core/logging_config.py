"""Loguru sinks for the gateway: coloured text for development, JSON lines for production."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any

from loguru import logger

_TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def _json_format(record: dict[str, Any]) -> str:
    # Format kwargs (bucket, name, backend, ...) arrive in record["extra"]
    payload: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "logger": record["name"],
        "message": record["message"],
        **record["extra"],
    }
    exception = record["exception"]
    if exception is not None and exception.type is not None:
        payload["exception"] = f"{exception.type.__name__}: {exception.value}"
    # loguru treats the returned string as a format template
    serialized = json.dumps(payload, ensure_ascii=False, default=str)
    return serialized.replace("{", "{{").replace("}", "}}") + "\n"


def setup_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: Path | None = None,
) -> None:
    """Replace loguru's default sink with the gateway's stderr (and optional file) sinks.

    Args:
        level: Minimum level for every sink.
        json_format: Emit one JSON object per line instead of coloured text.
        log_file: Also write to this file, rotated at 10 MB and kept for 7 days.
    """
    logger.remove()
    formatter = _json_format if json_format else _TEXT_FORMAT

    logger.add(sys.stderr, format=formatter, level=level, colorize=not json_format)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=formatter,
            level=level,
            rotation="10 MB",
            retention="7 days",
            compression="zip",
        )


def setup_logging_from_env() -> None:
    """Configure sinks from ``LOG_LEVEL``, ``JSON_LOGGING`` and ``LOG_FILE``."""
    log_file = os.getenv("LOG_FILE")
    setup_logging(
        level=os.getenv("LOG_LEVEL", "INFO"),
        json_format=os.getenv("JSON_LOGGING", "false").lower() in {"true", "1", "yes"},
        log_file=Path(log_file) if log_file else None,
    )


__all__ = ["setup_logging", "setup_logging_from_env"]
