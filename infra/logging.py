"""Structured logging utilities for the voice page stub."""

from __future__ import annotations

import json
import logging
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


class JsonFormatter(logging.Formatter):
    """Emit logs as JSON objects with a stable schema."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "event_type": getattr(record, "event_type", "log"),
            "state": getattr(record, "state", None),
            "session_id": getattr(record, "session_id", None),
            "message": record.getMessage(),
            "snippet_kind": getattr(record, "snippet_kind", None),
            "metadata": getattr(record, "metadata", {}),
        }
        return json.dumps(payload, ensure_ascii=False, default=str)


def get_logger(
    name: str = "voicestub",
    primary_path: str = "/var/log/voicestub.log",
    level: str | None = None,
) -> logging.Logger:
    """Configure and return a structured stub logger.

    ``level`` is applied only when given; otherwise an already configured
    logger keeps its level and a new one starts at INFO.
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)

    if logger.handlers:
        return logger

    if level is None:
        logger.setLevel(logging.INFO)

    formatter = JsonFormatter()
    try:
        handler = logging.FileHandler(primary_path)
    except (OSError, PermissionError):
        fallback = Path(tempfile.gettempdir()) / "voicestub.log"
        print(f"[voicestub] warning: cannot open {primary_path}; falling back to {fallback}")
        fallback.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(fallback)

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
