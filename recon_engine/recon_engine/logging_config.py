"""Logging setup.

Plain text by default.  With ``RECON_STRUCTURED_LOGGING=true`` the root
logger emits one JSON object per line::

    {
        "timestamp": "2025-05-15T12:34:56.789012+00:00",
        "level": "DEBUG",
        "logger": "recon_engine.diff.model_column",
        "message": "Suppressed type difference ...",
        "exc_info": "Traceback ..."  // present only on exceptions
    }
"""

from __future__ import annotations

import json
import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from recon_engine.config import Settings

TEXT_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        """Render *record* as a single JSON line."""
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Structured context passed via ``extra={"column": ...}``.
        column = getattr(record, "column", None)
        if column is not None:
            payload["column"] = column

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc_info"] = "".join(traceback.format_exception(*record.exc_info))

        return json.dumps(payload, default=str, ensure_ascii=False)


def configure_logging(settings: Settings) -> None:
    """Install a root handler according to *settings*."""
    level = logging.DEBUG if settings.debug else logging.INFO

    if settings.structured_logging:
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
        return

    logging.basicConfig(level=level, format=TEXT_FORMAT)
