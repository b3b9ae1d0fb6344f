"""Logging configuration.

Modules log through ``logging.getLogger(__name__)`` and pass context via
``extra={...}``. configure_logging() installs a root handler that either
prints the classic text format or one JSON object per record carrying
those extra fields.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Optional

from .config import ObservabilityConfig, get_config

_RESERVED_LOG_RECORD_KEYS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render records as JSON, including fields passed through ``extra``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_LOG_RECORD_KEYS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Install a stream handler on the root logger.

    Calling it again replaces the handler installed by the previous call.
    """
    config = config or get_config().observability

    handler = logging.StreamHandler(sys.stderr)
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))
    handler.set_name("hotel_locator")

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == "hotel_locator":
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(config.level.upper())
