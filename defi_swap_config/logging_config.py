"""
Logging configuration for the swap test config loader.
Emits structured JSON records so test runners can filter on context.
"""

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Optional

class StructuredFormatter(logging.Formatter):
    """
    Formatter that outputs one JSON object per record.
    """

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if hasattr(record, 'context'):
            log_entry["context"] = record.context

        return json.dumps(log_entry)

def get_logger(name: str, log_level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger writing structured records to stderr.

    Args:
        name: Logger name (usually module name)
        log_level: Level name (DEBUG, INFO, ...). Unknown names fall back to WARNING.

    Returns:
        Configured logging.Logger
    """
    logger = logging.getLogger(name)
    level = getattr(logging, (log_level or "WARNING").upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logger.setLevel(level)

    if not any(isinstance(h.formatter, StructuredFormatter) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

    return logger
