# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Structured Logging — JSON format with tenant/request context.

Context is attached per call via ``extra=``, e.g.
``logger.info("uploaded", extra={"tenant_id": t, "doc_id": d})``.
"""

from __future__ import annotations

import json
import logging
import sys

CONTEXT_KEYS = (
    "trace_id", "tenant_id", "user_id", "doc_id", "event_id", "connection_id", "operation",
)

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class StructuredFormatter(logging.Formatter):
    """JSON log formatter with trace/tenant/document context."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }
        for key in CONTEXT_KEYS:
            val = getattr(record, key, None)
            if val:
                log_entry[key] = val

        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False)


class ContextTextFormatter(logging.Formatter):
    """Human-readable formatter for development; appends context as key=value."""

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT, datefmt="%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = " ".join(
            f"{key}={getattr(record, key)}"
            for key in CONTEXT_KEYS
            if getattr(record, key, None)
        )
        return f"{line} {context}" if context else line


def setup_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Configure root logging: JSON lines in production, text in development."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter() if json_format else ContextTextFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)
