"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from kv_fetch.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter

_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
}


def level_from_name(name: str | None) -> int:
    """Map a ``LOG_LEVEL`` value to a stdlib level; anything unrecognised is quiet (ERROR)."""
    return _LEVELS.get((name or "").strip().upper(), logging.ERROR)


class JsonLoggerFactory:
    """Configure structlog for one-JSON-object-per-line output on stderr."""

    @staticmethod
    def configure(level: int = logging.ERROR, sensitive_fields: frozenset[str] | None = None) -> None:
        shared_processors: list[Any] = [
            SensitiveFieldsFilter(sensitive_fields or DEFAULT_SENSITIVE_FIELDS),
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory", "level_from_name"]
