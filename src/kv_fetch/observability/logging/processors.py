"""Observability – get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger named *name* (usually the module's ``__name__``)."""
    return structlog.get_logger(name)


__all__ = ["get_logger"]
