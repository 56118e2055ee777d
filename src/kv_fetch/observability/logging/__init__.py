"""Observability – structured logging helpers."""
from kv_fetch.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from kv_fetch.observability.logging.factory import JsonLoggerFactory, level_from_name
from kv_fetch.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
    "level_from_name",
]
