"""Shared fixtures.

Every test starts with logging configured at ERROR so stray log lines stay
quiet; handlers installed during the test are removed afterwards so they do
not keep writing to a previous test's captured stream.
"""

from __future__ import annotations

import logging

import pytest
import structlog

from kv_fetch.observability.logging import JsonLoggerFactory


@pytest.fixture(autouse=True)
def _quiet_logging():
    JsonLoggerFactory.configure(logging.ERROR)
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    structlog.reset_defaults()
