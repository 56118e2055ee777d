"""Testing fakes – clock pinned for token expiry tests."""
from __future__ import annotations

from datetime import UTC, datetime

from kv_fetch.kernel.time import FrozenClock

_PINNED_AT = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def FakeClock() -> FrozenClock:
    """A fresh :class:`FrozenClock` at 2026-01-01 12:00 UTC; advance it to age cached tokens."""
    return FrozenClock(_PINNED_AT)


__all__ = ["FakeClock"]
