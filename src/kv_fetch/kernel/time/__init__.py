"""Kernel time – Clock port + implementations."""
from kv_fetch.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
