"""HTTP adapter – async HTTP client wrapper."""
from kv_fetch.adapters.http.client import HttpxHttpClient

__all__ = ["HttpxHttpClient"]
