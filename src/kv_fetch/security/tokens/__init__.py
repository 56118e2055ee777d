"""Security tokens – cached service-principal credentials."""
from kv_fetch.security.tokens.cache import CredentialCache
from kv_fetch.security.tokens.file_store import FileTokenCacheStore
from kv_fetch.security.tokens.model import BearerCredential, CachedToken, ClientCredentials
from kv_fetch.security.tokens.ports import TokenCacheStore, TokenProvider

__all__ = [
    "BearerCredential",
    "CachedToken",
    "ClientCredentials",
    "CredentialCache",
    "FileTokenCacheStore",
    "TokenCacheStore",
    "TokenProvider",
]
