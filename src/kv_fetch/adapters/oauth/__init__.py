"""OAuth adapter – client-credentials token provider."""
from kv_fetch.adapters.oauth.provider import ClientCredentialsTokenProvider

__all__ = ["ClientCredentialsTokenProvider"]
