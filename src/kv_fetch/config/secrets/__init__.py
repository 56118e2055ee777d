"""Config secrets – secret reference and store ports."""
from kv_fetch.config.secrets.port import SecretRef, SecretStore

__all__ = ["SecretRef", "SecretStore"]
