"""
kv_fetch – fetch Key Vault secrets with a cached service-principal token.

Import path convention::

    from kv_fetch.config import load_settings
    from kv_fetch.security.tokens import CredentialCache, FileTokenCacheStore
    from kv_fetch.adapters.keyvault import KeyVaultSecretStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
