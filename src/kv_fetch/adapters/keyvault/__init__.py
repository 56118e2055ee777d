"""Key Vault adapter – secret store over the REST API."""
from kv_fetch.adapters.keyvault.store import KeyVaultSecretStore

__all__ = ["KeyVaultSecretStore"]
