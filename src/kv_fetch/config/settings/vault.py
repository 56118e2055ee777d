"""Config settings – KeyVaultSettings and load_settings()."""
from __future__ import annotations

import dataclasses
import os
from typing import Mapping

from kv_fetch.config.secrets import SecretRef
from kv_fetch.config.settings.base import Settings, env_field
from kv_fetch.config.settings.loaders import DotenvSettingsLoader

DEFAULT_AUTHORITY_HOST = "https://login.microsoftonline.com"
DEFAULT_VAULT_RESOURCE = "https://vault.azure.net"
DEFAULT_VAULT_API_VERSION = "2016-10-01"
DEFAULT_TOKEN_CACHE_DIR = "cache"


@dataclasses.dataclass(frozen=True, kw_only=True)
class KeyVaultSettings(Settings):
    """Everything one run needs, read once at startup.

    Field order matches the order missing variables are reported in.
    """

    vault_base_url: str = env_field("VAULT_BASE_URL")
    user_secret_name: str = env_field("USER_SECRET_NAME")
    user_secret_version: str = env_field("USER_SECRET_VERSION", default="")
    password_secret_name: str = env_field("PASSWORD_SECRET_NAME")
    password_secret_version: str = env_field("PASSWORD_SECRET_VERSION", default="")
    tenant_id: str = env_field("AZ_TENANT_ID")
    client_id: str = env_field("AZ_CLIENT_ID")
    client_secret: str = env_field("AZ_CLIENT_SECRET", repr=False)
    authority_host: str = env_field("AZ_AUTHORITY_HOST", default=DEFAULT_AUTHORITY_HOST)
    vault_resource: str = env_field("VAULT_RESOURCE", default=DEFAULT_VAULT_RESOURCE)
    vault_api_version: str = env_field("VAULT_API_VERSION", default=DEFAULT_VAULT_API_VERSION)
    token_cache_dir: str = env_field("TOKEN_CACHE_DIR", default=DEFAULT_TOKEN_CACHE_DIR)
    log_level: str = env_field("LOG_LEVEL", default="")

    @property
    def token_endpoint(self) -> str:
        return f"{self.authority_host.rstrip('/')}/{self.tenant_id}/oauth2/token"

    @property
    def secret_refs(self) -> tuple[SecretRef, ...]:
        """User secret at its version, then the password current and pinned."""
        refs = (
            SecretRef(self.user_secret_name, self.user_secret_version),
            SecretRef(self.password_secret_name),
            SecretRef(self.password_secret_name, self.password_secret_version),
        )
        return tuple(dict.fromkeys(refs))


def load_settings(
    env_file: str | os.PathLike[str] = ".env",
    environ: Mapping[str, str] | None = None,
) -> KeyVaultSettings:
    """Load :class:`KeyVaultSettings` from *environ* (default ``os.environ``) and *env_file*.

    Raises
    ------
    ConfigError
        Every missing required variable, or an unusable env file.
    """
    return DotenvSettingsLoader(env_file, environ).load(KeyVaultSettings)


__all__ = [
    "DEFAULT_AUTHORITY_HOST",
    "DEFAULT_TOKEN_CACHE_DIR",
    "DEFAULT_VAULT_API_VERSION",
    "DEFAULT_VAULT_RESOURCE",
    "KeyVaultSettings",
    "load_settings",
]
