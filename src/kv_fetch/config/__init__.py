"""Config – 12-factor settings, loaders, and secret references."""

from kv_fetch.config.secrets import SecretRef, SecretStore
from kv_fetch.config.settings import EnvSettingsLoader, KeyVaultSettings, Settings, SettingsLoader, load_settings
from kv_fetch.config.validation import ConfigError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "KeyVaultSettings",
    "MissingRequiredSettingError",
    "SecretRef",
    "SecretStore",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
