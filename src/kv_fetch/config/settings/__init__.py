"""Config settings – 12-factor env-based configuration."""
from kv_fetch.config.settings.base import Settings, env_field
from kv_fetch.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from kv_fetch.config.settings.vault import KeyVaultSettings, load_settings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "KeyVaultSettings",
    "Settings",
    "SettingsLoader",
    "env_field",
    "load_settings",
]
