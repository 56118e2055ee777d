"""Config validation errors."""
from kv_fetch.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingViolation,
)

__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError", "SettingViolation"]
