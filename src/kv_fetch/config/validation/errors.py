"""Config validation errors."""
from __future__ import annotations

import dataclasses
from typing import Any, Iterable

from kv_fetch.kernel.errors import ApplicationError

_RENDER_FOOTER = "| need to be defined in .env or environment variable."


@dataclasses.dataclass(frozen=True)
class SettingViolation:
    """One problem with one setting."""
    setting: str
    reason: str = "missing"

    def __str__(self) -> str:
        return f"{self.setting} {self.reason}"


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed.

    ``violations`` keeps every problem found, in discovery order, so that an
    operator can fix all of them in one pass.
    """
    default_code = "config_error"

    def __init__(
        self,
        message: str,
        *,
        violations: Iterable[SettingViolation] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.violations: tuple[SettingViolation, ...] = tuple(violations)

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["violations"] = [dataclasses.asdict(v) for v in self.violations]
        return base

    def render(self) -> str:
        """Human-readable text for the CLI: one line per violation."""
        if not self.violations:
            return self.message
        lines = [str(v) for v in self.violations]
        lines.append(_RENDER_FOOTER)
        return "\n".join(lines)


class MissingRequiredSettingError(ConfigError):
    """One or more required environment variables / settings are absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_names: Iterable[str]) -> None:
        names = list(setting_names)
        super().__init__(
            f"Required settings missing: {', '.join(names)}",
            violations=[SettingViolation(name) for name in names],
        )
        self.setting_names: tuple[str, ...] = tuple(names)


class InvalidSettingValueError(ConfigError):
    """A settings source is present but cannot be used as-is."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, reason: str, *, violations: Iterable[SettingViolation] = (), **kwargs: Any) -> None:
        super().__init__(
            f"Setting '{setting_name}' is invalid: {reason}",
            violations=violations or [SettingViolation(setting_name, reason)],
            **kwargs,
        )
        self.setting_name = setting_name
        self.reason = reason


__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingViolation",
]
