"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any


def env_field(name: str, *, default: Any = dataclasses.MISSING, **kwargs: Any) -> Any:
    """Declare a settings field read from environment variable *name*."""
    return dataclasses.field(default=default, metadata={"env": name}, **kwargs)


def env_name(field: dataclasses.Field[Any]) -> str:
    return field.metadata.get("env", field.name.upper())


def is_required(field: dataclasses.Field[Any]) -> bool:
    return (
        field.default is dataclasses.MISSING
        and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
    )


@dataclasses.dataclass(frozen=True, kw_only=True)
class Settings:
    """Base class for 12-factor settings."""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings", "env_field", "env_name", "is_required"]
