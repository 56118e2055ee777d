"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import io
import os
import pathlib
from typing import Any, Mapping, TypeVar

from dotenv import dotenv_values
from dotenv.parser import parse_stream

from kv_fetch.config.settings.base import Settings, env_name, is_required
from kv_fetch.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingViolation,
)
from kv_fetch.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

logger = get_logger(__name__)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables.

    Every missing required variable is collected before raising, so the
    resulting :class:`MissingRequiredSettingError` names all of them.
    Empty values count as missing.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def load(self, settings_class: type[T]) -> T:
        kwargs: dict[str, Any] = {}
        missing: list[str] = []

        for field in dataclasses.fields(settings_class):
            key = env_name(field)
            raw = self._environ.get(key)

            if not raw:
                if is_required(field):
                    missing.append(key)
                continue

            kwargs[field.name] = raw

        if missing:
            raise MissingRequiredSettingError(missing)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Merge a ``.env`` file under the environment, then defer to :class:`EnvSettingsLoader`.

    A missing file is skipped. A file that exists but cannot be read, or that
    contains lines the dotenv parser rejects, is a :class:`ConfigError`.
    Variables already set in *environ* win over values from the file.
    ``${VAR}`` references in the file are not expanded.
    """

    def __init__(self, env_file: str | os.PathLike[str] = ".env", environ: Mapping[str, str] | None = None) -> None:
        self._env_file = pathlib.Path(env_file)
        self._environ = os.environ if environ is None else environ

    def load(self, settings_class: type[T]) -> T:
        merged: dict[str, str] = {**self._read_env_file(), **self._environ}
        return EnvSettingsLoader(merged).load(settings_class)

    def _read_env_file(self) -> dict[str, str]:
        if not self._env_file.exists():
            logger.debug("settings.env_file_absent", path=str(self._env_file))
            return {}
        try:
            text = self._env_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(
                f"Could not read env file '{self._env_file}': {exc}",
                detail={"path": str(self._env_file)},
                cause=exc,
            ) from exc

        bad_lines = [binding.original.line for binding in parse_stream(io.StringIO(text)) if binding.error]
        if bad_lines:
            raise InvalidSettingValueError(
                str(self._env_file),
                "could not parse",
                violations=[
                    SettingViolation(f"{self._env_file}:{line}", "could not be parsed") for line in bad_lines
                ],
            )

        values = dotenv_values(stream=io.StringIO(text), interpolate=False)
        logger.debug("settings.env_file_loaded", path=str(self._env_file), keys=len(values))
        return {key: value for key, value in values.items() if value is not None}


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
