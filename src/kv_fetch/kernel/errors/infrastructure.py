"""Infrastructure errors: I/O failures, external integrations."""

from __future__ import annotations

from typing import Any

from kv_fetch.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a configuration problem."""

    default_code = "infrastructure_error"


class TimeoutError(InfrastructureError):  # noqa: A001
    """An I/O operation exceeded its deadline."""

    default_code = "infrastructure_timeout"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class FetchError(ExternalServiceError):
    """A single secret could not be retrieved from the secret store."""

    default_code = "secret_fetch_error"

    def __init__(
        self,
        secret_name: str,
        version: str = "",
        message: str | None = None,
        *,
        service: str = "keyvault",
        **kwargs: Any,
    ) -> None:
        label = f"{secret_name}/{version}" if version else secret_name
        super().__init__(service, message or f"Could not fetch secret '{label}'", **kwargs)
        self.secret_name = secret_name
        self.version = version


__all__ = [
    "ExternalServiceError",
    "FetchError",
    "InfrastructureError",
    "SerializationError",
    "TimeoutError",
]
