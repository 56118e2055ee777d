"""Application-layer errors: failures a run of the tool cannot recover from."""

from __future__ import annotations

from kv_fetch.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class AuthError(ApplicationError):
    """The identity provider rejected the token request or could not be reached."""

    default_code = "auth_error"


__all__ = ["ApplicationError", "AuthError"]
