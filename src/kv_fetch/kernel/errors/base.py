"""Root error class for the kv_fetch error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of every error kv-fetch raises on purpose.

    ``message`` is what the command line prints; ``code`` and ``detail``
    go into the structured log record. A wrapped lower-level exception is
    chained as ``__cause__`` and shows up as ``cause`` in :meth:`to_dict`.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
