"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   ├── ConfigError      (kv_fetch.config.validation)
    │   └── AuthError
    └── InfrastructureError  (infrastructure.py)
        ├── TimeoutError
        ├── SerializationError
        └── ExternalServiceError
            └── FetchError
"""

from kv_fetch.kernel.errors.application import ApplicationError, AuthError
from kv_fetch.kernel.errors.base import BaseError
from kv_fetch.kernel.errors.infrastructure import (
    ExternalServiceError,
    FetchError,
    InfrastructureError,
    SerializationError,
    TimeoutError,
)

__all__ = [
    "ApplicationError",
    "AuthError",
    "BaseError",
    "ExternalServiceError",
    "FetchError",
    "InfrastructureError",
    "SerializationError",
    "TimeoutError",
]
