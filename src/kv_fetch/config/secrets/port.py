"""Config secrets – SecretRef and SecretStore port."""
from __future__ import annotations

import abc
import dataclasses


@dataclasses.dataclass(frozen=True)
class SecretRef:
    """Reference to a secret stored externally.

    An empty *version* means the store's current version.
    """
    name: str
    version: str = ""

    def __str__(self) -> str:
        return f"{self.name}/{self.version}" if self.version else self.name


class SecretStore(abc.ABC):
    """Port: retrieve secret values from a backend."""

    @abc.abstractmethod
    async def get(self, ref: SecretRef) -> str: ...


__all__ = ["SecretRef", "SecretStore"]
