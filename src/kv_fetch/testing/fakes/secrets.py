"""Testing fakes – FakeSecretStore."""
from __future__ import annotations

from kv_fetch.config.secrets import SecretRef, SecretStore
from kv_fetch.kernel.errors import FetchError


class FakeSecretStore(SecretStore):
    """In-memory :class:`SecretStore` keyed by :class:`SecretRef`.

    Unknown refs raise :class:`FetchError`, as a 404 from the vault would.

    Usage::

        store = FakeSecretStore().seed(SecretRef("Password"), "s3cr3t")
        value = await store.get(SecretRef("Password"))
    """

    def __init__(self) -> None:
        self._store: dict[SecretRef, str] = {}
        self.requested: list[SecretRef] = []

    async def get(self, ref: SecretRef) -> str:
        self.requested.append(ref)
        if ref not in self._store:
            raise FetchError(ref.name, ref.version, f"Secret not found: {ref}", status_code=404)
        return self._store[ref]

    def seed(self, ref: SecretRef, value: str) -> "FakeSecretStore":
        self._store[ref] = value
        return self


__all__ = ["FakeSecretStore"]
