"""Security tokens – FileTokenCacheStore."""
from __future__ import annotations

import os
import pathlib
import tempfile

from kv_fetch.security.tokens.ports import TokenCacheStore

CACHE_FILE_MODE = 0o600


class FileTokenCacheStore(TokenCacheStore):
    """Stores ``<cache_dir>/<client_id>.token.json``, readable by the owner only.

    Writes go to a temporary sibling first and are moved into place, so a
    reader never sees a half-written record.
    """

    def __init__(self, cache_dir: str | os.PathLike[str] = "cache") -> None:
        self._dir = pathlib.Path(cache_dir)

    def path_for(self, client_id: str) -> pathlib.Path:
        return self._dir / f"{client_id}.token.json"

    def read(self, client_id: str) -> str | None:
        try:
            return self.path_for(client_id).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write(self, client_id: str, payload: str) -> None:
        target = self.path_for(client_id)
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.chmod(tmp_name, CACHE_FILE_MODE)
            os.replace(tmp_name, target)
        except BaseException:
            pathlib.Path(tmp_name).unlink(missing_ok=True)
            raise


__all__ = ["CACHE_FILE_MODE", "FileTokenCacheStore"]
