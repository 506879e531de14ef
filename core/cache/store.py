"""Key-value stores backing the cache gate.

Image bytes and metadata dictionaries are stored under keys built by
``core.cache.keys``. The file store keeps one directory per provider and
identifier so that every size variant and the metadata record of an image
sit side by side on disk.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, Protocol
from urllib.parse import quote

from core.cache.keys import DATA_KIND, INFO_KIND, CacheKey


class CacheStore(Protocol):
    """Store consulted before any network call."""

    def get(self, key: CacheKey) -> Any | None:
        """Return the stored value, or None when absent."""

    def put(self, key: CacheKey, value: Any) -> None:
        """Store a value; the last write for a key wins."""


class MemoryCacheStore(CacheStore):
    """Process-local dict store."""

    def __init__(self) -> None:
        self._items: Dict[CacheKey, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: CacheKey) -> Any | None:
        with self._lock:
            return self._items.get(key)

    def put(self, key: CacheKey, value: Any) -> None:
        with self._lock:
            self._items[key] = value


def safe_name(value: str) -> str:
    """Encode an identifier as a single path component.

    Percent-encoding is reversible, so distinct identifiers never share a
    directory. Dots are escaped too, which rules out "." and "..".
    """
    if not value:
        return "%"
    return quote(value, safe="").replace(".", "%2E")


class FileCacheStore(CacheStore):
    """Directory-backed store: ``<root>/<provider>/<identifier>/<size>.img`` and ``info.json``."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def path_for(self, key: CacheKey) -> Path:
        provider, identifier, kind, size = key
        base = self.root / safe_name(provider) / safe_name(identifier)
        if kind == INFO_KIND:
            return base / "info.json"
        if kind == DATA_KIND and size:
            return base / f"{safe_name(size)}.img"
        raise ValueError(f"Unsupported cache key: {key!r}")

    def get(self, key: CacheKey) -> Any | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        if key[2] == INFO_KIND:
            try:
                return json.loads(path.read_text(encoding="utf-8"))
            except json.JSONDecodeError:
                return None
        return path.read_bytes()

    def put(self, key: CacheKey, value: Any) -> None:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        if key[2] == INFO_KIND:
            payload = json.dumps(value, ensure_ascii=False, sort_keys=True).encode("utf-8")
        else:
            payload = bytes(value)
        fd, tmp_name = tempfile.mkstemp(prefix=path.name + ".", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
