"""Persistent key-value stores for identifier translations."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Protocol

import structlog

log = structlog.get_logger("trainhop_station.cache")


class IdentifierCache(Protocol):
    """Narrow read/write capability used by the identifier resolver."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryCache:
    """Process-local cache; also the stand-in used by tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.entries: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.entries.get(key)

    def set(self, key: str, value: str) -> None:
        self.entries[key] = value


class JsonFileCache:
    """Cache persisted as a flat JSON object on disk.

    Entries never expire: a commit's counterpart in the other namespace
    cannot change once published. Each write re-reads the file, merges
    the new entry and replaces the file via a temporary file and
    ``os.replace``, so concurrent writers only race on the same key.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._entries: dict[str, str] | None = None

    def get(self, key: str) -> str | None:
        if self._entries is None:
            self._entries = self._read()
        return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        entries = self._read()
        entries.update(self._entries or {})
        entries[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".sha-cache-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(entries, fh, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        self._entries = entries

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            log.warning("cache.unreadable", path=str(self.path), error=str(exc))
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}
