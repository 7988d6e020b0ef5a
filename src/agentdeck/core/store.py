"""
Client-side key-value persistence.

The layout store and theme engine persist through the :class:`Store`
protocol so they can run against an in-memory fake in tests and a
JSON file on disk in the CLI.

Values are strings (as in a browser's local storage); callers own the
serialization of anything structured.

Default location: {project_root}/.agentdeck/store.json
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Protocol, runtime_checkable

from .errors import ErrorContext, StoreWriteError

logger = logging.getLogger(__name__)

STORE_FILE = Path(".agentdeck") / "store.json"


@runtime_checkable
class Store(Protocol):
    """String key-value store with a single writer."""

    def load(self, key: str) -> str | None:
        """Return the value for ``key``, or None if absent."""
        ...

    def save(self, key: str, value: str) -> None:
        """Write ``value`` under ``key``, overwriting. Raises StoreWriteError."""
        ...

    def clear(self, key: str) -> None:
        """Remove ``key`` if present."""
        ...


class MemoryStore:
    """Dict-backed store, used for tests and ephemeral sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> str | None:
        return self._data.get(key)

    def save(self, key: str, value: str) -> None:
        self._data[key] = value

    def clear(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data


class JsonFileStore:
    """File-based store.

    Keeps every key in one JSON object on disk. Each ``save``/``clear``
    rewrites the file before returning.

    Args:
        path: Location of the JSON store file.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            logger.debug("Unreadable store file %s, treating as empty", self.path)
            return {}
        if not isinstance(data, dict):
            logger.debug("Store file %s is not an object, treating as empty", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: dict[str, str]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StoreWriteError(
                f"Failed to write store: {e}",
                context=ErrorContext(source=str(self.path)),
            ) from e

    def load(self, key: str) -> str | None:
        return self._read_all().get(key)

    def save(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        logger.debug("Saved %s to %s", key, self.path.name)

    def clear(self, key: str) -> None:
        data = self._read_all()
        if key not in data:
            return
        del data[key]
        self._write_all(data)
        logger.debug("Cleared %s from %s", key, self.path.name)

    def keys(self) -> list[str]:
        return sorted(self._read_all())


def get_store_path(project_root: Path) -> Path:
    """Get the default store file path for a project."""
    return project_root / STORE_FILE
