"""Persistent key-value stores for theme preferences.

The resolver never touches ambient state: it is handed a store that
speaks ``get``/``set`` with string values.  ``get`` returning ``None``
means the key is absent, which is not the same as a stored ``"false"``.

Two implementations ship:

- ``MemoryStore`` — dict-backed, lives as long as the process.
- ``JsonFileStore`` — a JSON object on disk, survives restarts.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger("nightowl.theme")


@runtime_checkable
class KeyValueStore(Protocol):
    """Synchronous string-valued store, one per origin/profile."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """In-memory ``KeyValueStore``.

    Usage::

        store = MemoryStore({"dark": "true"})
        store.get("dark")   # "true"
        store.get("other")  # None
    """

    __slots__ = ("_data",)

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            msg = f"Store values must be strings, got {type(value).__name__}"
            raise TypeError(msg)
        self._data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MemoryStore({self._data!r})"


class JsonFileStore:
    """``KeyValueStore`` backed by a JSON object file.

    Every call reads or rewrites the whole file; a theme store holds a
    handful of keys so there is nothing to cache.  Unreadable content
    (bad JSON, bad bytes, a path that cannot be read) is treated as an
    empty store; the next write replaces it or raises the ``OSError``.
    """

    __slots__ = ("path",)

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            msg = f"Store values must be strings, got {type(value).__name__}"
            raise TypeError(msg)
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False, sort_keys=True),
            encoding="utf-8",
        )
        logger.debug("Wrote %s=%r to %s", key, value, self.path)

    def _load(self) -> dict[str, object]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError:
            logger.warning("Ignoring unreadable theme store %s", self.path)
            return {}
        except OSError as exc:
            logger.warning("Cannot read theme store %s: %s", self.path, exc)
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable theme store %s", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring theme store %s: expected a JSON object", self.path)
            return {}
        return data

    def __repr__(self) -> str:
        return f"JsonFileStore({str(self.path)!r})"
