# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session store adapters."""

from __future__ import annotations

from pathlib import Path

from portfolio_client.application.interfaces import SessionStore
from portfolio_client.shared.config import load_config
from portfolio_client.shared.logging import logger
from portfolio_client.utils.fs import read_json_dict, write_json_atomic


class InMemorySessionStore(SessionStore):
    """Keeps session records for the lifetime of the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def clear(self, key: str) -> None:
        self._items.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        return dict(self._items)


class JsonFileSessionStore(SessionStore):
    """Persists session records as one JSON object on disk.

    Every write rewrites the whole file atomically. There is no locking, so
    two processes writing at once resolve to whichever wrote last.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        if path is None:
            path = load_config().session_file
        self._path = Path(path)
        logger.debug(f"JsonFileSessionStore: initialized path={self._path}")

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        try:
            loaded = read_json_dict(self._path)
        except (OSError, ValueError):
            logger.warning(f"JsonFileSessionStore: unreadable session file path={self._path}, treating as empty")
            return {}
        if loaded is None:
            return {}
        return {key: value for key, value in loaded.items() if isinstance(value, str)}

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        write_json_atomic(self._path, items, mode=0o600)
        logger.debug(f"JsonFileSessionStore: stored key={key}")

    def clear(self, key: str) -> None:
        items = self._load()
        if key not in items:
            return
        del items[key]
        write_json_atomic(self._path, items, mode=0o600)
        logger.debug(f"JsonFileSessionStore: cleared key={key}")


__all__ = ["InMemorySessionStore", "JsonFileSessionStore"]
