"""
Key-value store for collection blobs backed by SQLite.

Each named collection is one row holding its JSON text. Reads never raise:
a missing, unreadable or corrupt value reads as empty. Writes never raise
either; a failed write is logged and reported through ``StoreResult``.
"""

import json
import sqlite3
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from ...config import StorageConfig, get_settings
from ...core.enums import Collection
from ...utils.logging import get_logger

logger = get_logger("shifa.store")

Name = Union[Collection, str]


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a write."""

    ok: bool
    error: Optional[str] = None

    @classmethod
    def success(cls) -> "StoreResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: str) -> "StoreResult":
        return cls(ok=False, error=error)

    def __bool__(self) -> bool:
        return self.ok


def _name(name: Name) -> str:
    return name.value if isinstance(name, Collection) else name


class KeyValueStore:
    """Manages named JSON records in a SQLite database."""

    def __init__(self, config: Optional[StorageConfig] = None):
        self.config = config or get_settings().storage_config()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.config.path, timeout=self.config.connection_timeout)
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
            """
        )
        return conn

    def _read(self, key: str) -> Optional[str]:
        conn = self._connect()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        return row[0] if row else None

    def _write(self, key: str, value: Optional[str]) -> None:
        conn = self._connect()
        try:
            if value is None:
                conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            else:
                conn.execute(
                    "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                    (key, value),
                )
            conn.commit()
        finally:
            conn.close()

    def _load(self, name: Name) -> Any:
        key = self.config.key_for(_name(name))
        try:
            raw = self._read(key)
        except sqlite3.Error as e:
            logger.warning(f"read failed for {key}: {e}")
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            logger.warning(f"corrupt value for {key}, ignoring: {e}")
            return None

    def _save(self, name: Name, data: Any) -> StoreResult:
        key = self.config.key_for(_name(name))
        try:
            payload = None if data is None else json.dumps(data, ensure_ascii=False)
            self._write(key, payload)
        except (TypeError, ValueError, sqlite3.Error) as e:
            logger.error(f"Storage error for {key}: {e}")
            return StoreResult.failure(str(e))
        return StoreResult.success()

    def get(self, name: Name) -> List[Dict[str, Any]]:
        """Get the records of a collection, or an empty list."""
        data = self._load(name)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning(f"value for {_name(name)} is not a list, ignoring")
            return []
        return data

    def set(self, name: Name, records: List[Dict[str, Any]]) -> StoreResult:
        """Replace the records of a collection."""
        return self._save(name, list(records))

    def get_record(self, name: Name) -> Optional[Dict[str, Any]]:
        """Get a single stored record, or None."""
        data = self._load(name)
        if data is not None and not isinstance(data, dict):
            logger.warning(f"value for {_name(name)} is not an object, ignoring")
            return None
        return data

    def set_record(self, name: Name, record: Optional[Dict[str, Any]]) -> StoreResult:
        """Store a single record; None removes it."""
        return self._save(name, record)

    def clear(self) -> StoreResult:
        """Remove every key in this store's namespace."""
        prefix = self.config.key_prefix()
        try:
            conn = self._connect()
            try:
                if prefix:
                    escaped = prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
                    conn.execute("DELETE FROM kv WHERE key LIKE ? ESCAPE '\\'", (escaped + "%",))
                else:
                    conn.execute("DELETE FROM kv")
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error(f"Storage error clearing {prefix or 'all keys'}: {e}")
            return StoreResult.failure(str(e))
        return StoreResult.success()
