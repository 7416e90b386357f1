# -*- coding: utf-8 -*-
"""
Key-value persistence service.

Local stand-in for browser storage: string keys mapped to string values,
enumerable in insertion order. Two backends share one interface:
- SQLiteKeyValueStore: file-backed, used by the application
- InMemoryKeyValueStore: process-local, used for throwaway sessions

This module is the ONLY place that should import sqlite3.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from utils.logger import get_logger

logger = get_logger(__name__)


class KeyValueStore(ABC):
    """
    Abstract base class for key-value stores.

    keys() enumerates in insertion order; overwriting an existing key
    keeps its original position.
    """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass

    @abstractmethod
    def keys(self, prefix: str = "") -> List[str]:
        pass

    def count(self, prefix: str = "") -> int:
        """Number of keys starting with prefix."""
        return len(self.keys(prefix))

    def close(self) -> None:
        """Release resources held by the store."""


class InMemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed store (dicts keep insertion order)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self, prefix: str = "") -> List[str]:
        return [key for key in self._data if key.startswith(prefix)]


class SQLiteKeyValueStore(KeyValueStore):
    """SQLite key-value store."""

    def __init__(self, db_path: Optional[Path] = None):
        """Initialize SQLite store."""
        # Import sqlite3 only here
        import sqlite3 as _sqlite3
        self._sqlite3 = _sqlite3

        if db_path is None:
            from app.config import Config
            db_path = Config.DB_PATH

        self._db_path = Path(db_path)
        self._connection = None

        # Ensure directory exists
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def db_path(self) -> Path:
        """Get database file path."""
        return self._db_path

    def connect(self) -> bool:
        """Establish SQLite connection and make sure the table exists."""
        try:
            if self._connection is None:
                self._connection = self._sqlite3.connect(str(self._db_path))
                self._connection.execute("""
                    CREATE TABLE IF NOT EXISTS kv_store (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL
                    )
                """)
                self._connection.commit()
                logger.debug(f"SQLite store opened at: {self._db_path}")
            return True
        except self._sqlite3.Error as e:
            logger.error(f"SQLite connection error: {e}")
            self._connection = None
            return False

    def close(self) -> None:
        """Close SQLite connection."""
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.info("SQLite connection closed")

    def is_connected(self) -> bool:
        """Check if connected."""
        return self._connection is not None

    def _get_connection(self):
        """Get connection, connecting if needed."""
        if not self._connection and not self.connect():
            raise ConnectionError(f"Cannot open SQLite store at {self._db_path}")
        return self._connection

    @contextmanager
    def transaction(self) -> Iterator[Any]:
        """Transaction context manager."""
        conn = self._get_connection()
        try:
            yield conn
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"SQLite transaction error: {e}")
            raise

    def set(self, key: str, value: str) -> None:
        # Upsert keeps the rowid of an existing key, so insertion order survives overwrites
        with self.transaction() as conn:
            conn.execute(
                """
                INSERT INTO kv_store (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value)
            )

    def get(self, key: str) -> Optional[str]:
        conn = self._get_connection()
        row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def remove(self, key: str) -> None:
        with self.transaction() as conn:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))

    def keys(self, prefix: str = "") -> List[str]:
        conn = self._get_connection()
        rows = conn.execute("SELECT key FROM kv_store ORDER BY rowid").fetchall()
        return [row[0] for row in rows if row[0].startswith(prefix)]
