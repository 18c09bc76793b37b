"""Persisted countdown target, stored as epoch milliseconds under one key."""

import sqlite3
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ..config.defaults import StorageParams
from ..errors import PersistenceError
from ..logging.config import get_logger

logger = get_logger(__name__)


class DateStore(ABC):
    """Key-value store holding at most one persisted target date."""

    def __init__(self, key: str = "date"):
        self.key = key

    @abstractmethod
    def get(self) -> Optional[int]:
        """Return the persisted timestamp in milliseconds, if any."""
        pass

    @abstractmethod
    def set(self, timestamp_ms: int) -> None:
        """Persist a timestamp in milliseconds, replacing any previous one."""
        pass

    @abstractmethod
    def remove(self) -> None:
        """Forget the persisted timestamp. Removing nothing is not an error."""
        pass


class MemoryDateStore(DateStore):
    """Process-local store, lost on exit."""

    def __init__(self, key: str = "date", initial: Optional[int] = None):
        super().__init__(key)
        self._values: dict[str, int] = {}
        if initial is not None:
            self._values[key] = int(initial)

    def get(self) -> Optional[int]:
        return self._values.get(self.key)

    def set(self, timestamp_ms: int) -> None:
        self._values[self.key] = int(timestamp_ms)

    def remove(self) -> None:
        self._values.pop(self.key, None)


class SqliteDateStore(DateStore):
    """SQLite-backed store using a single key-value table."""

    def __init__(self, db_path: str = "countdown.db", key: str = "date"):
        super().__init__(key)
        self.db_path = Path(db_path)
        self._lock = threading.Lock()

        self._init_database()

    def _init_database(self) -> None:
        """Initialize database schema."""
        with self._get_connection("init") as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.commit()

    @contextmanager
    def _get_connection(self, operation: str) -> Iterator[sqlite3.Connection]:
        """Get database connection, mapping sqlite errors to PersistenceError."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=30.0)
            yield conn
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            logger.error("Date store database error", operation=operation,
                         db_path=str(self.db_path), error=str(e))
            raise PersistenceError(
                f"Date store {operation} failed: {e}",
                operation=operation,
                target=str(self.db_path)
            ) from e
        finally:
            if conn:
                conn.close()

    def get(self) -> Optional[int]:
        with self._lock, self._get_connection("get") as conn:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (self.key,)
            ).fetchone()

        if row is None:
            return None

        try:
            return int(row[0])
        except ValueError:
            logger.warning("Ignoring unreadable persisted date",
                           key=self.key, value=row[0])
            return None

    def set(self, timestamp_ms: int) -> None:
        with self._lock, self._get_connection("set") as conn:
            conn.execute(
                "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
                (self.key, str(int(timestamp_ms)))
            )
            conn.commit()

    def remove(self) -> None:
        with self._lock, self._get_connection("remove") as conn:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (self.key,))
            conn.commit()


def create_date_store(params: StorageParams) -> DateStore:
    """Build the date store selected by the storage configuration."""
    if params.backend == "sqlite":
        return SqliteDateStore(params.db_path, key=params.key)
    return MemoryDateStore(key=params.key)
