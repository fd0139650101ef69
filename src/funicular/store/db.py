from __future__ import annotations

import sqlite3
import threading

from funicular.store.errors import StorageError


class Database:
    """SQLite database wrapper with WAL mode, shared across request threads.

    Statements are serialized on an internal lock and every ``sqlite3.Error``
    is re-raised as StorageError.  ``timeout`` is how long a statement waits
    for a locked database before failing.
    """

    def __init__(self, path: str = ":memory:", timeout: float = 3.0) -> None:
        self._path = path
        self._timeout = timeout
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.RLock()

    @property
    def path(self) -> str:
        return self._path

    def connect(self) -> None:
        """Open connection and enable WAL mode."""
        try:
            self._conn = sqlite3.connect(
                self._path, timeout=self._timeout, check_same_thread=False
            )
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA journal_mode=WAL")
            self._conn.execute("PRAGMA foreign_keys=ON")
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot open database {self._path!r}: {exc}") from exc

    def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def _connection(self, sql: str) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError("Database not connected", statement=sql)
        return self._conn

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Execute a single SQL statement."""
        with self._lock:
            try:
                return self._connection(sql).execute(sql, params)
            except sqlite3.Error as exc:
                raise StorageError(str(exc), statement=sql) from exc

    def executescript(self, script: str) -> None:
        """Execute several SQL statements at once."""
        with self._lock:
            try:
                self._connection(script).executescript(script)
            except sqlite3.Error as exc:
                raise StorageError(str(exc), statement=script) from exc

    def fetch_one(self, sql: str, params: tuple = ()) -> sqlite3.Row | None:
        """Execute a query and return the first row, or None."""
        with self._lock:
            cursor = self.execute(sql, params)
            return cursor.fetchone()

    def fetch_all(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        """Execute a query and return all rows."""
        with self._lock:
            cursor = self.execute(sql, params)
            return cursor.fetchall()

    def commit(self) -> None:
        """Commit the current transaction."""
        with self._lock:
            try:
                self._connection("COMMIT").commit()
            except sqlite3.Error as exc:
                raise StorageError(str(exc), statement="COMMIT") from exc
