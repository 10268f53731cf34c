"""
Durable key/value slots for the contractor list.

The registry keeps its whole contractor list as a single JSON text
value stored under a fixed key (a "slot").  Three interchangeable
backends are provided:

``SQLiteSlotStorage``
    Stores slots in a ``slots`` table of an SQLite database.  The table
    is created by a tiny versioned migration list applied on first use.
``JsonFileSlotStorage``
    Stores each slot in ``<directory>/<key>.json``.
``MemorySlotStorage``
    Keeps the value in a dictionary; used by tests and ephemeral runs.

Every backend exposes ``load()`` returning the stored text (or ``None``
if the slot was never written) and ``save(payload)`` replacing it
wholesale.
"""

from __future__ import annotations

import logging
import os
import sqlite3
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional

from .config import Settings, resolve_path


class SlotStorage:
    """Base class for slot backends."""

    def __init__(self, key: str) -> None:
        self.key = key

    def load(self) -> Optional[str]:
        raise NotImplementedError

    def save(self, payload: str) -> None:
        raise NotImplementedError


class MemorySlotStorage(SlotStorage):
    """Slot storage kept in process memory."""

    def __init__(self, key: str = "contractors", initial: Optional[str] = None) -> None:
        super().__init__(key)
        self._slots: Dict[str, str] = {}
        if initial is not None:
            self._slots[key] = initial

    def load(self) -> Optional[str]:
        return self._slots.get(self.key)

    def save(self, payload: str) -> None:
        self._slots[self.key] = payload


class JsonFileSlotStorage(SlotStorage):
    """Slot storage writing one JSON file per key."""

    def __init__(self, key: str, directory: Path | str) -> None:
        super().__init__(key)
        self.directory = Path(directory)
        self.path = self.directory / f"{key}.json"

    def load(self) -> Optional[str]:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def save(self, payload: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        # Write next to the target and swap it in so a crash never leaves
        # a half-written slot behind.
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{self.key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise


# Applied in order; append new migrations with an incremented version.
MIGRATIONS: list[tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS slots (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL,
            updated_at TEXT DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
]


class SQLiteSlotStorage(SlotStorage):
    """Slot storage backed by an SQLite key/value table."""

    def __init__(self, key: str, db_path: Path | str) -> None:
        super().__init__(key)
        self.db_path = str(db_path)
        self._initialised = False

    def get_connection(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection with name-addressable rows."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def get_cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, committing on success and always closing the connection."""
        if not self._initialised:
            self.init_db()
        conn = self.get_connection()
        try:
            yield conn.cursor()
            conn.commit()
        finally:
            conn.close()

    def init_db(self) -> None:
        """Create the database file if needed and apply pending migrations."""
        logger = logging.getLogger(__name__)
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        conn = self.get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY, applied_at TEXT DEFAULT CURRENT_TIMESTAMP)"
            )
            row = cursor.execute("SELECT MAX(version) FROM migrations").fetchone()
            current_version = row[0] or 0
            for version, script in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(script)
                    cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                    logger.info("Applied storage migration %s to %s", version, self.db_path)
            conn.commit()
        finally:
            conn.close()
        self._initialised = True

    def load(self) -> Optional[str]:
        with self.get_cursor() as cursor:
            row = cursor.execute("SELECT value FROM slots WHERE key = ?", (self.key,)).fetchone()
        if row is None:
            return None
        return row["value"]

    def save(self, payload: str) -> None:
        with self.get_cursor() as cursor:
            cursor.execute(
                """
                INSERT INTO slots (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP
                """,
                (self.key, payload),
            )


def build_storage(settings: Settings) -> SlotStorage:
    """Construct the slot backend selected by ``settings.storage_backend``."""
    backend = settings.storage_backend.lower()
    if backend == "sqlite":
        return SQLiteSlotStorage(settings.storage_key, resolve_path(settings.database_url))
    if backend == "file":
        return JsonFileSlotStorage(settings.storage_key, resolve_path(settings.data_dir))
    if backend == "memory":
        return MemorySlotStorage(settings.storage_key)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend!r}")
