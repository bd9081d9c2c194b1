"""
SQLite persistence and a simple migration system.

``SQLiteStore`` is the table-level store used by the services.  It
offers a small query-builder style API (select, insert, update and
delete filtered by equality predicates, plus an inner join) and opens
one connection per call, committing on success and always closing it.
Services receive a store instance at construction time, so tests can
point them at a temporary database or a double.

Driver errors never leave this module untranslated: constraint
violations become ``ConflictError`` and any other ``sqlite3.Error``
becomes ``StorageError``.  Both keep the driver's message.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import re
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Sequence, Tuple

from .config import settings
from .errors import ConflictError, StorageError

logger = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: bands and their songs
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS bands (
            id TEXT PRIMARY KEY UNIQUE NOT NULL,
            name TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS songs (
            id TEXT PRIMARY KEY UNIQUE NOT NULL,
            name TEXT NOT NULL,
            band_id TEXT NOT NULL,
            FOREIGN KEY(band_id) REFERENCES bands(id)
        );
        """,
    ),
    # Migration 2: index songs by owning band for cascade deletes and joins
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_songs_band_id ON songs(band_id);
        """,
    ),
]


def get_database_path(database_url: str | None = None) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used as is; relative paths are resolved against
    the project root.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def _identifier(name: str) -> str:
    if not _IDENTIFIER_RE.match(name):
        raise ValueError(f"Invalid SQL identifier: {name!r}")
    return name


def _where(predicate: Mapping[str, Any]) -> Tuple[str, Tuple[Any, ...]]:
    if not predicate:
        raise ValueError("A predicate must name at least one column")
    clause = " AND ".join(f"{_identifier(column)} = ?" for column in predicate)
    return clause, tuple(predicate.values())


class SQLiteStore:
    """Table-level CRUD primitives backed by a SQLite file."""

    def __init__(self, database_path: str) -> None:
        self.database_path = database_path

    def get_connection(self) -> sqlite3.Connection:
        """Create a new connection with dict-like rows and foreign keys on.

        SQLite disables foreign key enforcement by default; it has to be
        switched on for every connection.
        """
        conn = sqlite3.connect(self.database_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit on success and translate driver errors."""
        try:
            conn = self.get_connection()
        except sqlite3.Error as exc:
            raise StorageError(str(exc), original=exc) from exc
        try:
            yield conn.cursor()
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            raise ConflictError(str(exc), original=exc) from exc
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(str(exc), original=exc) from exc
        finally:
            conn.close()

    def select_all(self, table: str) -> List[Dict[str, Any]]:
        with self.cursor() as cursor:
            rows = cursor.execute(f"SELECT * FROM {_identifier(table)}").fetchall()
            return [dict(row) for row in rows]

    def select_where(self, table: str, predicate: Mapping[str, Any]) -> List[Dict[str, Any]]:
        clause, params = _where(predicate)
        with self.cursor() as cursor:
            rows = cursor.execute(
                f"SELECT * FROM {_identifier(table)} WHERE {clause}", params
            ).fetchall()
            return [dict(row) for row in rows]

    def insert(self, table: str, row: Mapping[str, Any]) -> int:
        columns = ", ".join(_identifier(column) for column in row)
        placeholders = ", ".join("?" for _ in row)
        with self.cursor() as cursor:
            cursor.execute(
                f"INSERT INTO {_identifier(table)} ({columns}) VALUES ({placeholders})",
                tuple(row.values()),
            )
            return cursor.rowcount

    def update_where(
        self,
        table: str,
        values: Mapping[str, Any],
        predicate: Mapping[str, Any],
    ) -> int:
        assignments = ", ".join(f"{_identifier(column)} = ?" for column in values)
        clause, params = _where(predicate)
        with self.cursor() as cursor:
            cursor.execute(
                f"UPDATE {_identifier(table)} SET {assignments} WHERE {clause}",
                tuple(values.values()) + params,
            )
            return cursor.rowcount

    def delete_where(self, table: str, predicate: Mapping[str, Any]) -> int:
        clause, params = _where(predicate)
        with self.cursor() as cursor:
            cursor.execute(f"DELETE FROM {_identifier(table)} WHERE {clause}", params)
            return cursor.rowcount

    def inner_join_select(
        self,
        left_table: str,
        right_table: str,
        on_left: str,
        on_right: str,
        columns: Sequence[Tuple[str, str]],
    ) -> List[Dict[str, Any]]:
        """Select ``columns`` from ``left_table INNER JOIN right_table``.

        ``columns`` holds ``(qualified_column, alias)`` pairs, e.g.
        ``("bands.id", "bandId")``.  ``on_left`` and ``on_right`` are the
        qualified join columns compared for equality.
        """
        projection = ", ".join(
            f"{_identifier(column)} AS {_identifier(alias)}" for column, alias in columns
        )
        sql = (
            f"SELECT {projection} FROM {_identifier(left_table)} "
            f"INNER JOIN {_identifier(right_table)} "
            f"ON {_identifier(on_left)} = {_identifier(on_right)}"
        )
        with self.cursor() as cursor:
            return [dict(row) for row in cursor.execute(sql).fetchall()]

    def ensure_schema(self) -> None:
        """Create the database file if needed and apply pending migrations."""
        with self.cursor() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) as version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    logger.info("Applied migration %s", version)
                    current_version = version
