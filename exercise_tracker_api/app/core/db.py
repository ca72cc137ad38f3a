"""
SQLite-backed record store and simple migration system.

The ``Store`` owns a single connection that is opened when the
application starts (``connect``), shared by every request through
``app.state.store`` and closed on shutdown (``close``).  It exposes
the two record collections used by the API, users and exercises, as
plain methods returning ``sqlite3.Row`` objects; the service layer
maps those rows to Pydantic schemas.

Applied schema versions are tracked in the ``migrations`` table and
new migrations run in order on ``connect``.
"""

import logging
import os
import sqlite3
import uuid
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

MIGRATIONS: List[tuple] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            username TEXT NOT NULL UNIQUE,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS exercises (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            description TEXT NOT NULL,
            duration INTEGER NOT NULL,
            date TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(user_id) REFERENCES users(id)
        );
        """,
    ),
    # Migration 2: log lookups filter by user and date range
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_exercises_user_date ON exercises(user_id, date);
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are returned unchanged; relative
    paths are resolved against the project root.
    """
    if database_url == ":memory:" or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent
    return str((base_dir / database_url).resolve())


def new_id() -> str:
    return uuid.uuid4().hex


class Store:
    """Record store for users and exercises."""

    def __init__(self, database_url: str) -> None:
        self.path = resolve_database_path(database_url)
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Store is not connected")
        return self._conn

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def connect(self) -> None:
        """Open the connection and apply pending migrations."""
        if self._conn is not None:
            return
        # Requests may be served from a different thread than the one
        # that ran startup (e.g. the test client's portal).
        conn = sqlite3.connect(self.path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        self._conn = conn
        self.init_db()
        logger.info("Connected to database %s", self.path)

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Closed database %s", self.path)

    def init_db(self) -> None:
        """Create the ``migrations`` table and apply new migrations."""
        conn = self.connection
        conn.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        row = conn.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0
        for version, sql in MIGRATIONS:
            if version > current_version:
                conn.executescript(sql)
                conn.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                conn.commit()
                logger.debug("Applied migration %s", version)
                current_version = version

    # -- users ---------------------------------------------------------------

    def insert_user(self, username: str) -> sqlite3.Row:
        """Insert a user and return the stored row.

        Raises ``sqlite3.IntegrityError`` if the username is taken.
        """
        conn = self.connection
        user_id = new_id()
        with conn:
            conn.execute(
                "INSERT INTO users (id, username) VALUES (?, ?)",
                (user_id, username),
            )
        return self.find_user_by_id(user_id)

    def find_user_by_id(self, user_id: str) -> Optional[sqlite3.Row]:
        return self.connection.execute(
            "SELECT id, username FROM users WHERE id = ?", (user_id,)
        ).fetchone()

    def find_user_by_username(self, username: str) -> Optional[sqlite3.Row]:
        return self.connection.execute(
            "SELECT id, username FROM users WHERE username = ?", (username,)
        ).fetchone()

    def list_users(self) -> List[sqlite3.Row]:
        return self.connection.execute(
            "SELECT id, username FROM users ORDER BY rowid"
        ).fetchall()

    # -- exercises -----------------------------------------------------------

    def insert_exercise(
        self, user_id: str, description: str, duration: int, date: str
    ) -> sqlite3.Row:
        """Insert an exercise; ``date`` is an ISO ``YYYY-MM-DD`` string."""
        conn = self.connection
        exercise_id = new_id()
        with conn:
            conn.execute(
                "INSERT INTO exercises (id, user_id, description, duration, date) "
                "VALUES (?, ?, ?, ?, ?)",
                (exercise_id, user_id, description, duration, date),
            )
        return conn.execute(
            "SELECT id, user_id, description, duration, date FROM exercises WHERE id = ?",
            (exercise_id,),
        ).fetchone()

    def find_exercises(
        self,
        user_id: str,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[sqlite3.Row]:
        """Return a user's exercises in ascending date order.

        ``date_from`` and ``date_to`` are inclusive ISO date bounds,
        each applied only when given.  ``limit`` of ``None`` or ``0``
        returns every match.
        """
        clauses = ["user_id = ?"]
        params: list = [user_id]
        if date_from is not None:
            clauses.append("date >= ?")
            params.append(date_from)
        if date_to is not None:
            clauses.append("date <= ?")
            params.append(date_to)
        query = (
            "SELECT id, user_id, description, duration, date FROM exercises "
            f"WHERE {' AND '.join(clauses)} ORDER BY date ASC, rowid ASC"
        )
        if limit:
            query += " LIMIT ?"
            params.append(limit)
        return self.connection.execute(query, tuple(params)).fetchall()
