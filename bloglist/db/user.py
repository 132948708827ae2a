"""User table operations.

IMPORT CONVENTION:
- Core accesses these through core.user property
- NO direct import needed when using Core API

Username uniqueness is enforced by the UNIQUE constraint on users.username.
create() does not check for an existing row first; a duplicate surfaces as
sqlite3.IntegrityError, which the auth service turns into a ConflictError.
"""

import sqlite3
from typing import TYPE_CHECKING

from ..utils import isodatetime, uid

if TYPE_CHECKING:
    from . import Core


class UserOperations:
    """User operations.

    Rows returned by the public getters never include password_hash.
    """

    _PUBLIC_COLUMNS = "id, username, name, created_at"

    def __init__(self, conn: sqlite3.Connection, core: "Core | None" = None):
        """Initialize user operations with a database connection.

        Args:
            conn: SQLite connection with row_factory set to sqlite3.Row
            core: Owning Core. Held so the connection stays open for as
                  long as this object is reachable.
        """
        self._conn = conn
        self._core = core

    def create(self, username: str, password_hash: str, name: str | None = None) -> str:
        """Insert a user with an auto-generated UUID.

        Returns:
            The new user ID

        Raises:
            sqlite3.IntegrityError: If username already exists
        """
        user_id = uid.generate_uuid()
        self._conn.execute(
            """INSERT INTO users (id, username, name, password_hash, created_at)
               VALUES (?, ?, ?, ?, ?)""",
            (user_id, username, name, password_hash, isodatetime.now())
        )
        return user_id

    def get_by_id(self, user_id: str) -> sqlite3.Row | None:
        """Get user by ID, or None if not found."""
        return self._conn.execute(
            f"SELECT {self._PUBLIC_COLUMNS} FROM users WHERE id = ?",
            (user_id,)
        ).fetchone()

    def get_by_username(self, username: str) -> sqlite3.Row | None:
        """Get user by exact (case-sensitive) username, or None."""
        return self._conn.execute(
            f"SELECT {self._PUBLIC_COLUMNS} FROM users WHERE username = ?",
            (username,)
        ).fetchone()

    def get_with_password(self, username: str) -> tuple[sqlite3.Row, str] | None:
        """Get user row and password hash for credential verification.

        Returns:
            (row, password_hash) or None if username is unknown
        """
        row = self._conn.execute(
            f"SELECT {self._PUBLIC_COLUMNS}, password_hash FROM users WHERE username = ?",
            (username,)
        ).fetchone()
        if row is None:
            return None
        return row, row["password_hash"]

    def list(self) -> list[sqlite3.Row]:
        """List all users ordered by creation time."""
        return self._conn.execute(
            f"SELECT {self._PUBLIC_COLUMNS} FROM users ORDER BY created_at, username"
        ).fetchall()

    def count(self) -> int:
        """Count registered users."""
        return self._conn.execute("SELECT COUNT(*) FROM users").fetchone()[0]
