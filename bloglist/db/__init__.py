"""Database module for the bloglist API.

This module provides the Core API for database operations.
Core encapsulates connection management and provides access to the
user and blog operations.

ARCHITECTURE:
- Core owns its connection (one connection per request, no shared state)
- atomic=True: connection commits or rolls back and closes on context exit
- atomic=False: read-only usage, connection closes when Core is collected
- Each table gets an encapsulated class with related operations

    # Read:
    core = get_core()
    row = core.blog.get_by_id(blog_id)

    # Write:
    with get_core(atomic=True) as core:
        blog_id = core.blog.create(user_id, title="...", url="...")

ID GENERATION POLICY:
All row IDs are UUID v4 strings generated inside the operations classes.
Callers never pass IDs to create().
"""

import logging
import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING

from ..config import settings
from ..exceptions import DatabaseError
from ..schema import SCHEMA_PATH

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from .blog import BlogOperations
    from .user import UserOperations


class Core:
    """
    Database Core with user and blog operations.

    Maintains its own connection and transaction state.
    Provides access to table operations through properties.
    """

    def __init__(self, connection: sqlite3.Connection, atomic: bool = False):
        """Initialize Core with a database connection.

        Args:
            connection: SQLite connection with row_factory set to sqlite3.Row
            atomic: If True, Core MUST be used as context manager.
                    If False, Core is meant for reads.
        """
        self._conn = connection
        self._atomic = atomic
        self._user_ops = None
        self._blog_ops = None

    @property
    def user(self) -> "UserOperations":
        """User operations (lazy-loaded, cached)."""
        if self._user_ops is None:
            from .user import UserOperations
            self._user_ops = UserOperations(self._conn, core=self)
        return self._user_ops

    @property
    def blog(self) -> "BlogOperations":
        """Blog operations (lazy-loaded, cached)."""
        if self._blog_ops is None:
            from .blog import BlogOperations
            self._blog_ops = BlogOperations(self._conn, core=self)
        return self._blog_ops

    def __enter__(self) -> "Core":
        """Enter context manager for atomic transaction.

        Raises:
            RuntimeError: If Core was not created with atomic=True
        """
        if not self._atomic:
            raise RuntimeError(
                "Core must be created with atomic=True for context manager use. "
                "Use: with db.get_core(atomic=True) as core:"
            )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager, committing or rolling back the transaction."""
        try:
            if exc_type is None:
                self._conn.commit()
            else:
                self._conn.rollback()
        finally:
            self._conn.close()

    def __del__(self):
        """Close connection on garbage collection.

        The connection may already be closed by __exit__, in which case
        sqlite3 treats close() as a no-op.
        """
        conn = getattr(self, "_conn", None)
        if conn is not None:
            try:
                conn.close()
            except sqlite3.ProgrammingError:
                # Closed from a different thread than the one that opened it
                pass


def _create_connection() -> sqlite3.Connection:
    """Create a fresh database connection.

    Returns:
        SQLite connection with row_factory set to sqlite3.Row
        and foreign keys enabled.

    Raises:
        DatabaseError: If the database file cannot be opened
    """
    db_path = Path(settings.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        conn = sqlite3.connect(str(db_path), timeout=settings.database_timeout)
    except sqlite3.OperationalError as e:
        logger.error(f"Cannot open database at {db_path}: {e}")
        raise DatabaseError("Database unavailable", {"path": str(db_path)}) from e

    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def get_core(atomic: bool = False) -> Core:
    """
    Get a database Core instance.

    Args:
        atomic: If True, returns a Core that MUST be used as context manager.
                All writes inside the block commit together on exit.
                If False (default), returns a Core for reads.

    Examples:
        >>> core = get_core()
        >>> blogs = core.blog.list()

        >>> with get_core(atomic=True) as core:
        ...     core.blog.delete(blog_id)
    """
    conn = _create_connection()
    return Core(conn, atomic=atomic)


# ============================================================================
# DATABASE INITIALIZATION
# ============================================================================

def init_db():
    """Initialize database by running schema.sql if not already initialized."""
    db_path = Path(settings.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    with sqlite3.connect(str(db_path)) as db:
        cursor = db.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='_schema_metadata'"
        )
        if cursor.fetchone():
            # Database already initialized, skip
            return

        schema_sql = SCHEMA_PATH.read_text()
        db.executescript(schema_sql)
        db.commit()
        logger.info(f"Applied schema to {db_path}")
