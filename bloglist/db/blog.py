"""Blog table operations.

IMPORT CONVENTION:
- Core accesses these through core.blog property
- Reads go through blogs_view, which joins the owning user

Blog IDs are generated here; callers never compute them.
"""

import sqlite3
from typing import TYPE_CHECKING

from ..exceptions import ResourceNotFound
from ..utils import isodatetime, uid

if TYPE_CHECKING:
    from . import Core


class BlogOperations:
    """Blog operations."""

    def __init__(self, conn: sqlite3.Connection, core: "Core | None" = None):
        """Initialize blog operations with a database connection.

        Args:
            conn: SQLite connection with row_factory set to sqlite3.Row
            core: Owning Core. Held so the connection stays open for as
                  long as this object is reachable.
        """
        self._conn = conn
        self._core = core

    def get_by_id(self, blog_id: str) -> sqlite3.Row:
        """Get blog by ID.

        Args:
            blog_id: The UUID of the blog

        Returns:
            sqlite3.Row from blogs_view

        Raises:
            ResourceNotFound: If blog_id doesn't exist or is not a UUID
        """
        row = None
        if uid.is_uuid(blog_id):
            row = self._conn.execute(
                "SELECT * FROM blogs_view WHERE id = ?",
                (blog_id,)
            ).fetchone()

        if not row:
            raise ResourceNotFound(
                f"Blog '{blog_id}' not found",
                {"blog_id": blog_id}
            )

        return row

    def create(
        self,
        user_id: str,
        title: str,
        url: str,
        author: str | None = None,
        likes: int = 0
    ) -> str:
        """Insert a blog owned by user_id.

        Returns:
            The auto-generated blog ID (UUID v4 string)

        Raises:
            sqlite3.IntegrityError: If user_id does not reference a user
        """
        blog_id = uid.generate_uuid()
        now = isodatetime.now()
        self._conn.execute(
            """INSERT INTO blogs (id, title, author, url, likes, user_id, created_at, updated_at)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
            (blog_id, title, author, url, likes, user_id, now, now)
        )
        return blog_id

    def list_by_user(self, user_id: str) -> list[sqlite3.Row]:
        """List blogs created by one user, oldest first."""
        return self._conn.execute(
            "SELECT * FROM blogs_view WHERE user_id = ? ORDER BY created_at, id",
            (user_id,)
        ).fetchall()

    def list(self) -> list[sqlite3.Row]:
        """List all blogs, oldest first."""
        return self._conn.execute(
            "SELECT * FROM blogs_view ORDER BY created_at, id"
        ).fetchall()

    def update_likes(self, blog_id: str, likes: int) -> bool:
        """Replace the likes count.

        Returns:
            True if a row was updated, False if blog_id is unknown
        """
        cursor = self._conn.execute(
            "UPDATE blogs SET likes = ?, updated_at = ? WHERE id = ?",
            (likes, isodatetime.now(), blog_id)
        )
        return cursor.rowcount > 0

    def delete(self, blog_id: str) -> bool:
        """Delete a blog.

        Returns:
            True if a row was deleted, False if it was already gone
        """
        cursor = self._conn.execute("DELETE FROM blogs WHERE id = ?", (blog_id,))
        return cursor.rowcount > 0

    def count(self) -> int:
        """Count stored blogs."""
        return self._conn.execute("SELECT COUNT(*) FROM blogs").fetchone()[0]
