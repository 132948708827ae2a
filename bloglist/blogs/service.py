"""Blog operations with per-operation authorization.

Each mutating operation declares the policy it runs under. The caller's
identity is passed in explicitly; these functions never read request state.

Writes expect an atomic Core so the lookup, the authorization check and
the write happen in one transaction:

    with get_core(atomic=True) as core:
        service.delete_blog(core, identity, blog_id)
"""

import logging
import sqlite3

from ..auth.policy import Policy, authorize
from ..auth.schemas import AuthenticatedIdentity
from ..db import Core
from ..exceptions import ResourceNotFound
from .schemas import BlogCreate, BlogLikesUpdate, BlogOwner, BlogResponse

logger = logging.getLogger(__name__)

CREATE_POLICY = Policy.AUTHENTICATED
# Liking is anonymous: any client may set the count
UPDATE_LIKES_POLICY = Policy.PUBLIC
DELETE_POLICY = Policy.OWNER_ONLY


def _row_to_blog_response(row: sqlite3.Row) -> BlogResponse:
    """Convert a blogs_view row to BlogResponse."""
    return BlogResponse(
        id=row["id"],
        title=row["title"],
        author=row["author"],
        url=row["url"],
        likes=row["likes"],
        user=BlogOwner(
            id=row["user_id"],
            username=row["user_username"],
            name=row["user_name"],
        ),
    )


def list_blogs(core: Core) -> list[BlogResponse]:
    """All blogs with owners denormalized. No authentication required."""
    return [_row_to_blog_response(row) for row in core.blog.list()]


def get_blog(core: Core, blog_id: str) -> BlogResponse:
    """
    Raises:
        ResourceNotFound: If blog_id is unknown
    """
    return _row_to_blog_response(core.blog.get_by_id(blog_id))


def create_blog(
    core: Core,
    identity: AuthenticatedIdentity | None,
    data: BlogCreate
) -> BlogResponse:
    """
    Create a blog owned by the caller.

    Raises:
        AuthenticationError: If identity is None
    """
    authorize(CREATE_POLICY, identity)

    blog_id = core.blog.create(
        identity.id,
        title=data.title,
        url=data.url,
        author=data.author,
        likes=data.likes,
    )

    logger.info(f"Blog {blog_id} created by {identity.username}")
    return get_blog(core, blog_id)


def update_likes(
    core: Core,
    blog_id: str,
    data: BlogLikesUpdate,
    identity: AuthenticatedIdentity | None = None
) -> BlogResponse:
    """
    Replace a blog's likes count with exactly the submitted value.

    Raises:
        ResourceNotFound: If blog_id is unknown
    """
    row = core.blog.get_by_id(blog_id)
    authorize(UPDATE_LIKES_POLICY, identity, owner_id=row["user_id"])

    core.blog.update_likes(blog_id, data.likes)

    return get_blog(core, blog_id)


def delete_blog(core: Core, identity: AuthenticatedIdentity | None, blog_id: str) -> None:
    """
    Delete a blog. Only its creator may do so.

    Raises:
        ResourceNotFound: If blog_id is unknown (including already deleted)
        AuthenticationError: If identity is None
        PermissionDenied: If the caller is not the creator
    """
    row = core.blog.get_by_id(blog_id)
    authorize(DELETE_POLICY, identity, owner_id=row["user_id"])

    if not core.blog.delete(blog_id):
        raise ResourceNotFound(f"Blog '{blog_id}' not found", {"blog_id": blog_id})

    logger.info(f"Blog {blog_id} deleted by {identity.username}")
