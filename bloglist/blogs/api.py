"""Blog CRUD endpoints.

- GET    /api/blogs       - List blogs (public)
- GET    /api/blogs/{id}  - Get one blog (public)
- POST   /api/blogs       - Create blog (bearer token)
- PUT    /api/blogs/{id}  - Replace likes count (public)
- DELETE /api/blogs/{id}  - Delete blog (bearer token, creator only)
"""

from flask import Blueprint, jsonify

from ..api.validation import validate_request
from ..auth.decorators import auth_required
from ..auth.schemas import AuthenticatedIdentity
from ..db import get_core
from . import service
from .schemas import BlogCreate, BlogLikesUpdate

# Create Blueprint
blogs_bp = Blueprint("blogs", __name__)


@blogs_bp.get("")
def list_blogs():
    """
    List every blog with its owner.

    Returns:
        200: Array of BlogResponse
    """
    core = get_core()
    blogs = service.list_blogs(core)

    return jsonify([blog.model_dump() for blog in blogs])


@blogs_bp.get("/<blog_id>")
def get_blog(blog_id: str):
    """
    Returns:
        200: BlogResponse
        404: Blog not found
    """
    core = get_core()
    blog = service.get_blog(core, blog_id)

    return jsonify(blog.model_dump())


@blogs_bp.post("")
@auth_required
@validate_request
def create_blog(data: BlogCreate, identity: AuthenticatedIdentity):
    """
    Create a blog owned by the authenticated user.

    Request Body (BlogCreate):
        - title: str (required)
        - url: str (required)
        - author: str | None
        - likes: int >= 0 (default: 0)

    Returns:
        201: BlogResponse
        400: Validation error
        401: Token missing or invalid
    """
    with get_core(atomic=True) as core:
        blog = service.create_blog(core, identity, data)

    return jsonify(blog.model_dump()), 201


@blogs_bp.put("/<blog_id>")
@validate_request
def update_blog_likes(blog_id: str, data: BlogLikesUpdate):
    """
    Replace the likes count. Anyone may like a blog.

    Request Body (BlogLikesUpdate):
        - likes: int >= 0

    Returns:
        200: BlogResponse with the new count
        400: Validation error
        404: Blog not found
    """
    with get_core(atomic=True) as core:
        blog = service.update_likes(core, blog_id, data)

    return jsonify(blog.model_dump())


@blogs_bp.delete("/<blog_id>")
@auth_required
def delete_blog(blog_id: str, identity: AuthenticatedIdentity):
    """
    Delete a blog. Only its creator may do so.

    Returns:
        204: No content
        401: Token missing or invalid
        403: Caller is not the creator
        404: Blog not found
    """
    with get_core(atomic=True) as core:
        service.delete_blog(core, identity, blog_id)

    return "", 204
