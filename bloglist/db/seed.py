"""Seed database with a sample user and blogs for development.

Usage:
    python -m bloglist.db.seed
"""

import logging

from ..auth import service
from ..auth.schemas import UserCreate
from . import get_core, init_db

logger = logging.getLogger(__name__)

SEED_USER = {"username": "root", "name": "Superuser", "password": "sekret"}

SEED_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


def seed() -> int:
    """
    Insert the seed user and blogs.

    Skips everything if the seed user already exists.

    Returns:
        Number of blogs inserted
    """
    init_db()

    with get_core(atomic=True) as core:
        if service.get_user_by_username(core, SEED_USER["username"]) is not None:
            logger.info("Seed user already exists, skipping")
            return 0

        user = service.create_user(core, UserCreate(**SEED_USER))
        for blog in SEED_BLOGS:
            core.blog.create(user.id, **blog)

    logger.info(f"Seeded user {user.username} with {len(SEED_BLOGS)} blogs")
    return len(SEED_BLOGS)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed()
