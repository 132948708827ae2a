"""Shared test fixtures for bloglist."""

import os
import tempfile

# Keep the database created at app import out of the working directory
os.environ.setdefault(
    "DATABASE_PATH",
    os.path.join(tempfile.mkdtemp(prefix="bloglist-tests-"), "startup.db"),
)

import pytest

from bloglist.config import settings

# Fast bcrypt for tests
settings.bcrypt_work_factor = 4

from bloglist.main import app  # noqa: E402
from bloglist.auth import service, token as auth_token  # noqa: E402
from bloglist.auth.schemas import UserCreate  # noqa: E402
from bloglist.db import get_core, init_db  # noqa: E402
from bloglist.db.seed import SEED_BLOGS  # noqa: E402

INITIAL_BLOGS = SEED_BLOGS


@pytest.fixture
def test_db():
    """Point settings at a fresh temp-file database with the schema applied.

    Yields the database path. Each test gets its own database.
    """
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    original_db_path = settings.database_path
    settings.database_path = db_path
    try:
        init_db()
        yield db_path
    finally:
        settings.database_path = original_db_path
        try:
            os.unlink(db_path)
        except OSError:
            pass


@pytest.fixture
def core(test_db):
    """Non-atomic Core on the test database.

    Writes are visible through the same Core without committing.
    """
    core = get_core()
    yield core
    core._conn.close()


@pytest.fixture
def client(test_db):
    """Create test client for API testing."""
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def test_user(test_db):
    """Create the 'root' user.

    Returns a tuple of (UserResponse, plaintext password).
    """
    password = "sekret"
    with get_core(atomic=True) as core:
        user = service.create_user(
            core, UserCreate(username="root", name="Superuser", password=password)
        )
    return user, password


@pytest.fixture
def other_user(test_db):
    """Create a second user who owns nothing."""
    with get_core(atomic=True) as core:
        user = service.create_user(
            core, UserCreate(username="mluukkai", name="Matti Luukkainen", password="salainen")
        )
    return user


@pytest.fixture
def jwt_token(test_user):
    """JWT token for the test user."""
    user, _password = test_user
    return auth_token.generate_access_token(user)


@pytest.fixture
def auth_headers(jwt_token):
    """Authorization header for the test user."""
    return {"Authorization": f"Bearer {jwt_token}"}


@pytest.fixture
def other_auth_headers(other_user):
    """Authorization header for the second user."""
    return {"Authorization": f"Bearer {auth_token.generate_access_token(other_user)}"}


@pytest.fixture
def initial_blogs(test_user):
    """Insert INITIAL_BLOGS owned by the test user. Returns their IDs."""
    user, _password = test_user
    with get_core(atomic=True) as core:
        return [core.blog.create(user.id, **blog) for blog in INITIAL_BLOGS]
