"""Tests for UserOperations (core.user)."""

import sqlite3

import pytest

from bloglist.db import Core


def test_create_returns_uuid(core: Core):
    user_id = core.user.create("root", "hash", name="Superuser")

    row = core.user.get_by_id(user_id)
    assert row["username"] == "root"
    assert row["name"] == "Superuser"


def test_public_rows_never_include_hash(core: Core):
    user_id = core.user.create("root", "hash")

    assert "password_hash" not in core.user.get_by_id(user_id).keys()
    assert "password_hash" not in core.user.get_by_username("root").keys()
    assert all("password_hash" not in row.keys() for row in core.user.list())


def test_duplicate_username_violates_constraint(core: Core):
    core.user.create("root", "hash")

    with pytest.raises(sqlite3.IntegrityError):
        core.user.create("root", "other-hash")


def test_usernames_differing_in_case_are_distinct(core: Core):
    core.user.create("root", "hash")
    core.user.create("Root", "hash")

    assert core.user.count() == 2


def test_get_with_password(core: Core):
    user_id = core.user.create("root", "stored-hash")

    row, password_hash = core.user.get_with_password("root")
    assert row["id"] == user_id
    assert password_hash == "stored-hash"


def test_get_with_password_unknown_user(core: Core):
    assert core.user.get_with_password("nobody") is None


def test_lookups_return_none_when_missing(core: Core):
    assert core.user.get_by_id("550e8400-e29b-41d4-a716-446655440000") is None
    assert core.user.get_by_username("nobody") is None
