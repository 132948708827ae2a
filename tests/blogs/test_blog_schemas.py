"""Tests for blog Pydantic schemas."""

import pytest
from pydantic import ValidationError

from bloglist.blogs.schemas import LIKES_MAX, BlogCreate, BlogLikesUpdate


class TestBlogCreate:
    """Tests for BlogCreate schema."""

    def test_valid_data(self):
        blog = BlogCreate(title="Title", author="Author", url="http://example.com", likes=3)

        assert blog.title == "Title"
        assert blog.author == "Author"
        assert blog.url == "http://example.com"
        assert blog.likes == 3

    def test_defaults(self):
        blog = BlogCreate(title="Title", url="http://example.com")

        assert blog.author is None
        assert blog.likes == 0

    @pytest.mark.parametrize("field", ["title", "url"])
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_required_fields(self, field, value):
        data = {"title": "Title", "url": "http://example.com", field: value}

        with pytest.raises(ValidationError) as exc_info:
            BlogCreate(**data)

        assert str(exc_info.value.errors()[0]["ctx"]["error"]) == f"{field} is required"

    @pytest.mark.parametrize("likes", [-1, "7", 1.5])
    def test_invalid_likes_rejected(self, likes):
        with pytest.raises(ValidationError):
            BlogCreate(title="Title", url="http://example.com", likes=likes)


class TestBlogLikesUpdate:
    """Tests for BlogLikesUpdate schema."""

    def test_likes_required(self):
        with pytest.raises(ValidationError):
            BlogLikesUpdate()

    def test_zero_is_allowed(self):
        assert BlogLikesUpdate(likes=0).likes == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            BlogLikesUpdate(likes=-5)

    def test_likes_upper_bound(self):
        assert BlogLikesUpdate(likes=LIKES_MAX).likes == LIKES_MAX

        with pytest.raises(ValidationError):
            BlogLikesUpdate(likes=LIKES_MAX + 1)
