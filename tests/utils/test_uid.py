"""Tests for uid module."""

import re

import pytest

from bloglist.utils import uid


# UUID v4 pattern: xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx
UUID_PATTERN = re.compile(
    r'^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$',
    re.IGNORECASE
)


class TestGenerateUuid:
    """Tests for generate_uuid function."""

    def test_returns_valid_uuid_v4_format(self):
        """Should return a string matching the UUID v4 pattern."""
        result = uid.generate_uuid()
        assert isinstance(result, str)
        assert UUID_PATTERN.match(result) is not None

    def test_returns_unique_values(self):
        """Multiple calls should return different values."""
        results = [uid.generate_uuid() for _ in range(100)]
        assert len(set(results)) == 100


class TestIsUuid:
    """Tests for is_uuid function."""

    def test_generated_id_is_uuid(self):
        assert uid.is_uuid(uid.generate_uuid()) is True

    @pytest.mark.parametrize("value", ["", "not-a-uuid", "5a422a851b54a676234d17f7", None, 42])
    def test_rejects_non_uuid(self, value):
        assert uid.is_uuid(value) is False
