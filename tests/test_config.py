"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from bloglist.config import DEFAULT_JWT_SECRET, Settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove overrides set by the test session and ignore any .env file."""
    monkeypatch.delenv("DATABASE_PATH", raising=False)
    monkeypatch.delenv("JWT_SECRET_KEY", raising=False)
    monkeypatch.delenv("JWT_EXPIRY_DAYS", raising=False)
    monkeypatch.delenv("BCRYPT_WORK_FACTOR", raising=False)


class TestConfiguration:
    """Test configuration loading and defaults."""

    def test_default_database_path(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.database_path == "./data/bloglist.db"

    def test_default_api_prefix(self, clean_env):
        assert Settings(_env_file=None).api_prefix == "/api"

    def test_default_token_settings(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.jwt_secret_key == DEFAULT_JWT_SECRET
        assert settings.jwt_algorithm == "HS256"
        assert settings.jwt_expiry_days == 30

    def test_default_work_factor(self, clean_env):
        assert Settings(_env_file=None).bcrypt_work_factor == 12

    def test_cors_origins_is_list(self, clean_env):
        settings = Settings(_env_file=None)
        assert isinstance(settings.cors_origins, list)
        assert "http://localhost:3000" in settings.cors_origins


class TestEnvironmentOverrides:
    """Settings are read from environment variables, case-insensitively."""

    def test_secret_from_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "from-env")
        assert Settings(_env_file=None).jwt_secret_key == "from-env"

    def test_expiry_can_be_disabled(self, clean_env, monkeypatch):
        monkeypatch.setenv("jwt_expiry_days", "0")
        assert Settings(_env_file=None).jwt_expiry_days == 0

    @pytest.mark.parametrize("value", ["3", "32"])
    def test_work_factor_out_of_range(self, clean_env, monkeypatch, value):
        monkeypatch.setenv("BCRYPT_WORK_FACTOR", value)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_negative_expiry_rejected(self, clean_env, monkeypatch):
        monkeypatch.setenv("JWT_EXPIRY_DAYS", "-1")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
