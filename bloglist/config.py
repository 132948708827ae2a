"""Configuration management using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-me-in-production-use-env-var"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_path: str = "./data/bloglist.db"
    # Seconds to wait on a locked database before failing the request
    database_timeout: float = 5.0
    api_prefix: str = "/api"
    cors_origins: list[str] = ["http://localhost:3000"]

    # JWT Configuration
    jwt_secret_key: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    # 0 disables expiry (tokens stay valid until the secret changes)
    jwt_expiry_days: int = Field(default=30, ge=0)

    # Bcrypt work factor (higher = more secure but slower)
    # Production deployments should keep this at 10 or above.
    # Tests use 4 for faster execution while maintaining functionality
    bcrypt_work_factor: int = Field(default=12, ge=4, le=31)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()
