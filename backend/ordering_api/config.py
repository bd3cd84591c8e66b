"""Settings — every tunable of the ordering API, read from the environment.

Invariants:
    - Secrets (JWT secret, bootstrap admin password) only ever come from env or .env
    - get_settings() builds Settings once per process
    - The restaurant zone is a configured fixed offset; the host zone is never consulted

Design Decisions:
    - pydantic-settings: env parsing, type coercion and validation in one place
    - Non-secret defaults match the docker-compose service names
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_MINUTES_PER_DAY = 24 * 60


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    database_url: str = "postgresql+asyncpg://ordering:ordering@db:5432/ordering"
    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Tokens
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expiry_hours: int = 24

    # First-run admin account, created only while the users table is empty
    admin_username: str | None = None
    admin_password: str | None = None
    admin_email: str = "admin@localhost"

    # Minutes east of UTC used to evaluate opening hours (480 = UTC+8)
    restaurant_utc_offset_minutes: int = 480

    # HTTP / logs
    cors_origins: list[str] = ["http://localhost:5173"]
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_asyncpg_driver(cls, v):
        """Platform URLs say postgresql://; the async engine needs +asyncpg."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return "postgresql+asyncpg://" + v.removeprefix("postgresql://")
        return v

    @field_validator("restaurant_utc_offset_minutes")
    @classmethod
    def offset_within_a_day(cls, v: int) -> int:
        if abs(v) >= _MINUTES_PER_DAY:
            raise ValueError("restaurant_utc_offset_minutes must be within +/-24h")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
