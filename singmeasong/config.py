"""Application settings loaded from the environment."""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreBackend(str, Enum):
    SQL = "sql"
    MEMORY = "memory"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Server ─────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    # ── Persistence ────────────────────────────────
    store_backend: StoreBackend = StoreBackend.SQL
    database_url: str = "sqlite+aiosqlite:///./singmeasong.db"
    create_schema: bool = True

    # ── Ranking ────────────────────────────────────
    recent_limit: int = Field(default=10, ge=1)
    removal_threshold: int = -5
    popularity_threshold: int = 10
    popular_share: float = Field(default=70.0, ge=0.0, le=100.0)


settings = Settings()
