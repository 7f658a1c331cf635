from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    PROJECT_NAME: str = "Inventory service"

    # Filled in by the runner from --host/--port/--cache
    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 3000
    CACHE_DIR: str = "cache"

    # Static pages and the API description served under /docs
    STATIC_DIR: str = str(PACKAGE_DIR / "static")
    SWAGGER_FILE: str = str(PACKAGE_DIR / "static" / "swagger.yaml")

    # Postgres credentials, same names as the deployment .env
    DB_USER: str | None = None
    DB_HOST: str = "localhost"
    DB_NAME: str | None = None
    DB_PASSWORD: str | None = None
    DB_PORT: int = 5432
    DATABASE_URL: str | None = None

    # Create the items table on startup (local runs only; schema is normally provisioned)
    INIT_DB: bool = False

    LOG_LEVEL: str = "INFO"
    SQLALCHEMY_LOG_LEVEL: str = "WARNING"
    UVICORN_ACCESS_LOG: bool = False
    REQUEST_LOGS_ENABLED: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def sqlalchemy_database_uri(self) -> str:
        """Build the SQLAlchemy database URI."""
        if self.DATABASE_URL is not None:
            return str(self.DATABASE_URL)
        return (
            f"postgresql+asyncpg://{self.DB_USER or ''}:{self.DB_PASSWORD or ''}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME or ''}"
        )


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return cached settings object to avoid re-parsing env vars."""
    return Settings()
