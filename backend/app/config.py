from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List
import os


class Settings(BaseSettings):
    """Global app settings loaded from environment.
    - Keep defaults light for dev.
    - Override via config.env or real env vars.
    """

    APP_NAME: str = "records_api"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = True
    PORT: int = 5050

    MONGODB_URI: str = "mongodb://localhost:27017/"
    # Falls back to the database named in the URI path, then to patients_db
    MONGODB_DB_NAME: str | None = None
    MONGODB_TIMEOUT_MS: int = 5000

    # Raw CORS string from env (comma-separated); parsed via cors_origins property
    CORS_ORIGINS: str | None = None

    # Rotating log files go here; empty disables file logging
    LOG_DIR: str = "logs"

    # slowapi default limit applied to every route
    RATE_LIMIT: str = "120/minute"

    class Config:
        env_file = "config.env"
        case_sensitive = False

    @property
    def cors_origins(self) -> List[str]:
        """Return CORS origins as a list, parsing comma-separated env string."""
        raw = self.CORS_ORIGINS or os.getenv("CORS_ORIGINS", "") or ""
        return [o.strip() for o in raw.split(",") if o.strip()]

    @property
    def mongodb_db_name(self) -> str:
        """Database name from settings or the URI path (query string stripped)."""
        if self.MONGODB_DB_NAME:
            return self.MONGODB_DB_NAME
        # hosts never contain "/", so the database is whatever follows the first one
        hosts_and_path = self.MONGODB_URI.split("://", 1)[-1]
        _, _, path = hosts_and_path.partition("/")
        db_name = path.split("?", 1)[0]
        return db_name or "patients_db"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
