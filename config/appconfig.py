# config/appconfig.py
"""
Application Configuration
Database, logging and paging settings for the clinic backend
"""
from pydantic_settings import BaseSettings
from typing import Literal
from pathlib import Path

# Calculate the project root
BASE_DIR = Path(__file__).resolve().parent.parent


class AppSettings(BaseSettings):
    """Configuration for the Clinic Booking & Billing backend"""

    APP_NAME: str = "Clinic Booking & Billing"
    APP_VERSION: str = "1.0.0"

    # ============================================================================
    # DATABASE
    # ============================================================================
    # SQLite (aiosqlite) for local work, PostgreSQL (asyncpg) in deployment
    DATABASE_URL: str = f"sqlite+aiosqlite:///{BASE_DIR / 'clinic.db'}"
    SQL_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = True   # create missing tables on startup

    # ============================================================================
    # PAGINATION
    # ============================================================================
    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 500

    # ============================================================================
    # LOGGING
    # ============================================================================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    # ========================================================================
    # COMPUTED PROPERTIES
    # ========================================================================
    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def LOGGING_CONFIG(self) -> dict:
        """dictConfig payload applied in app/main.py."""
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "app": {"handlers": ["console"], "level": self.LOG_LEVEL, "propagate": False},
                "sqlalchemy.engine": {"handlers": ["console"], "level": "WARNING", "propagate": False},
                "uvicorn": {"handlers": ["console"], "level": "INFO", "propagate": False},
            },
            "root": {"handlers": ["console"], "level": "WARNING"},
        }


settings = AppSettings()
