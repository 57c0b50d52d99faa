"""Application settings loaded from environment variables."""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Environment-driven settings, read once at import time."""

    DATABASE_URL = os.getenv("DATABASE_URL")
    SQL_DEBUG: bool = os.getenv("SQL_DEBUG", "false").lower() == "true"
    CREATE_TABLES: bool = os.getenv("CREATE_TABLES", "false").lower() == "true"

    ENV = os.getenv("ENV")
    COMMIT_HASH = os.getenv("COMMIT_HASH")

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    SELECTION_MAX_RETRIES: int = int(os.getenv("SELECTION_MAX_RETRIES", "3"))
    ARCHIVE_BATCH_SIZE: int = int(os.getenv("ARCHIVE_BATCH_SIZE", "500"))

    @property
    def env_is_prod(self) -> bool:
        return self.ENV == "prod"


settings = Settings()

if not settings.COMMIT_HASH and settings.env_is_prod:
    raise ValueError("COMMIT_HASH is required for production environments")
