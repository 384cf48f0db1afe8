from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be configured via .env file or environment variables.
    """

    # =============================================================================
    # APPLICATION
    # =============================================================================
    PROJECT_NAME: str = "Student Management API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_PREFIX: str = "/api"

    # =============================================================================
    # SERVER
    # =============================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # =============================================================================
    # MYSQL DATABASE - Individual components
    # =============================================================================
    MYSQL_USER: str = "root"
    MYSQL_PASSWORD: str = ""
    MYSQL_HOST: str = "localhost"
    MYSQL_PORT: int = 3306
    MYSQL_DB: str = "studentdb"

    # Set directly to point at another engine, otherwise built from MYSQL_*
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)

    # =============================================================================
    # DATABASE POOL SETTINGS
    # =============================================================================
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    # None: requests wait for a free connection without a limit
    DB_POOL_TIMEOUT: Optional[float] = None
    DB_POOL_RECYCLE: int = 3600
    DB_ECHO_SQL: bool = False

    # Attempts at a fresh STU/ADM id before giving up on an insert
    MAX_ID_ATTEMPTS: int = 5

    # =============================================================================
    # CORS / STATIC
    # =============================================================================
    BACKEND_CORS_ORIGINS: List[str] = ["*"]
    FRONTEND_DIR: Optional[str] = None

    # =============================================================================
    # LOGGING
    # =============================================================================
    LOG_LEVEL: str = "INFO"

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def build_database_url(cls, v: Optional[str], info) -> str:
        """
        Build DATABASE_URL from components if not provided.

        Priority:
        1. Use DATABASE_URL if explicitly set in .env
        2. Build from MYSQL_* components
        """
        if isinstance(v, str) and v:
            return v

        user = info.data.get("MYSQL_USER")
        password = info.data.get("MYSQL_PASSWORD")
        host = info.data.get("MYSQL_HOST")
        port = info.data.get("MYSQL_PORT")
        db = info.data.get("MYSQL_DB")

        return f"mysql+pymysql://{user}:{password}@{host}:{port}/{db}"

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            import json
            return json.loads(v)
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


# Create global settings instance
settings = Settings()
