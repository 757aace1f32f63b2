from typing import List
from pydantic import field_validator
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

    # =============================================================================
    # SERVER
    # =============================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 5010

    # =============================================================================
    # DATABASE
    # =============================================================================
    DATABASE_URL: str = "sqlite:///./students.db"
    DB_ECHO_SQL: bool = False

    # =============================================================================
    # CORS
    # =============================================================================
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:8501",
    ]

    # =============================================================================
    # CLIENT
    # =============================================================================
    API_BASE_URL: str = "http://localhost:5010"
    CLIENT_TIMEOUT: float = 10.0

    # =============================================================================
    # LOGGING
    # =============================================================================
    LOG_LEVEL: str = "INFO"

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


def print_config():
    """Print current configuration."""
    print("=" * 80)
    print("CURRENT CONFIGURATION")
    print("=" * 80)
    print(f"Project Name: {settings.PROJECT_NAME}")
    print(f"Version: {settings.APP_VERSION}")
    print(f"Debug Mode: {settings.DEBUG}")
    print(f"Listening on: {settings.HOST}:{settings.PORT}")
    print("-" * 80)
    print(f"Database URL: {settings.DATABASE_URL}")
    print(f"Echo SQL: {settings.DB_ECHO_SQL}")
    print(f"Client API URL: {settings.API_BASE_URL}")
    print("=" * 80)


if __name__ == "__main__":
    print_config()
