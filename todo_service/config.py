"""
Configuration management for the Todo service
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Todo service configuration loaded from environment variables"""

    # Server Configuration
    APP_NAME: str = "Todo Service"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None
    API_PREFIX: str = ""

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./todo.db"
    DB_ECHO: bool = False

    # Token Configuration
    SECRET_KEY: str = "change-this-secret-in-prod"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )


# Global settings instance
settings = Settings()
