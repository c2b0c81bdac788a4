"""
Configuration management using Pydantic Settings.
Loads environment variables (and an optional .env file) and validates them.
"""
from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, validator
from pathlib import Path


class Settings(BaseSettings):
    """
    Application settings.
    Values are read from the environment, falling back to the .env file.
    """

    # MongoDB
    MONGODB_URI: str = Field(
        default="mongodb://localhost:27017/gigconnect",
        description="MongoDB connection URI"
    )
    MONGODB_DATABASE: str = Field(default="gigconnect", description="Database name")
    WORKER_COLLECTION: str = Field(default="workers", description="Worker records collection")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_FILE: str = Field(default="logs/app.log", description="Log file path")

    # API
    API_HOST: str = Field(default="0.0.0.0", description="API host")
    API_PORT: int = Field(default=3000, description="API port")
    API_TITLE: str = Field(default="GigConnect", description="API title")
    API_VERSION: str = Field(default="1.0.0", description="API version")
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000"],
        description="Origins allowed to call the API from a browser"
    )

    class Config:
        """Pydantic config"""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @validator("MONGODB_URI")
    def validate_mongodb_uri(cls, v):
        """MONGODB_URI must be a MongoDB connection string"""
        if not v:
            raise ValueError("MONGODB_URI must be set.")
        if not v.startswith("mongodb"):
            raise ValueError("MONGODB_URI must be a valid MongoDB connection string.")
        return v

    @validator("LOG_LEVEL")
    def validate_log_level(cls, v):
        """Log level validation"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    @validator("LOG_FILE")
    def create_log_directory(cls, v):
        """Create the log directory if missing"""
        log_path = Path(v)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        return v


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Return the settings instance (singleton).

    Returns:
        Settings: settings object

    Raises:
        ValueError: when settings fail to load or validate
    """
    global _settings

    if _settings is None:
        try:
            _settings = Settings()
        except Exception as e:
            raise ValueError(f"Failed to load or validate settings: {str(e)}")

    return _settings


settings = get_settings()
