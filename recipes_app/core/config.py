"""Configuration settings for the Recipes application."""
from functools import lru_cache
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings."""
    APP_NAME: str = "Recipes API"
    DEBUG: bool = False
    # Pre-populate the in-memory store on startup so GET /recipes is never empty
    SEED_SAMPLE_DATA: bool = True
    HOST: str = "127.0.0.1"
    PORT: int = 8080
    LOG_LEVEL: str = "info"

    # Allow extra environment variables so a shared .env does not break startup
    model_config = {
        "env_file": ".env",
        "extra": "ignore",
    }

@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
