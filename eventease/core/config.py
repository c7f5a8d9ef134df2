"""
Configuration settings for the tracker
"""

import os
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""

    # Session
    SESSION_TIMEOUT_MINUTES: int = int(os.getenv("SESSION_TIMEOUT_MINUTES", "30"))
    GUEST_USER_NAME: str = os.getenv("GUEST_USER_NAME", "Guest")
    GUEST_USER_EMAIL: str = os.getenv("GUEST_USER_EMAIL", "guest@eventease.com")

    # Record store
    SEED_SAMPLE_DATA: bool = os.getenv("SEED_SAMPLE_DATA", "true").lower() in ("1", "true", "yes")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
