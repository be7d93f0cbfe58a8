"""
Configuration settings for the application
"""

import os
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings"""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./wedding.db")

    # Public URLs embedded per guest
    CHECKIN_BASE_URL: str = os.getenv("CHECKIN_BASE_URL", "https://your-event-checkin.com")
    INVITATION_BASE_URL: str = os.getenv("INVITATION_BASE_URL", "https://your-invitation-web.com")

    # Server
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "3001"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    ALLOW_ORIGINS: List[str] = ["*"]

    # Guest identifiers
    UNIQUE_ID_MAX_ATTEMPTS: int = 3

    # QR rendering
    QR_BOX_SIZE: int = 4
    QR_BORDER: int = 4

    model_config = SettingsConfigDict(env_file=".env")

settings = Settings()
