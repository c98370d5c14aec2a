"""
Configuration settings for the Storefront API
"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "Storefront API"
    version: str = "0.1.0"

    # Security
    jwt_secret: str = Field(default="change-me-in-production")
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Seed data for the in-memory stores
    activity_csv: Optional[str] = None
    catalog_csv: Optional[str] = None

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "STOREFRONT_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
