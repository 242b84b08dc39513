"""
Configuration settings for the FastAPI application
"""

from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from dpr_api.models import DEFAULT_DB_URL

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings"""

    # API configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "DPR Members API"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # CORS settings
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "https://your-frontend-domain.com"]

    # Database settings
    DATABASE_URL: str = DEFAULT_DB_URL
    DB_ECHO: bool = False

    # Query settings
    DEFAULT_PAGE_SIZE: int = 25
    EXPORT_LIMIT: int = 10000
    RECENT_MEMBERS_LIMIT: int = 5
    STATS_INCLUDE_GENDER: bool = True  # name-based guess, not recorded data
    EXPORT_CSV_STRICT: bool = False    # RFC 4180 quoting instead of legacy quoting

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", extra="ignore")


settings = Settings()
