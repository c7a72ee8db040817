import logging
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from typing import List, Literal

# Load .env file explicitly for flexibility
load_dotenv()


class Settings(BaseSettings):
    """Application configuration settings."""

    APP_ENV: str = "development"
    OPENCAGE_API_KEY: str | None = None

    # --- Search ---
    DEFAULT_SEARCH_TERM: str = "Taco"
    SEARCH_RESULT_LIMIT: int = Field(20, ge=1, le=100)  # OpenCage caps at 100
    GEOCODER_LANGUAGE: str = "en"

    # --- Detail view ---
    DISTANCE_UNITS: Literal["metric", "imperial"] = "metric"

    # --- CORS ---
    BACKEND_CORS_ORIGINS: List[str] = ["*"]  # Adjust for production

    # Pydantic V2 configuration
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )


# Instantiate settings
settings = Settings()

# --- Basic Logging Setup ---
log_level = logging.DEBUG if settings.APP_ENV == "development" else logging.INFO
logging.basicConfig(
    level=log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)  # Get logger for the current module context

# --- Initial Config Logging ---
logger.info(f"Application environment: {settings.APP_ENV}")

if not settings.OPENCAGE_API_KEY:
    logger.warning("OPENCAGE_API_KEY is missing in .env. Place search will not function.")
else:
    logger.info("OpenCage API Key found.")

logger.info(
    f"Default search term: '{settings.DEFAULT_SEARCH_TERM}', result limit: {settings.SEARCH_RESULT_LIMIT}"
)
logger.info(f"CORS origins: {settings.BACKEND_CORS_ORIGINS}")
