# shopcart/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    All values have local defaults, so the app runs without a .env file:
      - DATABASE_URL points at a SQLite file in the working directory
      - PRINCIPAL_USER_ID is the fixed id of the single local user

    Optional:
      - SQL_ECHO (log every SQL statement)
      - LOG_LEVEL (root logging level, e.g. DEBUG)
    """

    PROJECT_NAME: str = "Shopcart API"
    API_V1_STR: str = "/api/v1"

    # Embedded store
    DATABASE_URL: str = "sqlite:///./shopcart.db"
    SQL_ECHO: bool = False

    # This system supports exactly one local user
    PRINCIPAL_USER_ID: str = "usuario_principal"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
