"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DATABASE_URL: str = "sqlite:///./eventboard.db"
    SQL_ECHO: bool = False

    # argon2 parameters; changing them makes existing hashes report needs_rehash
    PASSWORD_HASH_TIME_COST: int = 3
    PASSWORD_HASH_MEMORY_COST: int = 65536
    PASSWORD_HASH_PARALLELISM: int = 4

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
