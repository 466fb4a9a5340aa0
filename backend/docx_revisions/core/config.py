from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENVIRONMENT: str = "production"
    AUTH_TYPE: str = "api_key"  # "none" | "api_key"
    API_KEY: str | None = None

    MAX_UPLOAD_SIZE: int = 50 * 1024 * 1024  # 50MB
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 3000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
