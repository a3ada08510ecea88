"""Application configuration from environment."""
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "tglogin"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3001

    # CORS (comma-separated origins, e.g. http://localhost:3000,http://127.0.0.1:3000)
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Telegram Login Widget: bot token is the shared secret the widget hash is keyed with
    telegram_bot_name: Optional[str] = None
    telegram_bot_token: Optional[str] = None
    # Max age of auth_date in seconds; unset disables the freshness check
    telegram_auth_expiration: Optional[int] = Field(default=None, ge=0)

    # Session token issued after a verified login
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expire_seconds: int = 30 * 24 * 3600  # 30 days

    @property
    def cors_origin_list(self) -> list[str]:
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        if not origins:
            return ["http://localhost:3000", "http://127.0.0.1:3000"]
        return origins

    @property
    def telegram_login_configured(self) -> bool:
        return bool(self.telegram_bot_token)


@lru_cache
def get_settings() -> Settings:
    return Settings()
