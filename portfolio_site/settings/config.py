# portfolio_site/settings/config.py  (Pydantic v2)
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # ---------- Database ----------
    DATABASE_URL: str = Field(default="")
    # Only for local dev; Alembic owns the schema everywhere else
    RUN_DB_CREATE_ALL: bool = Field(default=False)

    # ---------- Auth ----------
    SECRET: str = Field(default="")
    COOKIE_SECURE: bool = Field(default=False)
    SESSION_LIFETIME_SECONDS: int = Field(default=3600 * 24)

    # Bootstrap admin (created on startup when missing)
    ADMIN_EMAIL: Optional[str] = Field(default=None)
    ADMIN_PASSWORD: Optional[str] = Field(default=None)
    ADMIN_USERNAME: str = Field(default="admin")

    # ---------- Content ----------
    # JSON document used to create the first published portfolio
    PORTFOLIO_SEED_PATH: Optional[str] = Field(default=None)

    # ---------- HTTP / logging ----------
    CORS_ORIGINS: list[str] = Field(default=["*"])
    LOG_LEVEL: str = Field(default="INFO")

    # ---------- pydantic-settings config ----------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # allow lower/upper env names
        extra="ignore",
    )


settings = Settings()
