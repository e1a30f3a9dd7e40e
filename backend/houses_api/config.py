# backend/houses_api/config.py
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ---- App ----
    app_env: str = "local"  # local|dev|prod
    app_title: str = "Houses & Bids API"
    app_version: str = "1.0.0"
    debug: bool = False

    # ---- Storage ----
    database_url: str = "sqlite+aiosqlite:///./houses.db"
    auto_create_schema: bool = True

    # ---- HTTP ----
    api_prefix: str = ""
    cors_allow_origins: list[str] | str = ["http://localhost:3000"]

    # ---- Logging ----
    log_level: str = "INFO"
    sql_log_level: str = "WARNING"

    def model_post_init(self, __context) -> None:
        env = (self.app_env or "local").strip().lower()
        if env in ("prod", "production"):
            origins = self.cors_allow_origins
            if origins == "*" or origins == ["*"] or (isinstance(origins, str) and "*" in origins):
                raise ValueError("SECURITY: cors_allow_origins wildcard is not allowed in prod")

    def cors_origins(self) -> list[str]:
        val = self.cors_allow_origins
        if isinstance(val, str):
            v = val.strip()
            return ["*"] if v == "*" else [x.strip() for x in v.split(",") if x.strip()]
        return list(val)


settings = Settings()
