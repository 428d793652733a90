from __future__ import annotations

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # App
    APP_TITLE: str = "product-api"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"

    # CORS: "http://localhost:3000,https://example.com"
    CORS_ORIGINS: Optional[str] = None

    # 0 = fără limită (verificare pe Content-Length)
    MAX_BODY_SIZE_BYTES: int = 0

    # DB
    DATABASE_URL: str = Field("sqlite:///./products.db", description="postgresql+psycopg://appuser:<PASS>@db:5432/appdb")
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 1800  # sec
    DB_POOL_TIMEOUT: int = 30    # sec
    DB_DISABLE_PRE_PING: bool = False

    # Prototip/demo: creează tabelele din modele la pornire (în producție: Alembic)
    SQLALCHEMY_CREATE_ALL: bool = False

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in (self.CORS_ORIGINS or "").split(",") if o.strip()]


settings = Settings()
