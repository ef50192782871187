import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()  # Carga las variables de entorno


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    database_url: str = Field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///./finance.db"))
    sql_echo: bool = Field(default_factory=lambda: _env_bool("SQL_ECHO", False))

    # firma de los tokens de sesión
    secret_key: str = Field(default_factory=lambda: os.getenv("SECRET_KEY", "dev-secret-change-me"))
    algorithm: str = Field(default_factory=lambda: os.getenv("ALGORITHM", "HS256"))
    access_token_expire_minutes: int = Field(
        default_factory=lambda: int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))
    )

    cookie_name: str = Field(default_factory=lambda: os.getenv("COOKIE_NAME", "token"))
    cookie_secure: bool = Field(default_factory=lambda: _env_bool("COOKIE_SECURE", False))

    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()
        ]
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


@lru_cache
def get_settings() -> Settings:
    return Settings()
