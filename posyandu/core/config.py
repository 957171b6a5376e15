# posyandu/core/config.py

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- JWT Config ---
    JWT_SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    JWT_ISSUER: str = "posyanduku-api"

    # --- Database Config ---
    DATABASE_URL: str
    DB_POOL_MIN_SIZE: int = 5
    DB_POOL_MAX_SIZE: int = 20
    DB_POOL_TIMEOUT: float = 30.0

    # --- Server Config ---
    API_PREFIX: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    # --- Password policy ---
    PASSWORD_CHANGE_REQUIRES_CURRENT: bool = True
    MIN_PASSWORD_LENGTH: int = 6

    @field_validator("JWT_SECRET_KEY")
    @classmethod
    def secret_must_be_strong(cls, value: str) -> str:
        if len(value) < 16:
            raise ValueError("JWT_SECRET_KEY must be at least 16 characters long")
        return value

    @property
    def asyncpg_url(self) -> str:
        return self.DATABASE_URL.replace("+asyncpg", "")

    @property
    def database_url(self) -> str:
        """URL for the synchronous engine Alembic runs migrations with."""
        return self.asyncpg_url

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
