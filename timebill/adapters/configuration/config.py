# timebill/adapters/configuration/config.py

import json
from typing import Annotated, Optional, List, Union
from logging import getLevelName
from pydantic import Field, PostgresDsn, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"

    # Nova flag de debug
    DEBUG: bool = False

    # Persistence backend: "memory" keeps everything in the process,
    # "database" uses SQLAlchemy against DATABASE_URL
    STORAGE_BACKEND: str = "database"

    # Database
    DB_DRIVER: str = "psycopg2"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "timebill"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    TEST_MODE: bool = False
    TEST_POSTGRES_DB: str = ""
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10

    # Auth
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # CORS
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    # API Documentation
    SCHEMA_VISIBILITY: bool = True

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value, info):
        if value:
            return value

        data = info.data
        db_name = data.get("TEST_POSTGRES_DB") if data.get("TEST_MODE") else data.get("POSTGRES_DB")
        return str(PostgresDsn.build(
            scheme=f"postgresql+{data.get('DB_DRIVER', 'psycopg2')}",
            username=data["POSTGRES_USER"],
            password=data["POSTGRES_PASSWORD"],
            host=data["POSTGRES_HOST"],
            port=data["POSTGRES_PORT"],
            path=db_name,
        ))

    @field_validator("CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """
        Se vier como string CSV (ex: 'a,b,c'), transforma em lista.
        Se vier como JSON ou já como lista, retorna a lista.
        """
        if isinstance(v, str) and v.startswith("["):
            v = json.loads(v)
        elif isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, list):
            return v
        raise ValueError(f"CORS_ORIGINS inválido: {v!r}")

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Garante que o valor é um nível válido do logging"""
        lvl = v.upper()
        if not isinstance(getLevelName(lvl), int):
            raise ValueError(f"LOG_LEVEL inválido: {v!r}")
        return lvl

    @field_validator("STORAGE_BACKEND", mode="before")
    def validate_storage_backend(cls, v: str) -> str:
        backend = v.lower()
        if backend not in ("memory", "database"):
            raise ValueError(f"STORAGE_BACKEND inválido: {v!r} (use 'memory' ou 'database')")
        return backend

    @property
    def async_database_url(self) -> str:
        """DATABASE_URL with the sync driver swapped for asyncpg."""
        return str(self.DATABASE_URL).replace("postgresql+psycopg2", "postgresql+asyncpg")

    @property
    def sync_database_url(self) -> str:
        """DATABASE_URL with a blocking driver, for Alembic."""
        return (
            str(self.DATABASE_URL)
            .replace("postgresql+asyncpg", "postgresql+psycopg2")
            .replace("sqlite+aiosqlite", "sqlite")
        )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
