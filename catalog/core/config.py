from typing import List, Optional, Union, Any
from pydantic import AnyHttpUrl, field_validator, ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

class Settings(BaseSettings):
    """Application settings"""

    # General
    PROJECT_NAME: str = "Game Catalog API"
    PROJECT_DESCRIPTION: str = "Catalog of games with pagination, lookup, creation, update and deletion"
    API_V1_PREFIX: str = "/api/v1"
    DEBUG: bool = False
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "dev" # dev, test, prod
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False
    LOG_FILE: Optional[str] = None
    TRACE_HEADER: str = "X-Trace-ID"
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8000

    # CORS
    BACKEND_CORS_ORIGINS: List[AnyHttpUrl] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode='before')
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # Database
    DATABASE_URL: Optional[str] = None
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "game_catalog"
    POSTGRES_PORT: str = "5432"
    # Derived from DATABASE_URL or the individual POSTGRES_* parts
    SQLALCHEMY_DATABASE_URI: Optional[str] = None
    DB_ECHO: bool = False
    CREATE_TABLES_ON_STARTUP: bool = True

    @field_validator("SQLALCHEMY_DATABASE_URI", mode='before')
    def assemble_db_connection(cls, v: Optional[str], info: ValidationInfo) -> Any:
        database_url_from_env = info.data.get("DATABASE_URL")
        if database_url_from_env:
            return database_url_from_env

        if isinstance(v, str):
            return v

        values = info.data
        db_name = values.get("POSTGRES_DB")
        if values.get("ENVIRONMENT") == "test":
            db_name = f"{db_name}_test"

        return (
            f"postgresql+asyncpg://{values.get('POSTGRES_USER')}:{values.get('POSTGRES_PASSWORD')}"
            f"@{values.get('POSTGRES_SERVER')}:{values.get('POSTGRES_PORT')}/{db_name}"
        )

    # Pagination
    DEFAULT_PAGE_SIZE: int = 5
    MAX_PAGE_SIZE: int = 50

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra='ignore',
        validate_default=True,
    )


def get_settings() -> Settings:
    """
    Build the settings instance for the current environment.

    `.env.<ENVIRONMENT>` is loaded for every environment except prod,
    which reads plain `.env`.

    Returns:
        Settings: settings object
    """
    environment = os.getenv("ENVIRONMENT", "dev").lower()
    env_file = f".env.{environment}" if environment != "prod" else ".env"
    return Settings(_env_file=env_file)


settings = get_settings()
