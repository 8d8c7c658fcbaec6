import json
from typing import List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "Product Catalog"
    API_PREFIX: str = "/api/products"

    # Database
    DATABASE_URI: Optional[str] = None
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_HOST: Optional[str] = None
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "product_catalog"
    SQLITE_PATH: str = "./product_catalog.db"
    CREATE_TABLES: bool = True
    SQL_ECHO: bool = False

    # HTTP
    GZIP_MINIMUM_SIZE: int = 1000
    CORS_ORIGINS: Union[List[str], str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [i.strip() for i in v.split(",") if i.strip()]
        return v

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """Explicit URI first, then Postgres when a host is configured, else SQLite."""
        if self.DATABASE_URI:
            return self.DATABASE_URI
        if self.POSTGRES_HOST:
            return (
                f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
            )
        return f"sqlite:///{self.SQLITE_PATH}"


settings = Settings()
