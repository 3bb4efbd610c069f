from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_HOSTNAME: str = "localhost"
    DATABASE_PORT: int = 5432
    POSTGRES_DB: str = "space"
    # sqlite:// and friends win over the postgres parts
    DATABASE_URL: Optional[str] = None

    SQL_ECHO: bool = False
    LOG_FILE: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://localhost:8000",
    ]

    DEFAULT_PAGE_NUMBER: int = 0
    DEFAULT_PAGE_SIZE: int = 3

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                f"@{self.POSTGRES_HOSTNAME}:{self.DATABASE_PORT}/{self.POSTGRES_DB}")


settings = Settings()
