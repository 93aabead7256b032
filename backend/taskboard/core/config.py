from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Taskboard API"
    API_V1_PREFIX: str = "/v1"
    RUN_ENV: str = "development"  # or "production"

    # HTTP
    HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8080
    ALLOWED_ORIGINS: str = "*"

    # DB
    DATABASE_URL: str = "sqlite:///./data/taskboard.db"
    DB_ECHO: bool = False

    # Pagination
    DEFAULT_PAGE_LIMIT: int = 10
    MAX_PAGE_LIMIT: int = 100

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def is_development(self) -> bool:
        return self.RUN_ENV == "development"

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


settings = Settings()
