from typing import Literal, Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "URL Shortener"
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # Full SQLAlchemy URL; takes precedence over the POSTGRES_* values
    DATABASE_URL: Optional[str] = None

    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "shortlink"

    # Public origin used in shortUrl; falls back to the request origin
    BASE_URL: Optional[str] = None

    CLICK_TRACKING_MODE: Literal["background", "inline"] = "background"

    class Config:
        env_file = ".env"

    @property
    def sqlalchemy_database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

settings = Settings()
