from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings
from sqlalchemy.orm import declarative_base


class Settings(BaseSettings):
    DATABASE_URL: str = Field(..., description="Database connection URL")
    APP_NAME: str = "Real Estate API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = Field(default="INFO", description="Root logging level")
    ALLOWED_ORIGINS: str = Field(
        default="http://localhost:3000,http://frontend:3000",
        description="Comma-separated list of origins allowed by CORS",
    )
    SEED_ON_STARTUP: bool = Field(
        default=False, description="Seed the listings table on startup when it is empty"
    )
    SEED_COUNT: int = Field(default=50, description="Number of listings generated by the seeder")

    class Config:
        env_file = str(Path(__file__).parent.parent.parent / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


settings = Settings()

Base = declarative_base()
