from typing import Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "TaskSync API"
    API_V1_PREFIX: str = "/api/v1"

    # DB
    DATABASE_URL: str = "sqlite:///./data/tasksync.db"
    DB_ECHO: bool = False

    # Auth
    JWT_SECRET: str = "tasksync-dev-secret-change-me-in-dotenv"
    JWT_ALGORITHM: str = "HS256"
    AUTH_HEADER: str = "x-auth-token"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    class Config:
        env_file = ".env"

settings = Settings()
