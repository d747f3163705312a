from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    PROJECT_NAME: str = "Quotes API"
    API_PREFIX: str = "/api"

    # Database (AsyncPG)
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "password"
    POSTGRES_DB: str = "quotes"
    DATABASE_URL: str = f"postgresql+asyncpg://{POSTGRES_USER}:{POSTGRES_PASSWORD}@{POSTGRES_SERVER}/{POSTGRES_DB}"
    DATABASE_ECHO: bool = False
    CREATE_TABLES: bool = False  # Local runs only, there are no migrations

    # CORS (Allow the frontend dev servers)
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:3001"]

    # Create stores author/content exactly as sent when enabled
    PERSIST_RAW_ON_CREATE: bool = False

    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    class Config:
        env_file = ".env"

settings = Settings()
