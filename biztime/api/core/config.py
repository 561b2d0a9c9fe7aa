from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # SQLAlchemy URL; relative sqlite paths resolve against the working dir
    DATABASE_URL: str = "sqlite:///./biztime.db"

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    # SQLAlchemy engine + uvicorn access loggers; INFO echoes SQL
    LIBRARY_LOG_LEVEL: str = "WARNING"

    # JSON list in the environment, e.g. CORS_ORIGINS='["http://localhost:3000"]'
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
