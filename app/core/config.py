from pydantic_settings import BaseSettings
from typing import Optional, List

class Settings(BaseSettings):
    PROJECT_NAME: str = "StudyMate API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # Identity
    SECRET_KEY: Optional[str] = None
    ALLOW_DEV_USER_HEADER: bool = True

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
    ]

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./studymate.db"

    # Cache
    CACHE_DEFAULT_TTL: int = 60
    CACHE_CHECK_PERIOD: int = 120

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    TESTING: bool = False

    class Config:
        env_file = ".env"

settings = Settings()
