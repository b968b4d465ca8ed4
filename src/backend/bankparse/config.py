from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # App
    APP_NAME: str = "BankParse"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # CORS
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000"]

    # Notification capture
    LISTENER_ENABLED: bool = True
    ENABLED_PACKAGES: List[str] = []  # Empty means every supported bank app
    CAPTURE_MIN_CONFIDENCE: float = 0.3  # Below this, notifications without an amount are dropped
    REVIEW_CONFIDENCE_THRESHOLD: float = 0.7  # Below this, ask the user to confirm

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
