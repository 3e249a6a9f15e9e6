# parking_app/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
Slot layout and rates are fixed constants and live next to the code that uses them.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_IP: str = "127.0.0.1"
    BACKEND_PORT: int = 8080

    # ── Registration ──────────────────────────────────────────────────────
    PLATE_NUMBER_PATTERN: str = r"^[A-Z]{2}[0-9]{2}[A-Z]{2}[0-9]{4}$"   # e.g. MH12AB1234
    OWNER_NAME_MIN_LENGTH: int = 2

    # ── Billing ───────────────────────────────────────────────────────────
    CURRENCY: str = "INR"

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
