# app/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./cashier.db"
    AUTO_CREATE_TABLES: bool = True
    SEED_DATABASE: bool = False

    # Checkout
    CHECKOUT_PESSIMISTIC_LOCKING: bool = True

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    CHECKOUT_RATE_LIMIT: str = "30/minute"

    # Frontend
    CORS_ORIGINS: list[str] = [
        "http://127.0.0.1:5500",
        "http://localhost:5500",
        "http://localhost:3000",
    ]

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
    )


settings = Settings()
