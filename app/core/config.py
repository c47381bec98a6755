# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (Postgres connection string; sqlite:// works for local runs)
      - JWT_SECRET (HS256 signing secret for user and admin tokens)
      - ADMIN_USERNAME / ADMIN_PASSWORD (the single admin account)

    Optional:
      - STRIPE_SECRET_KEY (required only when checkout is used)
      - CHECKOUT_SUCCESS_URL / CHECKOUT_CANCEL_URL
    """

    PROJECT_NAME: str = "Shop API"

    DATABASE_URL: str

    # Token signing
    JWT_SECRET: str
    JWT_ALG: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Fixed admin account (not stored in the users table)
    ADMIN_USERNAME: str
    ADMIN_PASSWORD: str

    # Stripe checkout
    STRIPE_SECRET_KEY: str | None = None
    CHECKOUT_CURRENCY: str = "usd"
    CHECKOUT_SUCCESS_URL: str = "http://localhost:3000/success"
    CHECKOUT_CANCEL_URL: str = "http://localhost:3000/cancel"

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
