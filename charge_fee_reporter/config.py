"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from charge_fee_reporter.domain.exceptions import MissingCredentialError


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Stripe
    stripe_secret_key: str | None = None
    stripe_api_base: str = "https://api.stripe.com"
    stripe_api_version: str | None = None

    # Service
    service_name: str = "charge-fee-reporter"
    log_level: str = "WARNING"
    metrics_textfile: str | None = None

    # HTTP Client
    http_timeout_seconds: float = 30.0


def require_api_key(config: Settings) -> str:
    """Return the Stripe secret key or fail before any network call is made"""
    if not config.stripe_secret_key:
        raise MissingCredentialError("Error: STRIPE_SECRET_KEY environment variable is not set.")
    return config.stripe_secret_key


settings = Settings()
