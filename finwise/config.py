"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # External Services
    data_api_base: str = "http://localhost:8001"

    # Service
    service_name: str = "finwise-engine"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0
    fetch_max_retries: int = 3
    fetch_backoff_base: float = 0.5  # Exponential backoff base in seconds

    # Analysis
    default_period: str = "monthly"


settings = Settings()
