from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Civil dates and export timestamps are rendered in this zone
    REFERENCE_TIMEZONE: str = "America/New_York"

    # Upstream registration service (waitlist promotion command only)
    REGISTRATION_API_URL: str = "http://localhost:5000/api"
    REGISTRATION_API_TIMEOUT_SECONDS: float = 10.0

    # Export
    EXPORT_NAME_MAX_LENGTH: int = 80

    # App
    APP_NAME: str = "Tier Reports"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev


settings = Settings()
