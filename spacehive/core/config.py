from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "SpaceHive"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BUDGET_CEILING: int = 200
    DEFAULT_BOOKING_HOURS: int = 4
    MIN_BOOKING_HOURS: int = 2
    MATCH_NOTES_MAX_LENGTH: int = 500
    MARKER_DEBOUNCE_SECONDS: float = 0.1

    SESSION_LIMIT: int = 1000
    NAVIGATION_HISTORY_LIMIT: int = 50


settings = Settings()
