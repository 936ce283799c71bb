"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_auth: Rate limit for sign-up and login.
        rate_limit_enabled: Turn rate limiting off entirely (tests, local runs).
        database_url: SQLAlchemy URL of the persistent store.
        session_ttl_minutes: Lifetime of a login session.
        auth_cookie_name: Cookie carrying the "<type> <token>" credential.
        default_locale: Message locale when Accept-Language does not match.
        nickname_min_length: Minimum nickname length at sign-up.
        password_min_length: Minimum password length at sign-up.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Board API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    rate_limit_auth: str = "10/minute"
    rate_limit_enabled: bool = True

    database_url: str = "sqlite:///./board.db"
    session_ttl_minutes: int = 60
    auth_cookie_name: str = "authorization"
    default_locale: str = "ko"

    nickname_min_length: int = 3
    password_min_length: int = 5


settings = Settings()
