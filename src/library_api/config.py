"""
Configuration management for the Library API
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Document store
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "library"
    mongodb_server_selection_timeout_ms: int = 5000

    # Auth
    jwt_secret: str | None = None
    jwt_algorithm: str = "HS256"
    token_expiry_hours: int | None = None  # None issues tokens without an exp claim
    # Every user logs in with this shared password; no per-user secret is stored
    login_password: str = "secret"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "LIBRARY_"
        case_sensitive = False


# Global settings instance
settings = Settings()
