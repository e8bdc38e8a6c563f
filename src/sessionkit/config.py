"""
Configuration management for sessionkit
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Auth
    auth_provider: str = "memory"  # 'memory', 'supabase'
    supabase_url: str | None = None
    supabase_anon_key: str | None = None

    # Legacy hashing sends a freshly salted bcrypt hash; accounts created that way
    # cannot sign in afterwards, it only reproduces the old sign-up behavior
    legacy_password_hashing: bool = False
    bcrypt_rounds: int = 10

    # Text generation
    gemini_model: str = "gemini-2.0-flash"

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "SESSIONKIT_"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
