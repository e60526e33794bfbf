import os
from pathlib import Path

from decouple import Config, RepositoryEnv
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = next(p for p in Path(__file__).resolve().parents if (p / "main.py").exists())
BASE_DIR = PROJECT_ROOT

# Determine which env file to load
env_file = os.getenv("ENV_FILE", ".env")
env_path = PROJECT_ROOT / env_file

# Only use RepositoryEnv if the env file exists
if env_path.exists():
    config = Config(RepositoryEnv(env_path))
else:
    # fallback: read directly from os.environ using decouple's AutoConfig
    from decouple import AutoConfig

    config = AutoConfig(search_path=None)


class Settings(BaseSettings):
    # App general
    DEBUG: bool = config("DEBUG", default=False, cast=bool)
    APP_NAME: str = config("APP_NAME", default="MYZUWA WAITLIST")
    APP_VERSION: str = config("APP_VERSION", default="1.0.0")
    ENVIRONMENT: str = config("ENVIRONMENT", default="dev")
    APP_PORT: int = config("APP_PORT", default=8000, cast=int)
    APP_URL: str = config("APP_URL", default="https://myzuwa.com")
    DEV_URL: str = config("DEV_URL", default="http://localhost:5173")
    LOG_LEVEL: str = config("LOG_LEVEL", default="INFO")

    # Database
    DB_TYPE: str = config("DB_TYPE", default="postgresql")
    DB_HOST: str = config("DB_HOST", default="localhost")
    DB_PORT: int = config("DB_PORT", default=5432, cast=int)
    DB_USER: str = config("DB_USER", default="user")
    DB_PASS: str = config("DB_PASS", default="password")
    DB_NAME: str = config("DB_NAME", default="waitlist")
    DB_ECHO: bool = config("DB_ECHO", default=False, cast=bool)

    # Redis
    REDIS_URL: str = config("REDIS_URL", default="redis://localhost:6379/0")

    # JWT Authentication
    JWT_SECRET: str = config("JWT_SECRET", default="your-super-secret-jwt-key-change-in-production")
    JWT_ALGORITHM: str = config("JWT_ALGORITHM", default="HS256")
    JWT_EXPIRY_HOURS: int = config("JWT_EXPIRY_HOURS", default=24, cast=int)
    BCRYPT_ROUNDS: int = config("BCRYPT_ROUNDS", default=12, cast=int)

    # Throttling
    LOGIN_MAX_ATTEMPTS: int = config("LOGIN_MAX_ATTEMPTS", default=5, cast=int)
    LOGIN_ATTEMPT_WINDOW_SECONDS: int = config(
        "LOGIN_ATTEMPT_WINDOW_SECONDS", default=900, cast=int
    )
    CAPTURE_MAX_ATTEMPTS_PER_HOUR: int = config(
        "CAPTURE_MAX_ATTEMPTS_PER_HOUR", default=10, cast=int
    )

    # Waitlist
    WAITLIST_REQUIRE_COMPLETE_PROFILE: bool = config(
        "WAITLIST_REQUIRE_COMPLETE_PROFILE", default=False, cast=bool
    )

    @property
    def CORS_ORIGINS(self) -> list[str]:
        return [origin for origin in (self.APP_URL, self.DEV_URL) if origin]

    model_config = SettingsConfigDict(extra="allow")


settings = Settings()
