"""
Environment-aware configuration.
Values come from the process environment, with a .env file read first if present.
"""
import os
from dotenv import load_dotenv
from datetime import timedelta

load_dotenv()  # Read .env if present

API_VERSION = "1.0.0"


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")  # Set a strong key in production
    DEBUG = False
    TESTING = False
    # CORS: in dev we usually allow '*', in prod supply a comma-separated list in env
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    APP_ENV = os.getenv("APP_ENV", "dev")
    # Session tokens
    JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me-before-deploying-anywhere")
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_TOKEN_EXPIRES = timedelta(seconds=int(os.getenv("JWT_TOKEN_EXPIRES_SECONDS", "86400")))
    # Storage
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///posts.db")
    SQLALCHEMY_ECHO = _env_flag("SQLALCHEMY_ECHO")
    # Used when a profile is created without a picture
    DEFAULT_PROFILE_PICTURE = os.getenv(
        "DEFAULT_PROFILE_PICTURE", "https://i.redd.it/j6mkb6p73h791.jpg"
    )


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    # In dev, propagate exceptions so our error handler has full context
    PROPAGATE_EXCEPTIONS = True


class TestingConfig(BaseConfig):
    TESTING = True
    DATABASE_URL = "sqlite://"
    SQLALCHEMY_ECHO = False
    JWT_SECRET = "testing-secret-that-is-long-enough-for-hs256"


class ProductionConfig(BaseConfig):
    DEBUG = False


def get_config(name: str | None):
    """
    Select config class.
    - If name is provided, choose by name.
    - Else choose based on APP_ENV (dev/test/prod).
    """
    env = (name or os.getenv("APP_ENV", "dev")).lower()
    if env in ["prod", "production"]:
        return ProductionConfig
    if env in ["test", "testing"]:
        return TestingConfig
    return DevelopmentConfig
