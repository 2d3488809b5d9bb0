import os
from dotenv import load_dotenv
from pathlib import Path

load_dotenv()

basedir = Path(__file__).resolve().parent


def _env_flag(name: str, default: bool = False) -> bool:
    """Interpret typical truthy strings from environment variables."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "fallback-dev-key")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", f"sqlite:///{basedir / 'instance' / 'questlab.sqlite'}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_COOKIE_SECURE = _env_flag("SESSION_COOKIE_SECURE", default=False)

    # The whole progress document is stored under this single key.
    QUESTLAB_STORAGE_KEY = os.getenv("QUESTLAB_STORAGE_KEY", "cs-quest-lab-data")
    QUESTLAB_ADMIN_PASSPHRASE = os.getenv("QUESTLAB_ADMIN_PASSPHRASE", "owner-access")
    # Raise on an unreadable stored document instead of starting fresh.
    QUESTLAB_STRICT_LOAD = _env_flag("QUESTLAB_STRICT_LOAD", default=False)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # "json" or "text"
