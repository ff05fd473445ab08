import os
import urllib.parse


def get_settings_module() -> str:
    # APP_ENV selects the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def build_db_config(default_password: str = "") -> dict:
    """DB settings from the environment.

    DATABASE_URL (mysql://user@host:port/db) is the store endpoint and wins over
    the individual DB_* variables; DB_PASSWORD is the access key.
    """
    db_config = {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "attendance_portal"),
    }

    url = os.getenv("DATABASE_URL")
    if url:
        parsed = urllib.parse.urlparse(url)
        if parsed.hostname:
            db_config["host"] = parsed.hostname
        if parsed.port:
            db_config["port"] = int(parsed.port)
        if parsed.username:
            db_config["user"] = urllib.parse.unquote(parsed.username)
        if parsed.password and not os.getenv("DB_PASSWORD"):
            db_config["password"] = urllib.parse.unquote(parsed.password)
        if parsed.path.strip("/"):
            db_config["database"] = parsed.path.strip("/")

    return db_config
