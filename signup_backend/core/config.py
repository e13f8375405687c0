import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_JWT_SECRET_KEY = "change_this_secret_in_production"
DEFAULT_DB_PASSWORD = "root"

# bcrypt accepts log2 work factors in this range.
MIN_SALT_ROUNDS = 4
MAX_SALT_ROUNDS = 31


def _get_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None or not value.strip():
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, populated once at startup."""

    app_env: str = "development"

    database_url: str = ""
    db_host: str = "127.0.0.1"
    db_port: int = 3306
    db_user: str = "root"
    db_password: str = DEFAULT_DB_PASSWORD
    db_name: str = "signup_db"
    db_pool_size: int = 10
    db_pool_timeout: int = 30

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    jwt_secret_key: str = DEFAULT_JWT_SECRET_KEY
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 120

    salt_rounds: int = 10
    min_password_length: int = 6

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"


def load_settings(env_file: str | None = None) -> Settings:
    load_dotenv(env_file)
    return Settings(
        app_env=os.getenv("APP_ENV", "development"),
        database_url=os.getenv("DATABASE_URL", ""),
        db_host=os.getenv("DB_HOST", "127.0.0.1"),
        db_port=_get_int(os.getenv("DB_PORT"), 3306),
        db_user=os.getenv("DB_USER", "root"),
        db_password=os.getenv("DB_PASSWORD", DEFAULT_DB_PASSWORD),
        db_name=os.getenv("DB_NAME", "signup_db"),
        db_pool_size=_get_int(os.getenv("DB_POOL_SIZE"), 10),
        db_pool_timeout=_get_int(os.getenv("DB_POOL_TIMEOUT"), 30),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_get_int(os.getenv("PORT"), 3000),
        cors_origins=_get_list(os.getenv("CORS_ORIGINS"), ["*"]),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        jwt_secret_key=os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET_KEY),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        jwt_expires_minutes=_get_int(os.getenv("JWT_EXPIRES_MINUTES"), 120),
        salt_rounds=_get_int(os.getenv("SALT_ROUNDS"), 10),
        min_password_length=_get_int(os.getenv("MIN_PASSWORD_LENGTH"), 6),
    )


def validate_runtime_config(settings: Settings) -> None:
    if not MIN_SALT_ROUNDS <= settings.salt_rounds <= MAX_SALT_ROUNDS:
        raise RuntimeError(f"SALT_ROUNDS must be between {MIN_SALT_ROUNDS} and {MAX_SALT_ROUNDS}.")

    insecure = []
    if settings.jwt_secret_key == DEFAULT_JWT_SECRET_KEY:
        insecure.append("JWT_SECRET")
    if not settings.database_url and settings.db_password == DEFAULT_DB_PASSWORD:
        insecure.append("DB_PASSWORD")

    if not insecure:
        return
    if settings.is_production:
        raise RuntimeError(f"{', '.join(insecure)} must be set in production.")
    logger.warning("Using insecure default values for %s", ", ".join(insecure))
