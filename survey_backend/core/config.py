import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.getenv("APP_ENV", "development")

DATABASE_URL = os.getenv("DATABASE_URL", "")
DATABASE_ECHO = _get_bool(os.getenv("DATABASE_ECHO"), default=False)

HOST = os.getenv("HOST", "0.0.0.0")
# 3306 is the historical default of this service, kept so existing deployments keep working.
PORT = int(os.getenv("PORT", "3306"))

CORS_ALLOW_ORIGINS = _get_list(os.getenv("CORS_ALLOW_ORIGINS"), default=["*"])

PASSWORD_HASH_ROUNDS = int(os.getenv("PASSWORD_HASH_ROUNDS", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

def validate_runtime_config() -> None:
    if not DATABASE_URL:
        raise RuntimeError("DATABASE_URL must be set.")
    if PASSWORD_HASH_ROUNDS < 4 or PASSWORD_HASH_ROUNDS > 31:
        raise RuntimeError("PASSWORD_HASH_ROUNDS must be between 4 and 31.")
