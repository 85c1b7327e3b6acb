"""
Process configuration.

Everything the connector reads from the environment is loaded once into a
`Settings` object and handed to `main.create_app()`. Feature code receives
settings through `app.state`, never through `os.environ`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DB_PORT = 3306
DEFAULT_HTTP_PORT = 3000
DEFAULT_CONNECT_TIMEOUT = 10


@dataclass(frozen=True)
class Settings:
    db_name: str
    secret_key: str
    db_host: str = "localhost"
    db_port: int = DEFAULT_DB_PORT
    db_user: str = "root"
    db_password: str = ""
    db_connect_timeout: int = DEFAULT_CONNECT_TIMEOUT
    port: int = DEFAULT_HTTP_PORT
    log_level: str = "INFO"


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _require(name: str) -> str:
    value = _env_str(name)
    if not value:
        raise RuntimeError(f"{name} is not set.")
    return value


def load_settings(env_file: str | Path | None = ".env") -> Settings:
    """
    Build settings from the environment.

    A `.env` file is loaded first when present; real environment variables
    win over values from the file.
    """
    if env_file is not None and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    return Settings(
        db_name=_require("DB_NAME"),
        secret_key=_require("SECRET_KEY"),
        db_host=_env_str("DB_HOST", "localhost") or "localhost",
        db_port=_env_int("DB_PORT", DEFAULT_DB_PORT),
        db_user=_env_str("DB_USER", "root") or "root",
        # Passwords may legitimately have surrounding whitespace.
        db_password=os.environ.get("DB_PASSWORD", ""),
        db_connect_timeout=_env_int("DB_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT),
        port=_env_int("PORT", DEFAULT_HTTP_PORT),
        log_level=(_env_str("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
