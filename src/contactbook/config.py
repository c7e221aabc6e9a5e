"""Settings from environment variables, with .env support via python-dotenv."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from contactbook.infrastructure.memory_repository import MAX_CAPACITY

# Repo root: src/contactbook/config.py -> up three levels.
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

_TRUE = ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    max_capacity: int = MAX_CAPACITY
    log_level: str = "INFO"
    phone_region: str = "US"
    serialize_writes: bool = False


def load_env_file() -> Path | None:
    """Load the first .env found (repo root, then cwd). Returns its path, or None."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from env (default os.environ). Raises ValueError on bad values."""
    if env is None:
        env = os.environ

    raw_capacity = env.get("CONTACTS_MAX_CAPACITY", "").strip()
    max_capacity = MAX_CAPACITY
    if raw_capacity:
        try:
            max_capacity = int(raw_capacity)
        except ValueError:
            raise ValueError(
                f"CONTACTS_MAX_CAPACITY must be an integer, got {raw_capacity!r}"
            ) from None
        if max_capacity < 1:
            raise ValueError("CONTACTS_MAX_CAPACITY must be at least 1")

    log_level = env.get("CONTACTS_LOG_LEVEL", "").strip().upper() or "INFO"
    if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"CONTACTS_LOG_LEVEL is not a log level: {log_level!r}")

    phone_region = env.get("CONTACTS_PHONE_REGION", "").strip().upper() or "US"
    serialize_writes = (
        env.get("CONTACTS_SERIALIZE_WRITES", "").strip().lower() in _TRUE
    )
    return Settings(
        max_capacity=max_capacity,
        log_level=log_level,
        phone_region=phone_region,
        serialize_writes=serialize_writes,
    )
