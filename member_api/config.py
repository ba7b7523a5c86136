import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    with_credentials: bool = True


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build transport settings from the environment.

    A .env file (or ``env_file``) is loaded first; variables already set in
    the process environment win.
    """
    load_dotenv(env_file)

    base_url = os.getenv("MEMBER_API_BASE_URL")
    if not base_url:
        raise ValueError("Missing required environment variable: MEMBER_API_BASE_URL")

    raw_timeout = os.getenv("MEMBER_API_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ValueError(f"MEMBER_API_TIMEOUT must be a number, got {raw_timeout!r}")

    with_credentials = _parse_bool(os.getenv("MEMBER_API_WITH_CREDENTIALS", "true"))

    return Settings(base_url=base_url, timeout=timeout, with_credentials=with_credentials)
