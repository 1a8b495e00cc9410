"""Configuration from environment."""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MAX_CODE_BYTES = 5 * 1024 * 1024


def _get_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, str(default)))
    except ValueError:
        return default


def get_host() -> str:
    return os.environ.get("HOST", "127.0.0.1").strip()


def get_port() -> int:
    return _get_int("PORT", 8921)


def get_max_code_bytes() -> int:
    """Largest script accepted by the API, in UTF-8 bytes."""
    value = _get_int("MAX_CODE_BYTES", DEFAULT_MAX_CODE_BYTES)
    return value if value > 0 else DEFAULT_MAX_CODE_BYTES


def get_strict_default() -> bool:
    """Strict mode used when a request does not say."""
    return os.environ.get("STRICT_DEFAULT", "").strip().lower() in ("1", "true", "yes", "on")


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
