"""Runtime configuration.

Values come from the environment (a local .env file is honoured). Settings are
re-read on every ``load_settings()`` call so nothing is cached between
verification calls.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_ALGORITHM = "SHA-256"
_DEFAULT_MAX_PEM_CHARS = 16384
_DEFAULT_MAX_SIGNATURE_CHARS = 8192
_DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    default_algorithm: str = _DEFAULT_ALGORITHM
    max_pem_chars: int = _DEFAULT_MAX_PEM_CHARS
    max_signature_chars: int = _DEFAULT_MAX_SIGNATURE_CHARS
    log_level: str = _DEFAULT_LOG_LEVEL


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logging.getLogger("rsaverify").warning(f"ignoring non-integer {name}={raw!r}")
        return default
    if value <= 0:
        logging.getLogger("rsaverify").warning(f"ignoring non-positive {name}={raw!r}")
        return default
    return value


def _log_level_env() -> str:
    level = os.getenv("RSAVERIFY_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    # getLevelName maps known names to ints, unknown ones to "Level <name>"
    if not isinstance(logging.getLevelName(level), int):
        return _DEFAULT_LOG_LEVEL
    return level


def load_settings() -> Settings:
    return Settings(
        default_algorithm=os.getenv("RSAVERIFY_DEFAULT_ALGORITHM", _DEFAULT_ALGORITHM).strip(),
        max_pem_chars=_int_env("RSAVERIFY_MAX_PEM_CHARS", _DEFAULT_MAX_PEM_CHARS),
        max_signature_chars=_int_env("RSAVERIFY_MAX_SIGNATURE_CHARS", _DEFAULT_MAX_SIGNATURE_CHARS),
        log_level=_log_level_env(),
    )


__all__ = ["Settings", "load_settings"]
