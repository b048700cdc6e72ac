"""
Cadastrapp configuration — all environment variables in one place.

Read from environment at import time.
"""

from __future__ import annotations

import os


def _flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Kernel settings from environment variables."""

    # Logging
    LOG_LEVEL: str = os.environ.get("CADASTRAPP_LOG_LEVEL", "WARNING").upper()

    # Action validation in the store
    VALIDATE_ACTIONS: bool = _flag("CADASTRAPP_VALIDATE_ACTIONS", "true")
    STRICT_ACTIONS: bool = _flag("CADASTRAPP_STRICT_ACTIONS", "false")


# Singleton instance
settings = Settings()
