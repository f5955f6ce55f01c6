"""Configuration helpers for the Greek study tools runtime."""

from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_DUE_PREVIEW_SIZE = 10


@dataclass(frozen=True)
class AppSettings:
    """Strongly typed application settings loaded from environment variables."""

    app_name: str
    app_env: str
    log_level: str
    due_preview_size: int

    @classmethod
    def from_env(cls) -> AppSettings:
        """Construct settings directly from environment variables."""
        app_name = os.getenv("APP_NAME", "Koine Greek Tools")
        app_env = os.getenv("APP_ENV", "development")
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        try:
            due_preview_size = int(os.getenv("DUE_PREVIEW_SIZE", str(DEFAULT_DUE_PREVIEW_SIZE)))
        except ValueError as exc:  # pragma: no cover
            raise RuntimeError("DUE_PREVIEW_SIZE must be an integer.") from exc
        if due_preview_size < 0:
            raise RuntimeError("DUE_PREVIEW_SIZE must not be negative.")

        return cls(
            app_name=app_name,
            app_env=app_env,
            log_level=log_level,
            due_preview_size=due_preview_size,
        )
