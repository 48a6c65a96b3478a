# core/config.py

"""
Program settings read from environment variables.

`settings` is built once at import time. Environment variables must therefore be set before
this module is imported; tests that need different values call `Settings.from_env()` directly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    data_file: str = "students.csv"
    log_level: str = "INFO"
    log_file: str | None = None
    wait_for_exit: bool = True

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            data_file=os.getenv("ROSTER_DATA_FILE", "students.csv"),
            log_level=os.getenv("ROSTER_LOG_LEVEL", "INFO"),
            log_file=os.getenv("ROSTER_LOG_FILE") or None,
            wait_for_exit=_env_flag("ROSTER_WAIT_FOR_EXIT", "true"),
        )


settings = Settings.from_env()
