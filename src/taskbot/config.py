# src/taskbot/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
- Bad values fall back to defaults instead of aborting startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOT"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Persistence policy ----
    autosave: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path
    log_file: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskbot").strip() or "taskbot"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        autosave = _env_bool(_k("AUTOSAVE"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskbot"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.jsonl")
        log_file = _env_path(_k("LOG_FILE"), data_dir / "taskbot.log")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            autosave=autosave,
            data_dir=data_dir,
            tasks_path=tasks_path,
            log_file=log_file,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
