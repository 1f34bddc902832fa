from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_data_dir

load_dotenv()

APP_NAME = "Shared Scheduler"
APP_AUTHOR = "SharedScheduler"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))

DEFAULT_CATEGORY_ID = "cat_zen"
DEFAULT_ROW_MIN_HEIGHT = 120


@dataclass(frozen=True)
class StorageSettings:
    document_path: Path
    default_category: str


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    row_min_height: int


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class AppSettings:
    storage: StorageSettings
    ui: UiSettings
    logging: LoggingSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _path_from_env(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    return Path(raw).expanduser() if raw else default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    storage = StorageSettings(
        document_path=_path_from_env("SCHEDULER_DOCUMENT_PATH", DATA_DIR / "schedule.json"),
        default_category=os.getenv("SCHEDULER_DEFAULT_CATEGORY", DEFAULT_CATEGORY_ID),
    )

    ui = UiSettings(
        app_name=os.getenv("SCHEDULER_APP_NAME", APP_NAME),
        row_min_height=_int_from_env("SCHEDULER_ROW_MIN_HEIGHT", DEFAULT_ROW_MIN_HEIGHT),
    )

    logging_settings = LoggingSettings(
        level=os.getenv("SCHEDULER_LOG_LEVEL", "INFO").upper(),
        directory=_path_from_env("SCHEDULER_LOG_DIR", DATA_DIR / "logs"),
    )

    return AppSettings(storage=storage, ui=ui, logging=logging_settings)
