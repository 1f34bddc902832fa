from __future__ import annotations

from pathlib import Path

import pytest

from shared_scheduler.config import get_settings
from shared_scheduler.config.settings import DEFAULT_CATEGORY_ID, DEFAULT_ROW_MIN_HEIGHT

ENV_VARS = (
    "SCHEDULER_DOCUMENT_PATH",
    "SCHEDULER_DEFAULT_CATEGORY",
    "SCHEDULER_ROW_MIN_HEIGHT",
    "SCHEDULER_APP_NAME",
    "SCHEDULER_LOG_LEVEL",
    "SCHEDULER_LOG_DIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = get_settings()

    assert settings.storage.default_category == DEFAULT_CATEGORY_ID
    assert settings.ui.row_min_height == DEFAULT_ROW_MIN_HEIGHT
    assert settings.storage.document_path.name == "schedule.json"
    assert settings.logging.level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SCHEDULER_DOCUMENT_PATH", str(tmp_path / "team.json"))
    monkeypatch.setenv("SCHEDULER_DEFAULT_CATEGORY", "cat_work")
    monkeypatch.setenv("SCHEDULER_ROW_MIN_HEIGHT", "90")
    monkeypatch.setenv("SCHEDULER_LOG_LEVEL", "debug")
    monkeypatch.setenv("SCHEDULER_LOG_DIR", str(tmp_path / "logs"))

    settings = get_settings()

    assert settings.storage.document_path == Path(tmp_path / "team.json")
    assert settings.storage.default_category == "cat_work"
    assert settings.ui.row_min_height == 90
    assert settings.logging.level == "DEBUG"
    assert settings.logging.directory == tmp_path / "logs"


@pytest.mark.parametrize("raw", ["tall", "0", "-5"])
def test_invalid_row_height_falls_back(monkeypatch, raw):
    monkeypatch.setenv("SCHEDULER_ROW_MIN_HEIGHT", raw)

    assert get_settings().ui.row_min_height == DEFAULT_ROW_MIN_HEIGHT


def test_settings_are_cached():
    assert get_settings() is get_settings()
