# tests/conftest.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest


FIXED_NOW = datetime(2026, 10, 19, 9, 15, 0, tzinfo=timezone(timedelta(hours=2)))
FIXED_NOW_TEXT = "2026-10-19T09:15:00+02:00"


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def calllogger_test_env(tmp_path, monkeypatch):
    """
    Per-test sandbox for the call logger.

    - sets CALLLOGGER_SETTINGS_FILE to a temp settings.yaml
    - patches calllogger.config.settings._get_data_dir to a temp dir
    so we never touch the real user's config document or log file.
    """
    data_dir = tmp_path / "data"
    data_dir.mkdir(parents=True, exist_ok=True)

    config_dir = tmp_path / "config"
    config_dir.mkdir(parents=True, exist_ok=True)

    config_doc = tmp_path / "notes" / "CallLoggerConfig.md"
    log_file = tmp_path / "notes" / "Recently Contacted.md"

    settings_yaml = config_dir / "settings.yaml"
    settings_yaml.write_text(
        f"""config_path: "{config_doc.as_posix()}"
defaults:
  categories:
    - sales
    - client
  projects:
    - "Test Project Alpha"
  log_file: "{log_file.as_posix()}"
commit:
  reset_on_commit: false
""",
        encoding="utf-8",
    )

    monkeypatch.setenv("CALLLOGGER_SETTINGS_FILE", str(settings_yaml))
    monkeypatch.delenv("CALLLOGGER_CONFIG_FILE", raising=False)

    import calllogger.config.settings as settings

    def _fake_get_data_dir() -> Path:
        return data_dir

    monkeypatch.setattr(settings, "_get_data_dir", _fake_get_data_dir)

    yield {
        "data_dir": data_dir,
        "settings_yaml": settings_yaml,
        "config_doc": config_doc,
        "log_file": log_file,
    }
