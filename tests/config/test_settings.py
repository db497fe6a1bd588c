# tests/config/test_settings.py
from __future__ import annotations

from pathlib import Path

import pytest

import calllogger.config.settings as settings_mod


def test_load_settings_from_env_file(calllogger_test_env):
    settings = settings_mod.load_settings()

    assert settings.config_path == calllogger_test_env["config_doc"]
    assert settings.defaults.categories == ["sales", "client"]
    assert settings.defaults.projects == ["Test Project Alpha"]
    assert settings.defaults.log_file == str(calllogger_test_env["log_file"])
    assert settings.reset_on_commit is False


def test_config_env_var_overrides_config_path(calllogger_test_env, monkeypatch, tmp_path):
    override = tmp_path / "elsewhere" / "cfg.md"
    monkeypatch.setenv("CALLLOGGER_CONFIG_FILE", str(override))

    settings = settings_mod.load_settings()

    assert settings.config_path == override


def test_missing_settings_file_raises(monkeypatch, tmp_path):
    monkeypatch.setenv("CALLLOGGER_SETTINGS_FILE", str(tmp_path / "nope.yaml"))

    with pytest.raises(FileNotFoundError):
        settings_mod.load_settings()


def test_packaged_settings_fall_back_to_data_dir(monkeypatch, tmp_path):
    monkeypatch.delenv("CALLLOGGER_SETTINGS_FILE", raising=False)
    monkeypatch.delenv("CALLLOGGER_CONFIG_FILE", raising=False)
    monkeypatch.setattr(settings_mod, "_get_data_dir", lambda: tmp_path)

    settings = settings_mod.load_settings()

    assert settings.config_path == tmp_path / "CallLoggerConfig.md"
    assert settings.defaults.log_file == str(tmp_path / "Recently Contacted.md")
    assert settings.defaults.categories == ["sales", "client", "marketing", "support"]
    assert settings.defaults.projects == ["Project Alpha", "Project Beta", "Project Gamma"]
    assert settings.reset_on_commit is False


def test_settings_from_dict_fills_missing_keys(monkeypatch, tmp_path):
    monkeypatch.delenv("CALLLOGGER_CONFIG_FILE", raising=False)
    monkeypatch.setattr(settings_mod, "_get_data_dir", lambda: tmp_path)

    settings = settings_mod.settings_from_dict(
        {"defaults": {"categories": ["  ops  ", ""]}, "commit": {"reset_on_commit": True}}
    )

    assert settings.defaults.categories == ["ops"]
    assert settings.defaults.projects == settings_mod.BUILTIN_PROJECTS
    assert settings.reset_on_commit is True


def test_settings_expand_user(monkeypatch, tmp_path):
    monkeypatch.delenv("CALLLOGGER_CONFIG_FILE", raising=False)
    monkeypatch.setattr(settings_mod, "_get_data_dir", lambda: tmp_path)

    settings = settings_mod.settings_from_dict({"config_path": "~/calls/cfg.md"})

    assert settings.config_path == Path("~/calls/cfg.md").expanduser()


def test_scalar_list_values_are_single_items(monkeypatch, tmp_path):
    monkeypatch.delenv("CALLLOGGER_CONFIG_FILE", raising=False)
    monkeypatch.setattr(settings_mod, "_get_data_dir", lambda: tmp_path)

    settings = settings_mod.settings_from_dict(
        {"defaults": {"categories": "sales", "projects": "Project Alpha"}}
    )

    assert settings.defaults.categories == ["sales"]
    assert settings.defaults.projects == ["Project Alpha"]


def test_wrong_type_list_values_fall_back(monkeypatch, tmp_path):
    monkeypatch.delenv("CALLLOGGER_CONFIG_FILE", raising=False)
    monkeypatch.setattr(settings_mod, "_get_data_dir", lambda: tmp_path)

    settings = settings_mod.settings_from_dict({"defaults": {"categories": {"a": 1}, "projects": 42}})

    assert settings.defaults.categories == settings_mod.BUILTIN_CATEGORIES
    assert settings.defaults.projects == settings_mod.BUILTIN_PROJECTS


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, True),
        (False, False),
        ("false", False),
        ("False", False),
        ("no", False),
        ("true", True),
        ("yes", True),
        ("maybe", False),
        (3, False),
        (None, False),
    ],
)
def test_reset_on_commit_parsing(monkeypatch, tmp_path, value, expected):
    monkeypatch.delenv("CALLLOGGER_CONFIG_FILE", raising=False)
    monkeypatch.setattr(settings_mod, "_get_data_dir", lambda: tmp_path)

    settings = settings_mod.settings_from_dict({"commit": {"reset_on_commit": value}})

    assert settings.reset_on_commit is expected


def test_non_mapping_sections_are_ignored(monkeypatch, tmp_path):
    monkeypatch.delenv("CALLLOGGER_CONFIG_FILE", raising=False)
    monkeypatch.setattr(settings_mod, "_get_data_dir", lambda: tmp_path)

    settings = settings_mod.settings_from_dict({"defaults": ["sales"], "commit": "yes"})

    assert settings.defaults.categories == settings_mod.BUILTIN_CATEGORIES
    assert settings.defaults.log_file == str(tmp_path / "Recently Contacted.md")
    assert settings.reset_on_commit is False


def test_settings_file_with_list_top_level_uses_defaults(monkeypatch, tmp_path):
    settings_yaml = tmp_path / "settings.yaml"
    settings_yaml.write_text("- sales\n- client\n", encoding="utf-8")
    monkeypatch.setenv("CALLLOGGER_SETTINGS_FILE", str(settings_yaml))
    monkeypatch.delenv("CALLLOGGER_CONFIG_FILE", raising=False)
    monkeypatch.setattr(settings_mod, "_get_data_dir", lambda: tmp_path)

    settings = settings_mod.load_settings()

    assert settings.config_path == tmp_path / "CallLoggerConfig.md"
    assert settings.defaults.categories == settings_mod.BUILTIN_CATEGORIES
