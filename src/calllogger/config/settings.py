# src/calllogger/config/settings.py
"""
Deployment settings for the call logger.

This module knows how to find and load `settings.yaml`, which lives next to
this file in `src/calllogger/config/` unless CALLLOGGER_SETTINGS_FILE points
somewhere else. It turns that YAML into a `Settings` object so nothing
downstream has to hard-code paths or default lists.

Expected shape:
{
    "config_path": "~/notes/CallLoggerConfig.md",   # optional
    "defaults": {
        "categories": ["sales", "client"],
        "projects": ["Project Alpha"],
        "log_file": "~/notes/Recently Contacted.md"  # optional
    },
    "commit": {
        "reset_on_commit": false
    }
}
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

import yaml
from platformdirs import user_data_dir

from calllogger.entry.models import CallConfig

logger = logging.getLogger(__name__)


APP_NAME = "calllogger"
SETTINGS_ENV_VAR = "CALLLOGGER_SETTINGS_FILE"
CONFIG_ENV_VAR = "CALLLOGGER_CONFIG_FILE"

CONFIG_FILENAME = "CallLoggerConfig.md"
LOG_FILENAME = "Recently Contacted.md"

# used when settings.yaml leaves a list out entirely
BUILTIN_CATEGORIES = ["sales", "client", "marketing", "support"]
BUILTIN_PROJECTS = ["Project Alpha", "Project Beta", "Project Gamma"]


@dataclass
class Settings:
    config_path: Path
    defaults: CallConfig
    reset_on_commit: bool = False


# ---------------------------------------------------------------------------
# path resolution utilities
# ---------------------------------------------------------------------------

def _package_config_dir() -> Path:
    """
    Return the path to the config directory inside the package.
    We assume this file lives at: src/calllogger/config/settings.py
    """
    return Path(__file__).resolve().parent


def _get_data_dir() -> Path:
    """
    Return the platform-specific user data directory for the app.

    macOS:   ~/Library/Application Support/calllogger/
    Linux:   ~/.local/share/calllogger/
    Windows: C:\\Users\\<user>\\AppData\\Local\\calllogger\\
    """
    return Path(user_data_dir(appname=APP_NAME))


def _resolve_settings_path() -> Path:
    """
    1. CALLLOGGER_SETTINGS_FILE if set.
    2. Otherwise the packaged settings.yaml.
    """
    env_value = os.getenv(SETTINGS_ENV_VAR)
    if env_value:
        return Path(env_value).expanduser().resolve()
    return _package_config_dir() / "settings.yaml"


def _load_yaml(path: Path) -> Dict[str, Any]:
    """
    Parse the settings file into a mapping.

    A missing file is an error because someone explicitly pointed us at it
    (or the package install is broken). An empty file, or one whose top
    level isn't a mapping, yields {} so every key falls back to its default.
    """
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("settings: %s is not a mapping, ignoring its contents", path)
        return {}
    return data


def _as_mapping(value: Any, key: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.warning("settings: expected a mapping for %r, got %s; ignoring", key, type(value).__name__)
        return {}
    return value


def _as_path(value: Any, fallback: Path) -> Path:
    if value:
        return Path(str(value)).expanduser()
    return fallback


def _as_str_list(value: Any, fallback: List[str], key: str) -> List[str]:
    if not value:
        return list(fallback)
    if isinstance(value, str):
        # `categories: sales` means one item, not five letters
        value = [value]
    elif not isinstance(value, list):
        logger.warning("settings: expected a list for %r, got %s; using defaults", key, type(value).__name__)
        return list(fallback)
    items = [str(v).strip() for v in value if v is not None and str(v).strip()]
    return items or list(fallback)


def _as_bool(value: Any, key: str, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("true", "yes", "on", "1"):
            return True
        if text in ("false", "no", "off", "0", ""):
            return False
    logger.warning("settings: could not read %r=%r as a boolean; using %s", key, value, default)
    return default


# ---------------------------------------------------------------------------
# public loaders
# ---------------------------------------------------------------------------

def load_settings_yaml() -> Dict[str, Any]:
    """
    Load `settings.yaml`, using CALLLOGGER_SETTINGS_FILE if set.
    """
    return _load_yaml(_resolve_settings_path())


def settings_from_dict(raw: Dict[str, Any]) -> Settings:
    """
    Build Settings from an already-parsed mapping, filling anything missing.

    Values of the wrong type are logged and replaced by their defaults.
    CALLLOGGER_CONFIG_FILE wins over `config_path`.
    """
    data_dir = _get_data_dir()
    defaults_raw = _as_mapping(raw.get("defaults"), "defaults")
    commit_raw = _as_mapping(raw.get("commit"), "commit")

    config_value = os.getenv(CONFIG_ENV_VAR) or raw.get("config_path")
    config_path = _as_path(config_value, data_dir / CONFIG_FILENAME)
    log_file = _as_path(defaults_raw.get("log_file"), data_dir / LOG_FILENAME)

    return Settings(
        config_path=config_path,
        defaults=CallConfig(
            categories=_as_str_list(defaults_raw.get("categories"), BUILTIN_CATEGORIES, "defaults.categories"),
            projects=_as_str_list(defaults_raw.get("projects"), BUILTIN_PROJECTS, "defaults.projects"),
            log_file=str(log_file),
        ),
        reset_on_commit=_as_bool(commit_raw.get("reset_on_commit"), "commit.reset_on_commit"),
    )


def load_settings() -> Settings:
    """
    Return the Settings for this run.
    """
    settings = settings_from_dict(load_settings_yaml())
    logger.debug(
        "settings: config_path=%s default log_file=%s reset_on_commit=%s",
        settings.config_path,
        settings.defaults.log_file,
        settings.reset_on_commit,
    )
    return settings
