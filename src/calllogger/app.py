# src/calllogger/app.py
"""
Startup wiring: settings -> config document -> FormState.
"""

from __future__ import annotations

import logging
from typing import Optional

from calllogger.config.settings import Settings, load_settings
from calllogger.config.store import load_config
from calllogger.entry.form_state import FormState
from calllogger.entry.formatting import Clock
from calllogger.entry.sinks import AppendLogSink, FileConfigSink

logger = logging.getLogger(__name__)


def build_form_state(
    settings: Optional[Settings] = None,
    *,
    clock: Optional[Clock] = None,
) -> FormState:
    """
    Load the configuration document (with defaults) and return a FormState
    wired to the real file sinks.
    """
    settings = settings or load_settings()
    config = load_config(settings.config_path, settings.defaults)
    logger.info("using configuration at %s", settings.config_path)
    return FormState(
        config,
        config_sink=FileConfigSink(settings.config_path),
        log_sink=AppendLogSink(),
        reset_on_commit=settings.reset_on_commit,
        clock=clock,
    )
