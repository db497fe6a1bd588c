# src/calllogger/entry/sinks.py
"""
The two side effects FormState needs, behind narrow interfaces.

FormState only ever talks to a ConfigSink and a LogSink; the file-backed
versions below are what the app wires up, and tests swap in fakes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from calllogger.config.store import save_config
from calllogger.entry.models import CallConfig

logger = logging.getLogger(__name__)


class ConfigSink(Protocol):
    """
    Persists the full configuration. May raise OSError.
    """

    def save(self, config: CallConfig) -> None:
        ...


class LogSink(Protocol):
    """
    Appends one line to a log file. May raise OSError.
    """

    def append(self, log_file: str, line: str) -> None:
        ...


class FileConfigSink:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def save(self, config: CallConfig) -> None:
        save_config(self.path, config)


class AppendLogSink:
    """
    Appends to the log file, creating it (and its parent dirs) if absent.
    """

    def append(self, log_file: str, line: str) -> None:
        target = Path(log_file).expanduser()
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("a", encoding="utf-8") as f:
            f.write(line + "\n")
        logger.debug("log: appended %d chars to %s", len(line), target)
