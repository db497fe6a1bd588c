# src/calllogger/entry/form_state.py
"""
FormState: the in-progress call entry plus the known categories/projects.

A UI (the CLI, or any GUI) calls one method per discrete user action:

    add_category / toggle_category
    add_project / select_project
    set_field / set_now
    commit

Persistence goes through a ConfigSink (after additions and on every commit)
and a LogSink (on commit). Neither failure is ever raised to the caller.
"""

from __future__ import annotations

import logging
from typing import Optional

from calllogger.config.store import is_storable_item
from calllogger.entry.formatting import Clock, format_log_line, format_status, now_timestamp
from calllogger.entry.models import CallConfig, CommitResult, Entry
from calllogger.entry.sinks import ConfigSink, LogSink

logger = logging.getLogger(__name__)


EDITABLE_FIELDS = ("timestamp", "contact", "notes", "next_step")


class FormState:
    """
    Holds the entry being edited and routes side effects to the sinks.

    With `reset_on_commit=False` (the default) the entry keeps its contact,
    notes, next step and selections after a commit, so the next commit
    starts from the same text unless the user clears it.
    """

    def __init__(
        self,
        config: CallConfig,
        *,
        config_sink: ConfigSink,
        log_sink: LogSink,
        reset_on_commit: bool = False,
        clock: Optional[Clock] = None,
    ) -> None:
        self.config = config
        self.config_sink = config_sink
        self.log_sink = log_sink
        self.reset_on_commit = reset_on_commit
        self._clock = clock
        self.entry = self._fresh_entry()
        self._status = ""

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    @property
    def status(self) -> str:
        return self._status

    def add_category(self, name: str) -> bool:
        """
        Add a new category, select it, and persist. Returns False (and does
        nothing) if the name is blank, already known, or would not survive a
        save and reload (starts with "-" or contains a line break).
        """
        name = name.strip()
        if not name or name in self.config.categories:
            return False
        if not is_storable_item(name):
            logger.warning("rejected category %r: cannot be stored as a list item", name)
            return False
        self.config.categories.append(name)
        self.toggle_category(name, True)
        logger.info("added category %s", name)
        self._save_config()
        return True

    def toggle_category(self, name: str, selected: bool) -> None:
        if selected:
            if name not in self.entry.categories:
                self.entry.categories.append(name)
        else:
            self.entry.categories = [c for c in self.entry.categories if c != name]

    def add_project(self, name: str) -> bool:
        """
        Add a new project, make it the selected one, and persist.
        """
        name = name.strip()
        if not name or name in self.config.projects:
            return False
        if not is_storable_item(name):
            logger.warning("rejected project %r: cannot be stored as a list item", name)
            return False
        self.config.projects.append(name)
        self.select_project(name)
        logger.info("added project %s", name)
        self._save_config()
        return True

    def select_project(self, name: str) -> None:
        self.entry.project = name

    def set_field(self, field_name: str, value: str) -> None:
        if field_name not in EDITABLE_FIELDS:
            raise ValueError(
                f"Unknown entry field {field_name!r}; expected one of {', '.join(EDITABLE_FIELDS)}"
            )
        setattr(self.entry, field_name, value)

    def set_now(self) -> None:
        self.entry.timestamp = now_timestamp(self._clock)

    def commit(self) -> CommitResult:
        """
        Append the current entry as one line to the log file, then save the
        config. Always returns; the result says whether the append worked.
        """
        line = format_log_line(self.entry)
        log_file = self.config.log_file
        error: Optional[str] = None

        try:
            self.log_sink.append(log_file, line)
        except (OSError, ValueError) as exc:
            # ValueError covers text that cannot be encoded as UTF-8
            logger.exception("failed to append entry to %s", log_file)
            error = str(exc)

        ok = error is None
        self._status = format_status(line, ok=ok, error=error)
        self._save_config()

        if ok:
            logger.info("committed entry to %s", log_file)
            if self.reset_on_commit:
                self.reset_entry()

        return CommitResult(
            line=line,
            log_file=log_file,
            ok=ok,
            status=self._status,
            error=error,
        )

    def reset_entry(self) -> None:
        self.entry = self._fresh_entry()

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------
    def _fresh_entry(self) -> Entry:
        return Entry(timestamp=now_timestamp(self._clock))

    def _save_config(self) -> None:
        try:
            self.config_sink.save(self.config)
        except (OSError, ValueError):
            # in-memory config stays authoritative for this session
            logger.warning("failed to save configuration", exc_info=True)
