# src/calllogger/entry/formatting.py
"""
Pure string helpers for entries: timestamps, the log line, status text.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

from calllogger.entry.models import Entry

Clock = Callable[[], datetime]

FIELD_SEPARATOR = " | "
LINE_PREFIX = "- "

# per-field glyphs, in log-line order
GLYPH_DATE = "📅"
GLYPH_CATEGORIES = "🏷️"
GLYPH_CONTACT = "👤"
GLYPH_PROJECT = "📁"
GLYPH_NOTES = "📝"
GLYPH_NEXT_STEP = "🔜"


def _local_now() -> datetime:
    return datetime.now().astimezone()


def now_timestamp(clock: Optional[Clock] = None) -> str:
    """
    Current local time as ISO-8601 with offset, e.g. 2026-10-19T09:15:00+02:00.
    """
    now = (clock or _local_now)()
    return now.isoformat(timespec="seconds")


def _link(text: str) -> str:
    # Obsidian-style wiki link
    return f"[[{text}]]"


def format_log_line(entry: Entry) -> str:
    """
    Build the single line appended to the log file for this entry.

        - 📅<ts> | 🏷️a,b | 👤[[contact]] | 📁[[project]] | 📝notes | 🔜next

    Nothing is escaped; a `|` or newline in user input goes in verbatim.
    """
    fields: List[str] = [
        f"{GLYPH_DATE}{entry.timestamp}",
        f"{GLYPH_CATEGORIES}{','.join(entry.categories)}",
        f"{GLYPH_CONTACT}{_link(entry.contact)}",
        f"{GLYPH_PROJECT}{_link(entry.project)}",
        f"{GLYPH_NOTES}{entry.notes}",
        f"{GLYPH_NEXT_STEP}{entry.next_step}",
    ]
    return LINE_PREFIX + FIELD_SEPARATOR.join(fields)


def format_status(line: str, ok: bool = True, error: Optional[str] = None) -> str:
    if ok:
        return f"✅ Saved: {line}"
    return f"❌ Failed to save: {error or 'unknown error'}"

