# src/calllogger/entry/models.py
"""
Plain data types shared by the config store and the form state.

Nothing in here touches the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CallConfig:
    """
    The contents of the configuration document: known categories, known
    projects, and where committed entries get appended.
    """
    categories: List[str] = field(default_factory=list)
    projects: List[str] = field(default_factory=list)
    log_file: str = ""


@dataclass
class Entry:
    """
    The call being edited right now.

    `categories` keeps selection order so the log line reads the way the
    user picked them.
    """
    timestamp: str
    categories: List[str] = field(default_factory=list)
    project: str = ""
    contact: str = ""
    notes: str = ""
    next_step: str = ""


@dataclass
class CommitResult:
    """
    Outcome of a single commit, handed back to whatever UI called us.
    """
    line: str
    log_file: str
    ok: bool
    status: str
    error: Optional[str] = None
