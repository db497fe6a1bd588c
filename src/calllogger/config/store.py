# src/calllogger/config/store.py
"""
Read and write the call logger's configuration document.

The document is a small Markdown outline meant to be edited by hand:

    ## Categories
    - sales
    - client

    ## Projects
    - Project Alpha

    ## LogFile
    - ~/notes/Recently Contacted.md

Key design points
-----------------
- Parsing and rendering are pure string functions; only `read_config` and
  `save_config` do I/O.
- Reading never raises. A missing or unreadable document is the same as an
  empty one, and `load_config` fills the gaps from the deployment defaults.
- Saving always rewrites the whole document.
- Names that start with "-" or span lines can't round-trip through the
  outline; `is_storable_item` is how callers check before adding one.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from calllogger.entry.models import CallConfig

logger = logging.getLogger(__name__)


SECTION_CATEGORIES = "Categories"
SECTION_PROJECTS = "Projects"
SECTION_LOG_FILE = "LogFile"

# canonical order used when rendering
SECTIONS = [SECTION_CATEGORIES, SECTION_PROJECTS, SECTION_LOG_FILE]

_SECTIONS_BY_KEY: Dict[str, str] = {name.casefold(): name for name in SECTIONS}


# ---------------------------------------------------------------------------
# pure parse / render
# ---------------------------------------------------------------------------

def _match_section(header_line: str) -> Optional[str]:
    """
    Map a `## Something` line to one of SECTIONS, or None if unrecognized.
    """
    name = header_line.lstrip("#").strip()
    return _SECTIONS_BY_KEY.get(name.casefold())


def is_storable_item(name: str) -> bool:
    """
    True if `name` comes back unchanged after render + parse: already
    trimmed, no line breaks, and no leading "-" (list markers are stripped).
    """
    if not name or name != name.strip():
        return False
    # same line-boundary rules parse_config uses
    if len(name.splitlines()) != 1:
        return False
    return not name.startswith("-")


def parse_config(text: str) -> CallConfig:
    """
    Parse a configuration document into a CallConfig.

    Lines before the first header, or after a header we don't know, are
    ignored. Defaults are NOT applied here; see `load_config`.
    """
    config = CallConfig()
    section: Optional[str] = None

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line.startswith("##"):
            section = _match_section(line)
            continue
        if not line.startswith("-"):
            continue

        item = line.lstrip("-").strip()
        if section == SECTION_CATEGORIES:
            config.categories.append(item)
        elif section == SECTION_PROJECTS:
            config.projects.append(item)
        elif section == SECTION_LOG_FILE:
            if not config.log_file:
                config.log_file = item

    return config


def render_config(config: CallConfig) -> str:
    """
    Render a CallConfig back into the outline format.

    The log file is a single item and the document has no trailing newline.
    """
    lines: List[str] = [f"## {SECTION_CATEGORIES}"]
    lines.extend(f"- {cat}" for cat in config.categories)
    lines.append("")
    lines.append(f"## {SECTION_PROJECTS}")
    lines.extend(f"- {proj}" for proj in config.projects)
    lines.append("")
    lines.append(f"## {SECTION_LOG_FILE}")
    lines.append(f"- {config.log_file}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# file I/O
# ---------------------------------------------------------------------------

def read_config(path: Path | str) -> CallConfig:
    """
    Read the document at `path`. Returns an empty CallConfig if the file is
    missing or can't be decoded.
    """
    p = Path(path).expanduser()
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("config: could not read %s (%s), treating as empty", p, exc)
        return CallConfig()
    return parse_config(text)


def with_defaults(config: CallConfig, defaults: CallConfig) -> CallConfig:
    """
    Fill every empty part of `config` from `defaults`. Returns a new object.
    """
    return CallConfig(
        categories=list(config.categories or defaults.categories),
        projects=list(config.projects or defaults.projects),
        log_file=config.log_file or defaults.log_file,
    )


def load_config(path: Path | str, defaults: CallConfig) -> CallConfig:
    """
    Read the document and apply deployment defaults. Never raises.
    """
    loaded = with_defaults(read_config(path), defaults)
    logger.debug(
        "config: loaded %d categories, %d projects, log file %s",
        len(loaded.categories),
        len(loaded.projects),
        loaded.log_file,
    )
    return loaded


def save_config(path: Path | str, config: CallConfig) -> None:
    """
    Overwrite the document at `path` with the full config.

    Creates missing parent directories. Raises OSError on I/O failure and
    UnicodeEncodeError if an item can't be encoded; in the latter case the
    existing document is left untouched. Callers decide whether that matters.
    """
    p = Path(path).expanduser()
    payload = render_config(config).encode("utf-8")
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(payload)
    logger.debug("config: wrote %s", p)
