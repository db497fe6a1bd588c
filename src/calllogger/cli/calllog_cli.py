"""
CLI front end for the call logger.

Examples:
    calllog log --category sales --project "Project Alpha" \
        --contact "Jane Doe" --notes "pricing call" --next-step "send quote"

    calllog add-category finance
    calllog show
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from calllogger.app import build_form_state
from calllogger.config.settings import Settings, load_settings
from calllogger.config.store import is_storable_item, render_config
from calllogger.entry.form_state import FormState

logger = logging.getLogger(__name__)


def _resolve_settings(args: argparse.Namespace) -> Settings:
    settings = load_settings()
    if args.config:
        settings.config_path = Path(args.config).expanduser()
    return settings


def _build_form(args: argparse.Namespace) -> FormState:
    return build_form_state(_resolve_settings(args))


def _unknown(values: List[str], known: List[str]) -> List[str]:
    return [v for v in values if v not in known]


# ---------------------------------------------------------------------------
# subcommands
# ---------------------------------------------------------------------------

def cmd_log(args: argparse.Namespace) -> int:
    form = _build_form(args)

    new_categories = [name.strip() for name in args.new_category if name.strip()]
    new_project = (args.new_project or "").strip()
    candidates = new_categories + ([new_project] if new_project else [])
    bad = [name for name in candidates if not is_storable_item(name)]
    if bad:
        print(
            f"Cannot store names starting with '-' or spanning lines: {', '.join(map(repr, bad))}",
            file=sys.stderr,
        )
        return 2

    missing = _unknown(args.category, form.config.categories + new_categories)
    if missing:
        print(
            f"Unknown categories: {', '.join(missing)} (use --new-category to add)",
            file=sys.stderr,
        )
        return 2
    if args.project and args.project not in form.config.projects:
        print(f"Unknown project: {args.project} (use --new-project to add)", file=sys.stderr)
        return 2

    for name in new_categories:
        # an existing name is still selected
        if not form.add_category(name):
            form.toggle_category(name, True)
    for name in args.category:
        form.toggle_category(name, True)

    if new_project:
        if not form.add_project(new_project):
            form.select_project(new_project)
    elif args.project:
        form.select_project(args.project)

    form.set_field("contact", args.contact)
    form.set_field("notes", args.notes)
    form.set_field("next_step", args.next_step)
    if args.date:
        form.set_field("timestamp", args.date)
    else:
        form.set_now()

    result = form.commit()
    print(result.status)
    return 0 if result.ok else 1


def cmd_add_category(args: argparse.Namespace) -> int:
    form = _build_form(args)
    if form.add_category(args.name):
        print(f"Added category: {args.name.strip()}")
    else:
        print(f"Category not added (already present, empty, or unstorable): {args.name!r}")
    return 0


def cmd_add_project(args: argparse.Namespace) -> int:
    form = _build_form(args)
    if form.add_project(args.name):
        print(f"Added project: {args.name.strip()}")
    else:
        print(f"Project not added (already present, empty, or unstorable): {args.name!r}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    settings = _resolve_settings(args)
    form = build_form_state(settings)
    print(f"# {settings.config_path}")
    print(render_config(form.config))
    return 0


# ---------------------------------------------------------------------------
# parser / entrypoint
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Record calls into a plain-text log")
    parser.add_argument("--config", help="Path to the configuration document (CallLoggerConfig.md)")
    parser.add_argument("--log-level", default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    log_cmd = sub.add_parser("log", help="Commit one call entry to the log file")
    log_cmd.add_argument("--date", help="Timestamp to record (default: now)")
    log_cmd.add_argument(
        "--category",
        action="append",
        default=[],
        help="Select a known category (repeatable)",
    )
    log_cmd.add_argument(
        "--new-category",
        action="append",
        default=[],
        help="Add and select a category (repeatable)",
    )
    project_group = log_cmd.add_mutually_exclusive_group()
    project_group.add_argument("--project", help="Select a known project")
    project_group.add_argument("--new-project", help="Add and select a project")
    log_cmd.add_argument("--contact", default="", help="Who the call was with")
    log_cmd.add_argument("--notes", default="", help="What was discussed")
    log_cmd.add_argument("--next-step", default="", help="Follow-up action")
    log_cmd.set_defaults(func=cmd_log)

    add_cat = sub.add_parser("add-category", help="Add a category to the configuration")
    add_cat.add_argument("name")
    add_cat.set_defaults(func=cmd_add_category)

    add_proj = sub.add_parser("add-project", help="Add a project to the configuration")
    add_proj.add_argument("name")
    add_proj.set_defaults(func=cmd_add_project)

    show_cmd = sub.add_parser("show", help="Print the current configuration")
    show_cmd.set_defaults(func=cmd_show)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    # .env may set CALLLOGGER_SETTINGS_FILE / CALLLOGGER_CONFIG_FILE
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
