"""
Command line entry point for inspecting and managing idle counters.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from idle_counter import logger as app_logger
from idle_counter.actions import clear_idle_times, toggle_activity
from idle_counter.idle_timer import LAST_IDLE_START_TIME_KEY, OVERALL_IDLE_TIME_KEY
from idle_counter.preference_store import PreferenceStore
from idle_counter.project_name import ProjectNameError, preference_key, resolve_project_name_resolver
from idle_counter.settings import IdleCounterSettingsManager
from idle_counter.time_format import format_time

_LOGGER = app_logger.get_logger()


def _build_manager(args: argparse.Namespace) -> IdleCounterSettingsManager:
    store = PreferenceStore(settings_file=args.settings_file) if args.settings_file else PreferenceStore()
    resolver = resolve_project_name_resolver(project=args.project, data_path=args.data_path)
    return IdleCounterSettingsManager(store, resolver)


def cmd_show(args: argparse.Namespace) -> int:
    manager = _build_manager(args)
    settings = manager.read_settings()
    project = settings.project_name
    overall = manager.store.get_float(preference_key(project, OVERALL_IDLE_TIME_KEY))
    print(f"Project: {project}")
    print(f"Enabled: {'yes' if settings.active else 'no'}")
    print(f"Overall idle time: {format_time(overall)}")
    if manager.store.has_key(preference_key(project, LAST_IDLE_START_TIME_KEY)):
        print("A compile cycle is in progress.")
    return 0


def cmd_clear(args: argparse.Namespace) -> int:
    manager = _build_manager(args)
    project = manager.project_name
    clear_idle_times(manager.store, project)
    print(f"Cleared idle times for {project}.")
    return 0


def cmd_toggle(args: argparse.Namespace) -> int:
    manager = _build_manager(args)
    settings = manager.read_settings()
    active = toggle_activity(settings, manager)
    print(f"Idle counter for {settings.project_name} is now {'enabled' if active else 'disabled'}.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="idle-counter", description="Inspect and manage per-project idle times.")
    parser.add_argument("--project", help="Project name; overrides --data-path.")
    parser.add_argument("--data-path", help="Application data path; the project is its parent folder.")
    parser.add_argument("--settings-file", help="INI file to use instead of the per-user preference store.")
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print the overall idle time.")
    show.set_defaults(func=cmd_show)
    clear = sub.add_parser("clear", help="Delete the idle times of the project.")
    clear.set_defaults(func=cmd_clear)
    toggle = sub.add_parser("toggle", help="Enable or disable the idle counter.")
    toggle.set_defaults(func=cmd_toggle)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except ProjectNameError as exc:
        _LOGGER.debug("Project name resolution failed: {}", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
