# chatificial/cli.py
from __future__ import annotations

import argparse
import os
import sys
from typing import List

from chatificial.config import EXCLUDED_FOLDER_NAMES_DEFAULT
from chatificial.core import template_engine
from chatificial.core.copy_action import CopyFileContentAction
from chatificial.core.delivery import Copied, DeliveryPolicy, NoFilesFound
from chatificial.core.errors import ClipboardError, ScratchBufferError
from chatificial.core.project_index import ProjectIndex
from chatificial.core.scratch_store import ScratchStore
from chatificial.core.settings_manager import (
    FIELD_FILE_TEMPLATE,
    FIELD_MAX_TOTAL_CHARS,
    SettingsManager,
)
from chatificial.utils.clipboard import SystemClipboard
from chatificial.utils.logger import enable_console_logging, logger
from chatificial.utils.notifications import ConsoleNotifier

EXIT_OK = 0
EXIT_NO_FILES = 1
EXIT_USAGE = 2
EXIT_SCRATCH_FAILED = 3
EXIT_CLIPBOARD_FAILED = 4


def _unescape(value: str) -> str:
    # let shells pass "\n" in --template
    return value.replace("\\n", "\n").replace("\\t", "\t")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="chatificial",
        description="Copy the content of files and folders to the clipboard, formatted per a template",
    )
    p.add_argument("--settings-file", help="Settings JSON file (default: per-user config dir)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log to stderr")
    sub = p.add_subparsers(dest="command", required=True)

    cp = sub.add_parser("copy", help="Copy selected files/folders")
    cp.add_argument("paths", nargs="+", help="Files and folders to copy")
    cp.add_argument("--project-root", default=None, help="Project root for relative paths and .gitignore (default: cwd)")
    cp.add_argument("--max-chars", type=int, help="Clipboard size limit for this run")
    cp.add_argument("--template", help="File template for this run (use \\n for newlines)")
    cp.add_argument("--exclude", action="append", default=[], help="Gitignore-style pattern to exclude (repeatable)")
    cp.add_argument("--no-gitignore", action="store_true", help="Do not honor .gitignore")
    cp.add_argument("--no-default-excludes", action="store_true", help="Descend into venv, node_modules, build, …")
    cp.add_argument("--no-open", action="store_true", help="Do not open the scratch file on overflow")
    cp.add_argument("--scratch-dir", help="Directory for the overflow scratch file")

    st = sub.add_parser("settings", help="Show or change stored settings")
    st_sub = st.add_subparsers(dest="settings_command", required=True)
    st_sub.add_parser("show", help="Print the current settings")
    st_set = st_sub.add_parser("set", help="Change settings")
    st_set.add_argument("--max-chars", type=int)
    st_set.add_argument("--template", help="Use \\n for newlines")
    st_reset = st_sub.add_parser("reset", help="Restore defaults (all settings unless one is named)")
    st_reset.add_argument("--max-chars", action="store_true")
    st_reset.add_argument("--template", action="store_true")
    return p


def _print_settings(manager: SettingsManager) -> None:
    s = manager.get()
    print(f"Settings file:   {manager.storage_path}")
    print(f"Max total chars: {s.max_total_chars}")
    print(f"Placeholders:    {', '.join(template_engine.ALL_PLACEHOLDERS)}")
    print("File template:")
    print(s.file_template)


def _run_settings(args, manager: SettingsManager) -> int:
    if args.settings_command == "show":
        _print_settings(manager)
        return EXIT_OK

    if args.settings_command == "set":
        changes = {}
        if args.max_chars is not None:
            changes[FIELD_MAX_TOTAL_CHARS] = args.max_chars
        if args.template is not None:
            changes[FIELD_FILE_TEMPLATE] = _unescape(args.template)
        if not changes:
            print("Nothing to set (use --max-chars and/or --template).", file=sys.stderr)
            return EXIT_USAGE
        manager.set(manager.get().copy(**changes))
    else:
        fields = []
        if args.max_chars:
            fields.append(FIELD_MAX_TOTAL_CHARS)
        if args.template:
            fields.append(FIELD_FILE_TEMPLATE)
        manager.reset(*fields)

    if not manager.save():
        print(f"Failed to save settings: {manager.last_error}", file=sys.stderr)
        return EXIT_USAGE
    _print_settings(manager)
    return EXIT_OK


def _run_copy(args, manager: SettingsManager) -> int:
    root = os.path.abspath(args.project_root or os.getcwd())
    if not os.path.isdir(root):
        print(f"Project root does not exist: {root}", file=sys.stderr)
        return EXIT_USAGE

    settings = manager.get()
    if args.max_chars is not None:
        settings.max_total_chars = args.max_chars
    if args.template is not None:
        settings.file_template = _unescape(args.template)
        if not template_engine.is_valid(settings.file_template):
            print("Template lacks {path} or {content}; using the default template.", file=sys.stderr)

    project = ProjectIndex(
        root,
        apply_gitignore=not args.no_gitignore,
        excluded_folder_names=() if args.no_default_excludes else EXCLUDED_FOLDER_NAMES_DEFAULT,
        excluded_patterns=args.exclude,
    )
    delivery = DeliveryPolicy(
        SystemClipboard(),
        ScratchStore(args.scratch_dir, open_in_viewer=not args.no_open),
        ConsoleNotifier(),
    )
    action = CopyFileContentAction(project, manager, delivery)
    try:
        outcome = action.perform(args.paths, settings)
    except ScratchBufferError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SCRATCH_FAILED
    except ClipboardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CLIPBOARD_FAILED
    finally:
        action.dispose()

    if outcome is None or isinstance(outcome, NoFilesFound):
        return EXIT_NO_FILES
    if isinstance(outcome, Copied):
        logger.info(f"Clipboard now holds {outcome.length} characters")
    return EXIT_OK


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        enable_console_logging()

    manager = SettingsManager(args.settings_file)
    manager.load()
    if manager.last_error:
        print(f"Warning: could not load settings ({manager.last_error}); using defaults.", file=sys.stderr)

    if args.command == "settings":
        return _run_settings(args, manager)
    return _run_copy(args, manager)


if __name__ == "__main__":
    raise SystemExit(main())
