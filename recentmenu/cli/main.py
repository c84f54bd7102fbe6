"""
CLI entry point. Usage: recentmenu {list,add,remove,clear} [paths]
Works on the same preferences file as the desktop menu.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from recentmenu.config import load_config, logging_settings, recent_settings
from recentmenu.core.commands import CommandService
from recentmenu.core.exceptions import RecentMenuError
from recentmenu.core.logger import get_logger, setup_logging
from recentmenu.core.prefs import JsonPrefs
from recentmenu.core.recent_files import RecentCommandFactory, RecentFileService

logger = get_logger("cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="recentmenu", description="Manage the Open Recent file list")
    parser.add_argument("--prefs", type=str, default=None,
                        help="Preferences JSON file (default: from config, RECENTMENU_PREFS_DIR or ~/.recentmenu)")
    parser.add_argument("--config", "-c", type=str, default=None,
                        help="Path to YAML config (default: recentmenu/config/default.yaml + RECENTMENU_CONFIG)")
    parser.add_argument("--log-level", type=str, default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level (default: INFO or RECENTMENU_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Print recent files, most recent first")
    list_parser.add_argument("--all", action="store_true", help="Print the whole history, not only the shown entries")
    list_parser.add_argument("--labels", action="store_true", help="Print menu labels next to paths")

    add_parser = subparsers.add_parser("add", help="Mark files as most recently used")
    add_parser.add_argument("paths", nargs="+", type=str)

    remove_parser = subparsers.add_parser("remove", help="Remove a file from the list (exit 1 if not listed)")
    remove_parser.add_argument("path", type=str)

    subparsers.add_parser("clear", help="Remove all recent files")
    return parser


def build_service(settings: dict, prefs_file: Optional[str] = None) -> RecentFileService:
    """RecentFileService over the JSON preferences file named by prefs_file or settings."""
    path = prefs_file or settings.get("prefs_file")
    prefs = JsonPrefs(Path(path).expanduser() if path else None)
    commands = CommandService()
    factory = RecentCommandFactory(
        commands,
        max_display_length=settings["max_display_length"],
        menu_label=settings["menu_label"],
    )
    return RecentFileService(
        prefs,
        commands,
        factory=factory,
        key=settings["prefs_key"],
        max_files_shown=settings["max_files_shown"],
    )


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(override_path=args.config)
        log_settings = logging_settings(config)
    except RecentMenuError as e:
        print("ERROR: %s" % e, file=sys.stderr)
        return 2

    # --log-level wins over the config file; both fall back to RECENTMENU_LOG_LEVEL
    level_name = args.log_level or log_settings["level"]
    level = getattr(logging, level_name) if level_name else None
    setup_logging(level=level, log_dir=log_settings["log_dir"])

    try:
        settings = recent_settings(config)
        service = build_service(settings, args.prefs)
    except RecentMenuError as e:
        logger.error("Cannot open recent files: %s", e)
        print("ERROR: %s" % e, file=sys.stderr)
        return 2

    try:
        if args.command == "list":
            paths = service.recent_files() if args.all else service.shown()
            for path in reversed(paths):
                if args.labels:
                    print("%s\t%s" % (service.get_command(path).label, path))
                else:
                    print(path)
        elif args.command == "add":
            for path in args.paths:
                service.add(path)
        elif args.command == "remove":
            if not service.remove(args.path):
                print("Not in recent files: %s" % args.path, file=sys.stderr)
                return 1
        elif args.command == "clear":
            service.clear()
    except RecentMenuError as e:
        logger.error("%s failed: %s", args.command, e)
        print("ERROR: %s" % e, file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
