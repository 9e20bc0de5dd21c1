"""Command-line interface for usage-tracker.

This module provides the main entry point and argument parsing for the
usage-tracker CLI tool. Each invocation loads the registry, runs exactly
one command against it and saves it back only if it changed.
"""

import argparse
import logging
import math
import platform
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from usage_tracker._version import __version__
from usage_tracker.config.settings import (
    DEFAULT_CONFIG,
    convert_config_value,
    get_config_path,
    load_config,
    log_level_for,
    reset_config,
    save_config,
)
from usage_tracker.crash import install_crash_handler
from usage_tracker.display.colors import Colors, disable_colors
from usage_tracker.display.output import (
    display_estimate,
    display_names,
    display_usages,
    display_verbose_listing,
    print_error,
    print_info,
    print_json,
    print_success,
)
from usage_tracker.errors import (
    ExitCode,
    StorageIOError,
    UsageTrackerError,
    format_error_for_user,
    get_exit_code,
)
from usage_tracker.models.registry import UsageRegistry
from usage_tracker.storage.store import get_store_path, load_registry, save_if_changed
from usage_tracker.utils.platform import DATA_DIR_ENV, get_data_dir
from usage_tracker.utils.time import (
    WINDOW_UNITS,
    format_timestamp,
    parse_cutoff,
    to_rfc3339,
    window_from_unit,
)

logger = logging.getLogger(__name__)


def _name_arg(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("name must not be empty")
    return value


def _length_arg(value: str) -> float:
    try:
        length = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'") from None
    if not math.isfinite(length):
        raise argparse.ArgumentTypeError(f"window length must be finite, got '{value}'")
    return length


def _cutoff_arg(value: str):
    try:
        return parse_cutoff(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def version_string() -> str:
    """Version and system information."""
    return (
        f"usage-tracker {__version__} "
        f"(Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}, "
        f"{platform.system()} {platform.machine()})"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="usage-tracker",
        description="Keep track of how often you use things",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  usage-tracker add kettle           Start tracking "kettle"
  usage-tracker use kettle           Record a usage now
  usage-tracker use lamp --add       Record a usage, tracking "lamp" if needed
  usage-tracker list --verbose       List everything with all usages
  usage-tracker show kettle          Show the usages of "kettle"
  usage-tracker prune kettle -b 2024-01-01   Forget usages before a date
  usage-tracker usage kettle 1 week  Expected usages per week
  usage-tracker --json list          Output JSON instead
  usage-tracker config set utc true  Always show times in UTC

Data:
  Stored in the application data directory, or in ${DATA_DIR_ENV}
  or --data-dir when set. The previous data file is kept as a .bak
  backup unless --no-backup is given.
""",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=version_string(),
        help="Show version and system information",
    )
    parser.add_argument(
        "--json", "-j", action="store_true", help="Output JSON instead of formatted text"
    )
    parser.add_argument(
        "--utc", action="store_true", help="Show times in UTC instead of the local timezone"
    )
    parser.add_argument(
        "--no-backup",
        action="store_true",
        help="If a change is made, delete the old data file instead of keeping a backup",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--data-dir",
        metavar="PATH",
        help=f"Directory holding the data files (default: ${DATA_DIR_ENV} or app data dir)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Log debug output and show error details"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    add = subparsers.add_parser("add", help="Add a new object to keep track of")
    add.add_argument("name", type=_name_arg, help="Name of the new object")

    use = subparsers.add_parser("use", help="Record a usage of an object")
    use.add_argument("name", type=_name_arg, help="Name of the object")
    use.add_argument(
        "--add",
        "-a",
        dest="add_if_missing",
        action="store_true",
        help="Start tracking the object if it isn't tracked yet",
    )

    remove = subparsers.add_parser("remove", help="Stop tracking an object")
    remove.add_argument("name", type=_name_arg, help="Name of the object to remove")

    subparsers.add_parser("clear", help="Remove all tracked objects")

    list_ = subparsers.add_parser("list", help="List all tracked objects")
    list_.add_argument(
        "--verbose", "-v", action="store_true", help="Also list every usage of each object"
    )

    show = subparsers.add_parser(
        "show", aliases=["usages"], help="List all usages of an object"
    )
    show.add_argument("name", type=_name_arg, help="Name of the object")

    prune = subparsers.add_parser("prune", help="Remove usages from an object")
    prune.add_argument("name", type=_name_arg, help="Name of the object to prune")
    prune.add_argument(
        "--before",
        "-b",
        type=_cutoff_arg,
        metavar="DATE",
        help=(
            "Only remove usages before DATE: YYYY-MM-DD or DD.MM.YYYY (local midnight), "
            "YYYY-MM-DD HH:MM[:SS] (local time) or an ISO 8601 timestamp with offset. "
            "Without it all usages are removed."
        ),
    )

    usage = subparsers.add_parser(
        "usage", help="Estimate how often an object is used within a time window"
    )
    usage.add_argument("name", type=_name_arg, help="Name of the object")
    usage.add_argument("length", type=_length_arg, help="Length of the window (may be negative)")
    usage.add_argument(
        "unit",
        type=str.lower,
        choices=list(WINDOW_UNITS),
        help="Unit of the window length",
    )

    config = subparsers.add_parser("config", help="Show or change configuration")
    config.add_argument(
        "config_args",
        nargs="*",
        metavar="ARG",
        help="show (default), reset, or set KEY VALUE",
    )

    return parser


def setup_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _report(args: argparse.Namespace, message: str, **data) -> None:
    """Report the outcome of a changing command as text or JSON."""
    if args.json:
        print_json(data)
    else:
        print_success(message)


def cmd_add(args: argparse.Namespace, registry: UsageRegistry) -> int:
    registry.add(args.name)
    _report(args, f'Now tracking "{args.name}".', name=args.name, added=True)
    return ExitCode.SUCCESS


def cmd_use(args: argparse.Namespace, registry: UsageRegistry) -> int:
    used_at = registry.record_use(args.name, add_if_missing=args.add_if_missing)
    _report(
        args,
        f'Used "{args.name}" at {format_timestamp(used_at, utc=args.utc)}.',
        name=args.name,
        used_at=to_rfc3339(used_at),
    )
    return ExitCode.SUCCESS


def cmd_remove(args: argparse.Namespace, registry: UsageRegistry) -> int:
    if args.name not in registry:
        if args.json:
            print_json({"name": args.name, "removed": False})
        else:
            print_info(f'No object named "{args.name}" exists. Ignoring command.')
        return ExitCode.SUCCESS

    registry.remove(args.name)
    _report(args, f'Removed "{args.name}".', name=args.name, removed=True)
    return ExitCode.SUCCESS


def cmd_clear(args: argparse.Namespace, registry: UsageRegistry) -> int:
    count = len(registry)
    registry.clear()
    _report(args, f"Removed {count} tracked object(s).", removed=count)
    return ExitCode.SUCCESS


def cmd_list(args: argparse.Namespace, registry: UsageRegistry) -> int:
    if args.verbose:
        display_verbose_listing(registry.list_verbose(), utc=args.utc, as_json=args.json)
    else:
        display_names(registry.list(), as_json=args.json)
    return ExitCode.SUCCESS


def cmd_show(args: argparse.Namespace, registry: UsageRegistry) -> int:
    display_usages(args.name, registry.show(args.name), utc=args.utc, as_json=args.json)
    return ExitCode.SUCCESS


def cmd_prune(args: argparse.Namespace, registry: UsageRegistry) -> int:
    if args.name in registry and not registry.show(args.name):
        if args.json:
            print_json({"name": args.name, "pruned": 0})
        else:
            print_info(f'"{args.name}" is already empty. Ignoring command.')
        return ExitCode.SUCCESS

    pruned = registry.prune(args.name, before=args.before)
    _report(args, f'Pruned {pruned} usage(s) of "{args.name}".', name=args.name, pruned=pruned)
    return ExitCode.SUCCESS


def cmd_usage(args: argparse.Namespace, registry: UsageRegistry) -> int:
    window = window_from_unit(args.length, args.unit)
    estimate = registry.usage(args.name, window)
    display_estimate(args.name, estimate, args.length, args.unit, window, as_json=args.json)
    return ExitCode.SUCCESS


COMMANDS: dict[str, Callable[[argparse.Namespace, UsageRegistry], int]] = {
    "add": cmd_add,
    "use": cmd_use,
    "remove": cmd_remove,
    "clear": cmd_clear,
    "list": cmd_list,
    "show": cmd_show,
    "usages": cmd_show,
    "prune": cmd_prune,
    "usage": cmd_usage,
}


def handle_config_command(
    config_args: list,
    config: dict,
    config_file: Path,
    data_dir: Path,
    as_json: bool = False,
) -> int:
    """Handle configuration subcommands.

    Args:
        config_args: List of config command arguments.
        config: Current configuration.
        config_file: Path of the config file.
        data_dir: Resolved data directory (shown by ``show``).
        as_json: Print JSON instead of formatted text.

    Returns:
        Exit code.
    """
    if len(config_args) == 0 or config_args[0] == "show":
        if as_json:
            print_json(
                {
                    "config": config,
                    "config_file": str(config_file),
                    "data_dir": str(data_dir),
                    "data_file": str(get_store_path(data_dir)),
                }
            )
            return ExitCode.SUCCESS

        print()
        print(f"{Colors.BOLD}{Colors.CYAN}Current Configuration{Colors.RESET}")
        print()
        for key in sorted(DEFAULT_CONFIG):
            print(f"  {key + ':':<16}{config.get(key)}")
        print()
        print(f"  Config File:    {config_file}")
        print(f"  Data File:      {get_store_path(data_dir)}")
        print()
        return ExitCode.SUCCESS

    try:
        if config_args[0] == "reset":
            reset_config(config_file)
            print_success("Configuration reset to defaults.")
            return ExitCode.SUCCESS

        if config_args[0] == "set":
            if len(config_args) != 3:
                print_error("Error: 'set' requires KEY and VALUE arguments")
                print("Usage: usage-tracker config set KEY VALUE")
                print(f"\nValid keys: {', '.join(sorted(DEFAULT_CONFIG))}")
                return ExitCode.INVALID_ARGUMENT

            key, value = config_args[1], config_args[2]
            try:
                converted = convert_config_value(key, value)
            except KeyError:
                print_error(f"Error: Unknown config key '{key}'")
                print(f"Valid keys: {', '.join(sorted(DEFAULT_CONFIG))}")
                return ExitCode.INVALID_ARGUMENT
            except ValueError as e:
                print_error(f"Error: {e}")
                return ExitCode.INVALID_ARGUMENT

            config[key] = converted
            save_config(config, config_file)
            print_success(f"Set {key} = {converted}")
            return ExitCode.SUCCESS
    except OSError as e:
        raise StorageIOError(f'Unable to write config "{config_file}"', e) from e

    print_error(f"Error: Unknown config command '{config_args[0]}'")
    print("Available commands: show, reset, set KEY VALUE")
    return ExitCode.INVALID_ARGUMENT


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, run one command and save changes.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Process exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    data_dir = get_data_dir(args.data_dir)
    config_file = get_config_path(data_dir)
    config = load_config(config_file)

    if args.no_color or not config["color"]:
        disable_colors()
    setup_logging(log_level_for(config, debug=args.debug))

    args.utc = args.utc or config["utc"]
    backup = config["backup"] and not args.no_backup
    logger.debug("Data directory: %s (backup=%s)", data_dir, backup)

    try:
        if args.command == "config":
            return handle_config_command(
                args.config_args, config, config_file, data_dir, as_json=args.json
            )

        registry = load_registry(data_dir)
        snapshot = registry.copy()

        exit_code = COMMANDS[args.command](args, registry)

        save_if_changed(registry, snapshot, data_dir, backup=backup)
        return exit_code
    except UsageTrackerError as e:
        print_error(
            format_error_for_user(e, verbose=args.debug),
            suggestion="" if args.debug else e.get_suggestion(),
        )
        return get_exit_code(e)


def main() -> None:
    """Main entry point for usage-tracker CLI.

    This function is the primary entry point when installed via pip/pipx/uv.
    """
    install_crash_handler()
    sys.exit(run())


__all__ = [
    "create_parser",
    "handle_config_command",
    "main",
    "run",
    "version_string",
]
