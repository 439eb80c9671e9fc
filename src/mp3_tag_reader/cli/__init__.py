"""Command-line interface for the MP3 tag reader (mp3tag).

This package provides the 'mp3tag' command-line tool with subcommands:
    view: Display the tag of an MP3 file
    write: Write placeholder tags to an MP3 file
    edit: Change a single tag field
    inspect: Display the raw header and frame layout

Modules:
    commands/: Command implementations
    schemas.py: JSON output models
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich_argparse import RichHelpFormatter

from .. import __version__
from ..config import Config, LOG_LEVELS
from ..constants import FIELD_NAMES
from ..errors import (
    Id3Error,
    Id3IOError,
    NoTagPresent,
    NotAnAudioFile,
    TagTooLarge,
    TruncatedHeader,
    UnknownField,
)
from .commands import cmd_view, cmd_write, cmd_edit, cmd_inspect
from .schemas import ErrorResponse
from .utils import setup_logging

__all__ = [
    "main",
    "cmd_view",
    "cmd_write",
    "cmd_edit",
    "cmd_inspect",
    "setup_logging",
]

ERROR_CODES = {
    NotAnAudioFile: "not_an_audio_file",
    Id3IOError: "io_error",
    TruncatedHeader: "truncated_header",
    NoTagPresent: "no_tag",
    UnknownField: "unknown_field",
    TagTooLarge: "tag_too_large",
}


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def error_code(exc: Id3Error) -> str:
    for cls, code in ERROR_CODES.items():
        if isinstance(exc, cls):
            return code
    return "error"


def build_parser() -> argparse.ArgumentParser:
    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        choices=LOG_LEVELS,
        default=argparse.SUPPRESS,
        help="Set logging level (disabled by default)",
    )
    parent_parser.add_argument(
        "-c",
        "--config",
        default=argparse.SUPPRESS,
        help="Path to configuration file (default: ~/.mp3tag/config.toml)",
    )

    parser = argparse.ArgumentParser(
        prog="mp3tag",
        usage="mp3tag <command> [options]",
        description="MP3 Tag Reader - View, write and edit ID3v2 tags in MP3 files",
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # view
    # ──────────────────────────────
    view_parser = subparsers.add_parser(
        "view",
        help="View tags in an MP3 file",
        usage="mp3tag view <filename> [options]",
        description="Read the ID3v2 tag of an MP3 file and display its fields",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    view_parser.add_argument("filename", help="MP3 file to read")
    view_parser.add_argument("--json", action="store_true", help="Print the tag as JSON")
    view_parser.set_defaults(func=cmd_view)

    # ──────────────────────────────
    # write
    # ──────────────────────────────
    write_parser = subparsers.add_parser(
        "write",
        help="Write dummy tags to an MP3 file",
        usage="mp3tag write <filename>",
        description="Replace the tag of an MP3 file with placeholder values",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    write_parser.add_argument("filename", help="MP3 file to rewrite")
    write_parser.set_defaults(func=cmd_write)

    # ──────────────────────────────
    # edit
    # ──────────────────────────────
    edit_parser = subparsers.add_parser(
        "edit",
        help="Edit a specific tag in an MP3 file",
        usage="mp3tag edit <field> <filename> <value>",
        description=f"Set one tag field. Fields: {', '.join(FIELD_NAMES)}",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    edit_parser.add_argument("field", help="Field to change")
    edit_parser.add_argument("filename", help="MP3 file to edit")
    edit_parser.add_argument("value", help="New value for the field")
    edit_parser.set_defaults(func=cmd_edit)

    # ──────────────────────────────
    # inspect
    # ──────────────────────────────
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Inspect the raw tag structure",
        usage="mp3tag inspect <filename> [options]",
        description="Display the tag header and every frame, including unrecognized ones",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    inspect_parser.add_argument("filename", help="MP3 file to inspect")
    inspect_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Show only header information, not frames",
    )
    inspect_parser.add_argument("--json", action="store_true", help="Print the layout as JSON")
    inspect_parser.set_defaults(func=cmd_inspect)

    return parser


def main() -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    config_path = getattr(args, "config", None)
    if config_path is not None and not Path(config_path).is_file():
        Console(stderr=True).print(
            f"[yellow]Warning: config file {escape(config_path)} not found, using defaults[/yellow]",
            soft_wrap=True,
        )
    args.settings = Config(config_path)

    # Logging setup
    log_level = getattr(args, "log_level", None)
    setup_logging(log_level or args.settings.get_log_level() or "critical")

    # Execute command
    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("Operation cancelled by user")
        sys.exit(130)
    except Id3Error as e:
        logging.debug("Command %s failed", args.command, exc_info=True)
        if getattr(args, "json", False):
            print(ErrorResponse(error=error_code(e), message=str(e)).model_dump_json(indent=2))
        else:
            print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
