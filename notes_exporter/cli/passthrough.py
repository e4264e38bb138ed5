"""
Pass-through CLI.

Forwards its arguments to the AppleScript unchanged and exits with the
script's own status. Useful for script versions whose verbs are not
known to the main CLI:

    apple-notes-exporter-raw "iCloud:Work" ./exports
    apple-notes-exporter-raw -- --some-script-flag value
"""

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from notes_exporter.cli.interface import ConsoleInterface, create_console_interface
from notes_exporter.config.constants import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    MESSAGES,
    RAW_HELP_TEXT,
    UNKNOWN_EXIT_CODE,
    VERSION,
)
from notes_exporter.config.settings import get_default_script_path
from notes_exporter.core.errors import ErrorKind, ExportError
from notes_exporter.core.runner import check_platform, run_script_sync


@dataclass
class RawArgs:
    """Parsed pass-through arguments."""

    script_override: Optional[str] = None
    passthrough_args: List[str] = field(default_factory=list)
    wants_help: bool = False
    wants_print_script_path: bool = False
    wants_version: bool = False


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apple-notes-exporter-raw",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-v", "--version", action="store_true")
    parser.add_argument("--print-script-path", action="store_true")
    parser.add_argument("--script", type=str, metavar="PATH")
    return parser


def parse_raw_args(raw_args: List[str]) -> RawArgs:
    """
    Split wrapper options from script arguments.

    Everything after a literal ``--`` goes to the script untouched.
    Before it, the wrapper's own options are picked out and all other
    arguments are forwarded in their original order. A ``--script``
    that is missing or empty exits with status 2 (argparse usage error).
    """
    if "--" in raw_args:
        split = raw_args.index("--")
        head, tail = raw_args[:split], raw_args[split + 1 :]
    else:
        head, tail = raw_args, []

    parser = _create_parser()
    known, extras = parser.parse_known_args(head)
    if known.script is not None and not known.script.strip():
        parser.error(MESSAGES["SCRIPT_REQUIRES_VALUE"])
    return RawArgs(
        script_override=known.script,
        passthrough_args=extras + tail,
        wants_help=known.help,
        wants_print_script_path=known.print_script_path,
        wants_version=known.version,
    )


def _exit_code_for(error: ExportError, interface: ConsoleInterface) -> int:
    if error.kind is ErrorKind.SCRIPT_EXITED_NON_ZERO:
        if error.exit_code is not None and error.exit_code != UNKNOWN_EXIT_CODE:
            return error.exit_code
        interface.show_error(f"osascript failed: {error.stderr}")
        return EXIT_FAILURE

    interface.show_error(MESSAGES["ERROR_PREFIX"].format(message=error.message))
    if error.kind is ErrorKind.SCRIPT_NOT_FOUND:
        interface.show_error(MESSAGES["SUBMODULE_HINT"])
    return EXIT_FAILURE


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for apple-notes-exporter-raw.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        The script's exit status, or 1 if it could not run
    """
    interface = create_console_interface()
    parsed = parse_raw_args(sys.argv[1:] if argv is None else argv)

    if parsed.script_override:
        script_path = Path(parsed.script_override).expanduser().resolve()
    else:
        script_path = get_default_script_path()

    if parsed.wants_version:
        interface.show_text(VERSION)
        return EXIT_SUCCESS

    if parsed.wants_print_script_path:
        interface.show_script_path(script_path)
        return EXIT_SUCCESS

    if parsed.wants_help:
        interface.show_text(RAW_HELP_TEXT.format(script_path=script_path))
        return EXIT_SUCCESS

    try:
        check_platform()
        if not script_path.exists():
            raise ExportError.script_not_found(script_path)
        run_script_sync(script_path, parsed.passthrough_args)
    except ExportError as e:
        return _exit_code_for(e, interface)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
