"""
Command line argument parser.

Handles parsing and validation of CLI arguments.
"""

import argparse
import sys
from typing import List, Optional

from notes_exporter.config.constants import AUTHOR, HELP_TEXT, MESSAGES, VERSION

# Alias -> canonical command name
COMMAND_ALIASES = {"ls": "list"}


class ArgumentParser:
    """Custom argument parser for Apple Notes Exporter."""

    def __init__(self):
        """Initialize argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create and configure the argument parser."""
        parser = argparse.ArgumentParser(
            prog="apple-notes-exporter",
            description="Export Apple Notes folders to HTML",
            add_help=False,  # We'll handle help ourselves
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        parser.add_argument(
            "-h", "--help", action="store_true", help="Show this help"
        )

        parser.add_argument(
            "-v", "--version", action="store_true", help="Show version"
        )

        parser.add_argument(
            "--script",
            type=str,
            metavar="PATH",
            help="Use a custom AppleScript instead of the bundled one",
        )

        parser.add_argument(
            "--print-script-path",
            action="store_true",
            help="Print the resolved AppleScript path and exit",
        )

        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Debug logging on stderr",
        )

        parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="No status messages",
        )

        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

        subparsers.add_parser(
            "list",
            aliases=["ls"],
            add_help=False,
            help="List the top-level folders of all accounts",
        )

        export = subparsers.add_parser(
            "export",
            add_help=False,
            help="Export a folder recursively to HTML",
        )
        export.add_argument(
            "folder",
            metavar="FOLDER",
            help='Folder name, or "Account:Folder"',
        )
        export.add_argument(
            "output_dir",
            metavar="OUTPUT_DIR",
            help="Destination directory (created if missing)",
        )
        export.add_argument(
            "--account",
            type=str,
            metavar="NAME",
            help="Only search the given account",
        )

        subparsers.add_parser("help", add_help=False, help="Show this help")
        subparsers.add_parser("version", add_help=False, help="Show version")

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command line arguments.

        Unknown commands, missing positionals and an empty --script make
        argparse print the usage to stderr and exit with status 2.

        Args:
            args: Optional list of arguments (for testing)

        Returns:
            Parsed arguments namespace
        """
        parsed = self.parser.parse_args(args)

        if parsed.script is not None and not parsed.script.strip():
            self.parser.error(MESSAGES["SCRIPT_REQUIRES_VALUE"])

        parsed.command = COMMAND_ALIASES.get(parsed.command, parsed.command)
        if not hasattr(parsed, "account"):
            parsed.account = None

        # Handle special cases
        if parsed.help or parsed.command == "help":
            self.print_help()
            sys.exit(0)

        if parsed.version or parsed.command == "version":
            self.print_version()
            sys.exit(0)

        return parsed

    def print_help(self) -> None:
        """Print custom help text."""
        print(HELP_TEXT)

    def print_usage(self, file=None) -> None:
        """Print the one-line usage (stderr by default)."""
        self.parser.print_usage(file if file is not None else sys.stderr)

    def print_version(self) -> None:
        """Print version information."""
        print(f"apple-notes-exporter {VERSION}")
        print(f"By {AUTHOR}")


def create_parser() -> ArgumentParser:
    """Create and return a configured argument parser."""
    return ArgumentParser()
