"""
CLI application.

Coordinates argument parsing, configuration and the exporter, and
turns export errors into messages and exit codes.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from notes_exporter.cli.interface import create_console_interface
from notes_exporter.cli.parser import create_parser
from notes_exporter.config.constants import (
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_SUCCESS,
    MESSAGES,
)
from notes_exporter.config.settings import (
    configure_from_args,
    get_default_script_path,
    settings,
)
from notes_exporter.core.errors import ErrorKind, ExportError
from notes_exporter.core.exporter import Exporter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send package log records to stderr, DEBUG when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
    logging.getLogger("notes_exporter").setLevel(level)


class NotesExporterCLI:
    """CLI application for listing and exporting Notes folders."""

    def __init__(self):
        """Initialize CLI application."""
        self.parser = create_parser()
        self.interface = create_console_interface()

    def run(self, args: Optional[list] = None) -> int:
        """Run the CLI application.

        Export errors are reported as ``Error: <message>`` on stderr.
        Anything else propagates to the caller.

        Args:
            args: Optional command line arguments

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            parsed_args = self.parser.parse_args(args)

            configure_from_args(parsed_args)
            configure_logging(settings.verbose)

            if parsed_args.print_script_path:
                self.interface.show_script_path(self._script_path_for_display())
                return EXIT_SUCCESS

            if parsed_args.command is None:
                self.interface.show_error(MESSAGES["NO_COMMAND"])
                self.parser.print_usage()
                return EXIT_FAILURE

            exporter = self._create_exporter()

            if parsed_args.command == "list":
                return self._execute_list(exporter)
            return self._execute_export(
                exporter,
                parsed_args.folder,
                parsed_args.output_dir,
                parsed_args.account,
            )

        except ExportError as e:
            self.interface.show_error(MESSAGES["ERROR_PREFIX"].format(message=e.message))
            if e.kind is ErrorKind.SCRIPT_NOT_FOUND:
                self.interface.show_error(MESSAGES["SUBMODULE_HINT"])
            return EXIT_FAILURE

        except KeyboardInterrupt:
            self.interface.show_error(MESSAGES["OPERATION_CANCELLED"])
            return EXIT_INTERRUPTED

    def _create_exporter(self) -> Exporter:
        """Build the exporter for the configured script source."""
        if settings.script_path:
            return Exporter.with_script_path(
                settings.script_path, interpreter=settings.interpreter
            )
        return Exporter.create(
            get_default_script_path(), interpreter=settings.interpreter
        )

    def _script_path_for_display(self) -> Path:
        """Resolved script path without requiring it to exist."""
        if settings.script_path:
            return Path(settings.script_path).expanduser().resolve()
        return get_default_script_path()

    def _execute_list(self, exporter: Exporter) -> int:
        """List folders of all accounts."""
        exporter.list_folders_sync()
        self.interface.show_message(MESSAGES["LIST_DONE"], message_type="success")
        return EXIT_SUCCESS

    def _execute_export(
        self,
        exporter: Exporter,
        folder: str,
        output_dir: str,
        account: Optional[str] = None,
    ) -> int:
        """Export one folder, optionally scoped to an account."""
        if account:
            exporter.export_folder_from_account_sync(account, folder, output_dir)
        else:
            exporter.export_folder_sync(folder, output_dir)

        resolved = Path(output_dir).expanduser().resolve()
        self.interface.show_message(
            MESSAGES["EXPORT_DONE"].format(output_dir=resolved),
            message_type="success",
        )
        return EXIT_SUCCESS


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        args: Optional command line arguments

    Returns:
        Exit code
    """
    app = NotesExporterCLI()
    return app.run(args)


if __name__ == "__main__":
    sys.exit(main())
