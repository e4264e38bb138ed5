"""
Command line interface module.

Handles user facing output. Status goes to stdout, errors to stderr,
so the script's own output stays readable when piped.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from rich.console import Console
from rich.style import Style

from notes_exporter.config.settings import settings


class IUserInterface(ABC):
    """Interface for user interaction."""

    @abstractmethod
    def show_message(self, message: str, message_type: str = "info") -> None:
        """Show a message to the user."""
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Show an error on the error stream."""
        pass

    @abstractmethod
    def show_text(self, text: str) -> None:
        """Print plain text (help, paths, versions) to stdout."""
        pass


class ConsoleInterface(IUserInterface):
    """Console-based user interface implementation."""

    def __init__(self):
        """Initialize console interface."""
        self.console = Console(highlight=False)
        self.error_console = Console(stderr=True, highlight=False)

        # Theme styles (minimalist - no bold/dim modifiers)
        self.success_style = Style(color="green")
        self.error_style = Style(color="red")

    def _print(self, renderable, style=None) -> None:
        """Print directly to console."""
        if style:
            self.console.print(renderable, style=style, markup=False)
        else:
            self.console.print(renderable, markup=False)

    def show_message(self, message: str, message_type: str = "info") -> None:
        """Show a message to the user.

        Args:
            message: Message to display
            message_type: "success" is shown in green, anything else unstyled
        """
        if settings.get("quiet", False):
            return

        if message_type == "success":
            self._print(message, style=self.success_style)
        else:
            self._print(message)

    def show_error(self, message: str) -> None:
        """Show an error message on stderr; never silenced by --quiet."""
        self.error_console.print(
            message, style=self.error_style, markup=False, soft_wrap=True
        )

    def show_text(self, text: str) -> None:
        """Print plain text without styling."""
        self.console.print(text, markup=False, soft_wrap=True)

    def show_script_path(self, path: Union[str, Path]) -> None:
        """Print a resolved script path."""
        self.show_text(str(path))


def create_console_interface() -> ConsoleInterface:
    """Create and return a console interface."""
    return ConsoleInterface()
