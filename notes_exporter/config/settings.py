"""
Runtime settings and configuration management.

This module handles runtime configuration that can be modified
during execution, unlike constants which are fixed.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

from notes_exporter.config.constants import (
    BUNDLED_SCRIPT_RELATIVE_PATH,
    PACKAGE_ROOT,
    SCRIPT_INTERPRETER,
    SCRIPT_PATH_ENV_VAR,
)


class Settings:
    """Runtime settings manager."""

    def __init__(self):
        """Initialize default settings."""
        self.reset_to_defaults()

    def reset_to_defaults(self):
        """Reset all settings to default values."""
        self._settings = {
            # Script selection
            "script_path": None,
            "interpreter": SCRIPT_INTERPRETER,
            # Output
            "verbose": False,
            "quiet": False,
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value."""
        return self._settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a setting value."""
        self._settings[key] = value

    def update(self, settings: Dict[str, Any]) -> None:
        """Update multiple settings at once."""
        self._settings.update(settings)

    @property
    def script_path(self) -> Optional[str]:
        return self._settings["script_path"]

    @property
    def interpreter(self) -> str:
        return self._settings["interpreter"]

    @property
    def verbose(self) -> bool:
        return self._settings["verbose"]

    @property
    def quiet(self) -> bool:
        return self._settings["quiet"]


# Global settings instance
settings = Settings()


def configure_from_args(args) -> None:
    """Configure settings from command line arguments."""
    settings.update(
        {
            "script_path": getattr(args, "script", None),
            "verbose": getattr(args, "verbose", False),
            "quiet": getattr(args, "quiet", False),
        }
    )


def get_bundled_script_path() -> Path:
    """Return the location of the AppleScript shipped inside the package."""
    return PACKAGE_ROOT / BUNDLED_SCRIPT_RELATIVE_PATH


def get_default_script_path(env_file: Optional[Path] = None) -> Path:
    """
    Determine the default AppleScript location.

    Search order:
    1. Environment variable APPLE_NOTES_EXPORTER_SCRIPT
    2. Same variable from a .env file (env_file, or the nearest one
       found from the current directory upward)
    3. The bundled script under the package root

    The returned path is not checked for existence; that happens when
    the script is actually needed.

    Args:
        env_file: Optional path to .env file. If None, searches from the
            current directory upward

    Returns:
        Absolute path to the default script
    """
    override = os.environ.get(SCRIPT_PATH_ENV_VAR)
    if not override:
        if env_file is not None:
            load_dotenv(env_file)
        else:
            load_dotenv(find_dotenv(usecwd=True))
        override = os.environ.get(SCRIPT_PATH_ENV_VAR)

    if override and override.strip():
        return Path(override.strip()).expanduser().resolve()

    return get_bundled_script_path()
