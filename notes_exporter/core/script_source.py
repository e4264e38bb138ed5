"""
Script source selection.

Decides which AppleScript file an exporter runs: the bundled default
or an explicit path supplied by the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from notes_exporter.core.errors import ExportError

logger = logging.getLogger(__name__)


class SourceKind(Enum):
    """Where the script comes from."""

    BUNDLED = "bundled"
    PATH = "path"


@dataclass(frozen=True)
class ScriptSource:
    """
    Immutable choice between the bundled script and an explicit file.

    An explicit path is validated when the source is created, the
    bundled location only when it is resolved.
    """

    kind: SourceKind
    path: Optional[Path] = None

    @classmethod
    def bundled(cls) -> ScriptSource:
        """Use the default script location."""
        return cls(SourceKind.BUNDLED)

    @classmethod
    def from_path(cls, script_path: Union[str, Path]) -> ScriptSource:
        """
        Use an explicit script file.

        Args:
            script_path: Path to the AppleScript, relative to the cwd or absolute

        Returns:
            A PATH source holding the absolute script path

        Raises:
            ExportError: SCRIPT_NOT_FOUND if no file exists at the path
        """
        resolved = Path(script_path).expanduser().resolve()
        if not resolved.exists():
            raise ExportError.script_not_found(resolved)
        return cls(SourceKind.PATH, resolved)

    def resolve(self, default_script_path: Union[str, Path]) -> Path:
        """
        Return the script file to execute.

        Args:
            default_script_path: Location of the bundled script, only
                consulted for BUNDLED sources

        Raises:
            ExportError: SCRIPT_NOT_FOUND if the bundled script is missing
        """
        if self.kind is SourceKind.PATH:
            return self.path

        default = Path(default_script_path)
        if not default.exists():
            raise ExportError.script_not_found(default)
        logger.debug(f"Using bundled script at {default}")
        return default
