"""
Apple Notes exporter.

Lists Apple Notes folders and exports them recursively to HTML files
by running an AppleScript through osascript.

Requirements:
- macOS only, the script drives the Notes app
- Automation permissions for Notes must be granted in System Settings
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from notes_exporter.config.constants import SCRIPT_INTERPRETER
from notes_exporter.config.settings import get_default_script_path
from notes_exporter.core.invocation import (
    build_export_from_account_invocation,
    build_export_invocation,
    build_list_invocation,
)
from notes_exporter.core.runner import check_platform, run_script, run_script_sync
from notes_exporter.core.script_source import ScriptSource

logger = logging.getLogger(__name__)


class Exporter:
    """
    Runs list and export operations against one AppleScript.

    Use ``Exporter.create()`` for the default script, or
    ``Exporter.with_script_path()`` for a custom one. The script source
    is fixed for the lifetime of the instance.

    Every operation exists as a coroutine and as a blocking ``*_sync``
    variant. Each call checks the platform, builds the arguments
    (creating the output directory for exports), resolves the script
    and then starts a fresh osascript process.

    Example:
        >>> exporter = Exporter.create()
        >>> exporter.list_folders_sync()
        >>> await exporter.export_folder("My Notes", "./exports")
    """

    def __init__(
        self,
        script_source: ScriptSource,
        default_script_path: Union[str, Path],
        interpreter: str = SCRIPT_INTERPRETER,
        platform: Optional[str] = None,
    ):
        """
        Args:
            script_source: Which script to run
            default_script_path: Location of the bundled script
            interpreter: Executable used to run the script
            platform: Platform identifier to check against; None reads
                the running platform on every call
        """
        self._script_source = script_source
        self._default_script_path = Path(default_script_path)
        self._interpreter = interpreter
        self._platform = platform

    @classmethod
    def create(
        cls,
        default_script_path: Optional[Union[str, Path]] = None,
        *,
        interpreter: str = SCRIPT_INTERPRETER,
        platform: Optional[str] = None,
    ) -> Exporter:
        """
        Create an exporter that uses the bundled AppleScript.

        Args:
            default_script_path: Where the bundled script lives; defaults
                to the configured location (see get_default_script_path).
                Existence is checked when an operation runs.
        """
        if default_script_path is None:
            default_script_path = get_default_script_path()
        return cls(
            ScriptSource.bundled(),
            default_script_path,
            interpreter=interpreter,
            platform=platform,
        )

    @classmethod
    def with_script_path(
        cls,
        script_path: Union[str, Path],
        *,
        interpreter: str = SCRIPT_INTERPRETER,
        platform: Optional[str] = None,
    ) -> Exporter:
        """
        Create an exporter that uses a custom AppleScript.

        Raises:
            ExportError: SCRIPT_NOT_FOUND immediately if the file is missing
        """
        source = ScriptSource.from_path(script_path)
        return cls(
            source,
            source.path,
            interpreter=interpreter,
            platform=platform,
        )

    @property
    def script_source(self) -> ScriptSource:
        return self._script_source

    def resolve_script_path(self) -> Path:
        """Return the script that would run, checking that it exists."""
        return self._script_source.resolve(self._default_script_path)

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    async def list_folders(self) -> None:
        """
        List the top-level folders across all Notes accounts.

        The script prints the listing to stdout.
        """
        check_platform(self._platform)
        await self._run(build_list_invocation())

    def list_folders_sync(self) -> None:
        """List the top-level folders (blocking version)."""
        check_platform(self._platform)
        self._run_sync(build_list_invocation())

    # ------------------------------------------------------------------
    # Exporting
    # ------------------------------------------------------------------

    async def export_folder(self, folder: str, output_dir: Union[str, Path]) -> None:
        """
        Export a folder and all its subfolders to HTML files.

        The script searches every level of every account breadth-first.
        When the same folder name exists in several accounts, use
        export_folder_from_account, or pass "Account:Folder" here.

        Args:
            folder: Folder name, or "Account:Folder"
            output_dir: Destination, created if it does not exist
        """
        check_platform(self._platform)
        await self._run(build_export_invocation(folder, output_dir))

    def export_folder_sync(self, folder: str, output_dir: Union[str, Path]) -> None:
        """Export a folder (blocking version)."""
        check_platform(self._platform)
        self._run_sync(build_export_invocation(folder, output_dir))

    async def export_folder_from_account(
        self, account: str, folder: str, output_dir: Union[str, Path]
    ) -> None:
        """
        Export a folder from one specific account.

        Args:
            account: Account name, e.g. "iCloud", "Google", "On My Mac"
            folder: Folder name inside that account
            output_dir: Destination, created if it does not exist
        """
        check_platform(self._platform)
        await self._run(build_export_from_account_invocation(account, folder, output_dir))

    def export_folder_from_account_sync(
        self, account: str, folder: str, output_dir: Union[str, Path]
    ) -> None:
        """Export a folder from one specific account (blocking version)."""
        check_platform(self._platform)
        self._run_sync(build_export_from_account_invocation(account, folder, output_dir))

    # ------------------------------------------------------------------

    async def _run(self, args: List[str]) -> None:
        script_path = self.resolve_script_path()
        logger.debug(f"Running {args[0]} with {script_path.name}")
        await run_script(script_path, args, self._interpreter)

    def _run_sync(self, args: List[str]) -> None:
        script_path = self.resolve_script_path()
        logger.debug(f"Running {args[0]} with {script_path.name}")
        run_script_sync(script_path, args, self._interpreter)
