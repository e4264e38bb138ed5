"""
Module level shortcuts that use the default AppleScript.

Each function builds a fresh ``Exporter.create()`` and delegates to it.
For a custom script, construct an Exporter with
``Exporter.with_script_path()`` instead.
"""

from pathlib import Path
from typing import Union

from notes_exporter.core.exporter import Exporter


async def list_folders() -> None:
    """List the top-level folders across all Notes accounts."""
    await Exporter.create().list_folders()


def list_folders_sync() -> None:
    """List the top-level folders (blocking version)."""
    Exporter.create().list_folders_sync()


async def export_folder(folder: str, output_dir: Union[str, Path]) -> None:
    """
    Export a folder recursively to HTML files.

    Searches all accounts. If the folder name exists in several accounts,
    use export_folder_from_account.

    Example:
        >>> await export_folder("My Notes", "./exports")
    """
    await Exporter.create().export_folder(folder, output_dir)


def export_folder_sync(folder: str, output_dir: Union[str, Path]) -> None:
    """Export a folder recursively (blocking version)."""
    Exporter.create().export_folder_sync(folder, output_dir)


async def export_folder_from_account(
    account: str, folder: str, output_dir: Union[str, Path]
) -> None:
    """
    Export a folder from a specific account recursively to HTML files.

    Example:
        >>> await export_folder_from_account("iCloud", "Work", "./exports")
    """
    await Exporter.create().export_folder_from_account(account, folder, output_dir)


def export_folder_from_account_sync(
    account: str, folder: str, output_dir: Union[str, Path]
) -> None:
    """Export a folder from a specific account (blocking version)."""
    Exporter.create().export_folder_from_account_sync(account, folder, output_dir)
