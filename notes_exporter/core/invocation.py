"""
Invocation building for the export AppleScript.

Turns high level operations into the verb and positional arguments
the script expects, and prepares the output directory for exports.
"""

import os
from pathlib import Path
from typing import List, Union

from notes_exporter.config.constants import ACCOUNT_SEPARATOR, VERB_EXPORT, VERB_LIST
from notes_exporter.core.errors import ExportError


def folder_specifier(account: str, folder: str) -> str:
    """
    Build an account scoped folder specifier.

    The script splits on the first separator; a ``:`` inside the
    account or folder name is passed through unescaped.

    Examples:
        >>> folder_specifier("iCloud", "Work")
        'iCloud:Work'
    """
    return f"{account}{ACCOUNT_SEPARATOR}{folder}"


def prepare_output_dir(output_dir: Union[str, Path]) -> str:
    """
    Create the output directory and return its absolute path.

    Missing parent directories are created too. Calling this on an
    existing directory is a no-op.

    Args:
        output_dir: Relative (to the cwd) or absolute directory path

    Returns:
        Absolute, normalized path of the directory

    Raises:
        ExportError: INVALID_OUTPUT_PATH if the path is empty or cannot
            be made absolute
    """
    raw = os.fspath(output_dir)
    if not raw.strip():
        raise ExportError.invalid_output_path(raw)

    expanded = os.path.expanduser(raw)
    os.makedirs(expanded, exist_ok=True)

    resolved = os.path.abspath(expanded)
    if not resolved or not os.path.isabs(resolved):
        raise ExportError.invalid_output_path(raw)
    return resolved


def build_list_invocation() -> List[str]:
    """Arguments for listing the top-level folders of every account."""
    return [VERB_LIST]


def build_export_invocation(folder_spec: str, output_dir: Union[str, Path]) -> List[str]:
    """
    Arguments for exporting one folder.

    Side effect: creates ``output_dir`` (see prepare_output_dir).

    Args:
        folder_spec: "Folder" or "Account:Folder"
        output_dir: Destination directory

    Returns:
        ["export", folder_spec, <absolute output dir>]
    """
    return [VERB_EXPORT, folder_spec, prepare_output_dir(output_dir)]


def build_export_from_account_invocation(
    account: str, folder: str, output_dir: Union[str, Path]
) -> List[str]:
    """Arguments for exporting a folder from one specific account."""
    return build_export_invocation(folder_specifier(account, folder), output_dir)
