"""
Apple Notes Exporter

Lists Apple Notes folders and exports them recursively to HTML files
by invoking an AppleScript that talks to the Notes app. macOS only.

Quick start:

    from notes_exporter import (
        export_folder_from_account_sync,
        export_folder_sync,
        list_folders_sync,
    )

    list_folders_sync()
    export_folder_sync("My Notes", "./exports")
    export_folder_from_account_sync("iCloud", "Work", "./exports")

Custom script:

    from notes_exporter import Exporter

    exporter = Exporter.with_script_path("./my_script.applescript")
    await exporter.export_folder("My Notes", "./exports")
"""

from notes_exporter.config.constants import VERSION
from notes_exporter.core import (
    ErrorKind,
    ExportError,
    Exporter,
    ScriptSource,
    SourceKind,
    export_folder,
    export_folder_from_account,
    export_folder_from_account_sync,
    export_folder_sync,
    list_folders,
    list_folders_sync,
)

__version__ = VERSION

__all__ = [
    "Exporter",
    "ExportError",
    "ErrorKind",
    "ScriptSource",
    "SourceKind",
    "list_folders",
    "list_folders_sync",
    "export_folder",
    "export_folder_sync",
    "export_folder_from_account",
    "export_folder_from_account_sync",
]
