"""
Core business logic for Apple Notes Exporter.
"""

from .convenience import (
    export_folder,
    export_folder_from_account,
    export_folder_from_account_sync,
    export_folder_sync,
    list_folders,
    list_folders_sync,
)
from .errors import (
    ErrorKind,
    ExportError,
)
from .exporter import Exporter
from .script_source import (
    ScriptSource,
    SourceKind,
)
