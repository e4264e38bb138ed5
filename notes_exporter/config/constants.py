"""
Constants and configuration values for Apple Notes Exporter.

This module centralizes all constants, making them easy to modify
and test. Values that depend on the runtime environment live in
settings.py instead.
"""

from pathlib import Path

# Version Information
VERSION = "0.3.0"
AUTHOR = "Apple Notes Exporter Contributors"


# Platform Requirements
REQUIRED_PLATFORM = "darwin"  # sys.platform value for macOS
SCRIPT_INTERPRETER = "osascript"


# Script Location
PACKAGE_ROOT = Path(__file__).resolve().parent.parent
BUNDLED_SCRIPT_RELATIVE_PATH = Path(
    "vendor", "apple-notes-exporter", "scripts", "export_notes.applescript"
)
SCRIPT_PATH_ENV_VAR = "APPLE_NOTES_EXPORTER_SCRIPT"


# Script Verbs
VERB_LIST = "list"
VERB_EXPORT = "export"
ACCOUNT_SEPARATOR = ":"


# Exit Codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130
UNKNOWN_EXIT_CODE = -1


# User Messages
MESSAGES = {
    "ERROR_PREFIX": "Error: {message}",
    "EXPORT_DONE": "Export finished: {output_dir}",
    "LIST_DONE": "Folder listing finished",
    "OPERATION_CANCELLED": "Operation cancelled.",
    "NO_COMMAND": "No command given.",
    "SUBMODULE_HINT": (
        "If you are in the repo, make sure the submodule is initialized:\n"
        "  git submodule update --init --recursive"
    ),
    "SCRIPT_REQUIRES_VALUE": "--script requires a path value",
    "SIGNAL_TERMINATED": "Process terminated by signal: {signal}",
    "UNKNOWN_ERROR": "Unknown error",
}


# Help Text
HELP_TEXT = f"""
Apple Notes Exporter v{VERSION}

Exports Apple Notes folders recursively to HTML files by driving an
AppleScript through osascript.

Usage:
    apple-notes-exporter [OPTIONS] COMMAND [ARGS]

Commands:
    list, ls                       List the top-level folders of all accounts
    export FOLDER OUTPUT_DIR       Export a folder recursively to HTML
    help                           Show this help
    version                        Show version

Options:
    -h, --help                     Show this help
    -v, --version                  Show version
    --script PATH                  Use a custom AppleScript instead of the bundled one
    --print-script-path            Print the resolved AppleScript path and exit
    --account NAME                 (export) Only search the given account
    --verbose                      Debug logging on stderr
    -q, --quiet                    No status messages

Folder names:
    "FolderName"                   Searches every account
    "Account:FolderName"           Searches only the given account

Examples:
    apple-notes-exporter list
    apple-notes-exporter export "My Notes" ./exports
    apple-notes-exporter export "iCloud:Work" ./exports
    apple-notes-exporter export Work ./exports --account Google

Environment:
    {SCRIPT_PATH_ENV_VAR}   Override the default AppleScript path
                                   (also read from a .env file)

Notes:
    Only runs on macOS (requires osascript and Notes.app).
    Terminal/osascript may need Automation permissions for Notes.
"""

RAW_HELP_TEXT = f"""
apple-notes-exporter-raw v{VERSION}

A small wrapper that forwards its arguments to the AppleScript unchanged.

Usage:
    apple-notes-exporter-raw
    apple-notes-exporter-raw "Folder Name" "/path/to/output"
    apple-notes-exporter-raw "AccountName:FolderName" "/path/to/output"
    apple-notes-exporter-raw -- ARGS...

Options:
    --script PATH           Override the AppleScript path
    --print-script-path     Print the resolved AppleScript path and exit
    -h, --help              Show help
    -v, --version           Show version

Resolved AppleScript path:
    {{script_path}}

Notes:
    This must be run on macOS (requires the Notes.app scripting interface).
    You may need to grant Automation permissions to Terminal/osascript.
"""
