"""
Error taxonomy for Apple Notes export operations.

Every failure the exporter can classify is raised as an ExportError
whose ``kind`` tells callers what went wrong. Branch on the kind
rather than on exception subclasses:

    try:
        exporter.export_folder_sync("Work", "./exports")
    except ExportError as e:
        if e.kind is ErrorKind.SCRIPT_EXITED_NON_ZERO:
            print(e.exit_code)
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ErrorKind(Enum):
    """Closed set of failure conditions."""

    UNSUPPORTED_PLATFORM = "unsupported_platform"
    SCRIPT_NOT_FOUND = "script_not_found"
    TEMP_FILE_CREATION_FAILED = "temp_file_creation_failed"
    INVALID_OUTPUT_PATH = "invalid_output_path"
    LAUNCH_FAILED = "launch_failed"
    SCRIPT_EXITED_NON_ZERO = "script_exited_non_zero"


class ExportError(Exception):
    """
    Raised when an export operation fails in a recognized way.

    Only the fields belonging to ``kind`` are set, all others stay None:

    - UNSUPPORTED_PLATFORM: platform
    - SCRIPT_NOT_FOUND: script_path
    - TEMP_FILE_CREATION_FAILED: cause
    - INVALID_OUTPUT_PATH: path
    - LAUNCH_FAILED: cause
    - SCRIPT_EXITED_NON_ZERO: exit_code, stderr

    Use the named constructors instead of calling the class directly.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        platform: Optional[str] = None,
        script_path: Optional[str] = None,
        path: Optional[str] = None,
        cause: Optional[BaseException] = None,
        exit_code: Optional[int] = None,
        stderr: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.platform = platform
        self.script_path = script_path
        self.path = path
        self.cause = cause
        self.exit_code = exit_code
        self.stderr = stderr

    def __repr__(self) -> str:
        return f"ExportError({self.kind.name}, {self.message!r})"

    @classmethod
    def unsupported_platform(cls, platform: str) -> ExportError:
        return cls(
            ErrorKind.UNSUPPORTED_PLATFORM,
            "This tool only works on macOS. It relies on AppleScript and the "
            f"Notes app, which are not available on {platform}.",
            platform=platform,
        )

    @classmethod
    def script_not_found(cls, script_path: Union[str, Path]) -> ExportError:
        return cls(
            ErrorKind.SCRIPT_NOT_FOUND,
            f"AppleScript not found at {script_path}",
            script_path=str(script_path),
        )

    @classmethod
    def temp_file_creation_failed(cls, cause: BaseException) -> ExportError:
        return cls(
            ErrorKind.TEMP_FILE_CREATION_FAILED,
            f"Failed to create temporary script file: {cause}",
            cause=cause,
        )

    @classmethod
    def invalid_output_path(cls, path: str) -> ExportError:
        return cls(
            ErrorKind.INVALID_OUTPUT_PATH,
            f"Invalid path: {path}",
            path=path,
        )

    @classmethod
    def launch_failed(cls, cause: BaseException) -> ExportError:
        return cls(
            ErrorKind.LAUNCH_FAILED,
            f"Failed to launch osascript: {cause}",
            cause=cause,
        )

    @classmethod
    def script_exited_non_zero(
        cls, exit_code: int, stderr: Optional[str] = None
    ) -> ExportError:
        if stderr:
            message = f"AppleScript exited with status {exit_code}: {stderr}"
        else:
            message = f"AppleScript exited with status {exit_code}"
        return cls(
            ErrorKind.SCRIPT_EXITED_NON_ZERO,
            message,
            exit_code=exit_code,
            stderr=stderr,
        )
