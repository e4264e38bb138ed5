"""
Process runner for the export AppleScript.

Launches ``osascript <script> <args...>`` as a child process whose
standard streams are inherited from the caller, so the script's
progress output reaches the user live. Two adapters share a single
outcome mapping:

- run_script: coroutine, suspends until the child exits
- run_script_sync: blocks the calling thread until the child exits
"""

from __future__ import annotations

import asyncio
import logging
import signal
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from notes_exporter.config.constants import (
    MESSAGES,
    REQUIRED_PLATFORM,
    SCRIPT_INTERPRETER,
    UNKNOWN_EXIT_CODE,
)
from notes_exporter.core.errors import ExportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessOutcome:
    """How a child process ended: an exit code, a signal, or neither."""

    exit_code: Optional[int] = None
    signal_name: Optional[str] = None

    @classmethod
    def from_returncode(cls, returncode: Optional[int]) -> ProcessOutcome:
        """
        Translate a Python returncode.

        Negative values mean the child was killed by signal ``-returncode``
        (POSIX convention used by both subprocess and asyncio).
        """
        if returncode is None:
            return cls()
        if returncode >= 0:
            return cls(exit_code=returncode)
        return cls(signal_name=_signal_name(-returncode))


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"


def outcome_error(outcome: ProcessOutcome) -> Optional[ExportError]:
    """
    Map a process outcome to an error, or None on success.

    Args:
        outcome: How the child process ended

    Returns:
        None for exit code 0, otherwise a SCRIPT_EXITED_NON_ZERO error
    """
    if outcome.exit_code == 0:
        return None

    if outcome.exit_code is not None:
        # stderr is inherited, so there is no captured text to attach
        return ExportError.script_exited_non_zero(outcome.exit_code)

    if outcome.signal_name:
        return ExportError.script_exited_non_zero(
            UNKNOWN_EXIT_CODE,
            MESSAGES["SIGNAL_TERMINATED"].format(signal=outcome.signal_name),
        )

    return ExportError.script_exited_non_zero(
        UNKNOWN_EXIT_CODE, MESSAGES["UNKNOWN_ERROR"]
    )


def current_platform() -> str:
    """Return the running platform identifier."""
    return sys.platform


def check_platform(platform: Optional[str] = None) -> None:
    """
    Ensure the script can run here.

    Args:
        platform: Platform identifier to check, defaults to the running one

    Raises:
        ExportError: UNSUPPORTED_PLATFORM when not on macOS
    """
    if platform is None:
        platform = current_platform()
    if platform != REQUIRED_PLATFORM:
        raise ExportError.unsupported_platform(platform)


def build_command(
    script_path: Union[str, Path],
    args: Sequence[str],
    interpreter: str = SCRIPT_INTERPRETER,
) -> List[str]:
    """Full argv for the child process."""
    return [interpreter, str(script_path), *args]


def _raise_for_returncode(returncode: Optional[int]) -> None:
    outcome = ProcessOutcome.from_returncode(returncode)
    logger.debug(f"Script finished: {outcome}")
    error = outcome_error(outcome)
    if error is not None:
        raise error


async def run_script(
    script_path: Union[str, Path],
    args: Sequence[str],
    interpreter: str = SCRIPT_INTERPRETER,
) -> None:
    """
    Run the script without blocking the event loop.

    Cancelling the awaiting task kills the child and waits for it
    before the cancellation propagates.

    Args:
        script_path: AppleScript file to execute
        args: Verb followed by its positional arguments
        interpreter: Executable that runs the script

    Raises:
        ExportError: LAUNCH_FAILED if the child cannot be started,
            SCRIPT_EXITED_NON_ZERO if it fails
    """
    command = build_command(script_path, args, interpreter)
    logger.debug(f"Launching: {command}")

    try:
        process = await asyncio.create_subprocess_exec(*command)
    except OSError as e:
        raise ExportError.launch_failed(e) from e

    try:
        returncode = await process.wait()
    except asyncio.CancelledError:
        logger.debug(f"Cancelled, killing pid {process.pid}")
        try:
            process.kill()
        except ProcessLookupError:
            # already exited
            pass
        await process.wait()
        raise

    _raise_for_returncode(returncode)


def run_script_sync(
    script_path: Union[str, Path],
    args: Sequence[str],
    interpreter: str = SCRIPT_INTERPRETER,
) -> None:
    """
    Run the script and block until it exits.

    Same arguments and errors as run_script.
    """
    command = build_command(script_path, args, interpreter)
    logger.debug(f"Launching: {command}")

    try:
        completed = subprocess.run(command)
    except OSError as e:
        raise ExportError.launch_failed(e) from e

    _raise_for_returncode(completed.returncode)
