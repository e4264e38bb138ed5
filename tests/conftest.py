"""
Pytest configuration and shared fixtures
"""

import subprocess
import textwrap
from unittest.mock import patch

import pytest
from faker import Faker

from notes_exporter.config.constants import SCRIPT_PATH_ENV_VAR
from notes_exporter.config.settings import settings


@pytest.fixture
def fake_script(tmp_path):
    """Create an (empty) AppleScript file that passes existence checks."""
    script = tmp_path / "scripts" / "export_notes.applescript"
    script.parent.mkdir(parents=True)
    script.write_text('on run argv\n  return "ok"\nend run\n')
    return script


@pytest.fixture
def stand_in_script(tmp_path):
    """
    Python script that plays the role of the AppleScript.

    Run it with sys.executable as interpreter. It records its arguments
    to RECORD_FILE (if set) and then:
    - sleeps SLEEP_SECONDS (default 0), then
    - exits with EXIT_CODE (default 0), or
    - kills itself with KILL_SIGNAL (a signal number) if set.
    """
    script = tmp_path / "stand_in_script.py"
    script.write_text(
        textwrap.dedent(
            """
            import json
            import os
            import signal
            import sys
            import time

            record = os.environ.get("RECORD_FILE")
            if record:
                with open(record, "w", encoding="utf-8") as f:
                    json.dump(sys.argv[1:], f)

            time.sleep(float(os.environ.get("SLEEP_SECONDS", "0")))

            kill_signal = os.environ.get("KILL_SIGNAL")
            if kill_signal:
                os.kill(os.getpid(), int(kill_signal))

            sys.exit(int(os.environ.get("EXIT_CODE", "0")))
            """
        )
    )
    return script


@pytest.fixture
def on_macos():
    """Pretend the tests run on macOS."""
    with patch("notes_exporter.core.runner.current_platform", return_value="darwin"):
        yield


@pytest.fixture
def mock_run():
    """Replace subprocess.run in the runner; the child 'exits' with 0."""
    with patch("notes_exporter.core.runner.subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess(args=[], returncode=0)
        yield run


@pytest.fixture
def no_script_env(monkeypatch):
    """Make sure no script override leaks in from the environment or .env."""
    monkeypatch.delenv(SCRIPT_PATH_ENV_VAR, raising=False)
    with patch("notes_exporter.config.settings.load_dotenv"):
        yield


@pytest.fixture(autouse=True)
def reset_settings():
    """
    Reset the global settings before each test.

    The CLI writes parsed arguments into the module level settings
    instance; this keeps one test's --quiet or --script from leaking
    into the next.
    """
    settings.reset_to_defaults()
    yield
    settings.reset_to_defaults()


# =============================================================================
# Faker Fixtures for Reproducible Test Data
# =============================================================================


@pytest.fixture(scope="session")
def faker_seed():
    """
    Provide a Faker instance with a fixed seed for reproducible test data.

    Session-scoped to maintain consistent sequences across all tests in a run.
    """
    fake = Faker()
    Faker.seed(42)
    return fake


@pytest.fixture
def random_folder_name(faker_seed):
    """
    Generate realistic Notes folder names.

    Usage:
        name = random_folder_name()  # e.g. "Approach"
    """

    def _generate() -> str:
        return faker_seed.word().capitalize()

    return _generate


@pytest.fixture
def random_account_name(faker_seed):
    """Generate Notes account names such as a company or mail domain."""

    def _generate() -> str:
        return faker_seed.company().replace(":", "")

    return _generate
