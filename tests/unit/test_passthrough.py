"""
Unit tests for the pass-through CLI.
"""

import signal
import subprocess
from unittest.mock import patch

import pytest

from notes_exporter.cli.passthrough import RawArgs, main, parse_raw_args
from notes_exporter.config.constants import VERSION


class TestParseRawArgs:
    """Tests for splitting wrapper options from script arguments."""

    def test_no_arguments(self):
        assert parse_raw_args([]) == RawArgs()

    def test_positionals_are_forwarded(self):
        parsed = parse_raw_args(["iCloud:Work", "/tmp/out"])
        assert parsed.passthrough_args == ["iCloud:Work", "/tmp/out"]

    def test_script_override(self):
        parsed = parse_raw_args(["--script", "custom.applescript", "Work", "out"])

        assert parsed.script_override == "custom.applescript"
        assert parsed.passthrough_args == ["Work", "out"]

    def test_order_of_forwarded_arguments_is_kept(self):
        parsed = parse_raw_args(["a", "--script", "s", "b", "c"])
        assert parsed.passthrough_args == ["a", "b", "c"]

    def test_double_dash_forwards_everything_after_it(self):
        parsed = parse_raw_args(["Work", "--", "--script", "x", "-h"])

        assert parsed.script_override is None
        assert parsed.wants_help is False
        assert parsed.passthrough_args == ["Work", "--script", "x", "-h"]

    @pytest.mark.parametrize(
        "argv,attribute",
        [
            (["-h"], "wants_help"),
            (["--help"], "wants_help"),
            (["-v"], "wants_version"),
            (["--version"], "wants_version"),
            (["--print-script-path"], "wants_print_script_path"),
        ],
    )
    def test_flags(self, argv, attribute):
        assert getattr(parse_raw_args(argv), attribute) is True

    @pytest.mark.parametrize(
        "argv",
        [
            ["--script"],
            ["--script", "--help"],
            ["--script=", "Folder", "/out"],
            ["--script", "  ", "Folder"],
        ],
    )
    def test_script_requires_a_value(self, argv, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_raw_args(argv)

        assert exc_info.value.code == 2
        assert "--script" in capsys.readouterr().err


class TestPassthroughMain:
    """Tests for the pass-through entry point."""

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert VERSION in capsys.readouterr().out

    def test_print_script_path(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        assert main(["--script", "mine.applescript", "--print-script-path"]) == 0
        assert str((tmp_path / "mine.applescript").resolve()) in capsys.readouterr().out

    def test_help_shows_resolved_script(self, fake_script, capsys):
        assert main(["--script", str(fake_script), "--help"]) == 0

        out = capsys.readouterr().out
        assert "Resolved AppleScript path" in out
        assert str(fake_script.resolve()) in out

    def test_forwards_arguments(self, fake_script, on_macos, mock_run):
        result = main(["--script", str(fake_script), "iCloud:Work", "/tmp/out"])

        assert result == 0
        assert mock_run.call_args[0][0] == [
            "osascript",
            str(fake_script.resolve()),
            "iCloud:Work",
            "/tmp/out",
        ]

    def test_exits_with_script_status(self, fake_script, on_macos, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=3)

        assert main(["--script", str(fake_script)]) == 3

    def test_signal_maps_to_one(self, fake_script, on_macos, mock_run, capsys):
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=-signal.SIGTERM
        )

        assert main(["--script", str(fake_script)]) == 1
        assert "SIGTERM" in capsys.readouterr().err

    def test_missing_script(self, tmp_path, on_macos, mock_run, capsys):
        missing = tmp_path / "missing.applescript"

        assert main(["--script", str(missing)]) == 1

        err = capsys.readouterr().err
        assert "Error: AppleScript not found" in err
        assert "git submodule update" in err
        mock_run.assert_not_called()

    def test_wrong_platform(self, fake_script, mock_run, capsys):
        with patch("notes_exporter.core.runner.current_platform", return_value="linux"):
            assert main(["--script", str(fake_script)]) == 1

        assert "only works on macOS" in capsys.readouterr().err
        mock_run.assert_not_called()

    def test_launch_failure(self, fake_script, on_macos, mock_run, capsys):
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory", "osascript")

        assert main(["--script", str(fake_script)]) == 1
        assert "Failed to launch osascript" in capsys.readouterr().err

    def test_empty_script_never_runs_default(
        self, fake_script, on_macos, mock_run, capsys
    ):
        with patch(
            "notes_exporter.cli.passthrough.get_default_script_path",
            return_value=fake_script,
        ):
            with pytest.raises(SystemExit) as exc_info:
                main(["--script=", "Folder", "/out"])

        assert exc_info.value.code == 2
        assert "--script requires a path value" in capsys.readouterr().err
        mock_run.assert_not_called()
