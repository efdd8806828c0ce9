"""Unit tests for shell execution utilities."""

from unittest.mock import MagicMock, patch

import pytest
from fsview.utils.shell import CommandResult, command_exists, run_command


class TestCommandResult:
    """Tests for CommandResult."""

    def test_success(self) -> None:
        """Exit code zero is a success."""
        assert CommandResult(stdout="", stderr="", returncode=0).success
        assert not CommandResult(stdout="", stderr="", returncode=2).success


class TestRunCommand:
    """Tests for run_command function."""

    @patch("fsview.utils.shell.subprocess.run")
    def test_captures_output(self, mock_run: MagicMock) -> None:
        """run_command wraps the completed process."""
        mock_run.return_value = MagicMock(stdout="/real/path\n", stderr="", returncode=0)

        result = run_command(["readlink", "-f", "/link"], timeout=5)

        assert result == CommandResult(stdout="/real/path\n", stderr="", returncode=0)
        assert mock_run.call_args.kwargs["capture_output"] is True
        assert mock_run.call_args.kwargs["timeout"] == 5
        assert mock_run.call_args.kwargs["errors"] is None

    @patch("fsview.utils.shell.subprocess.run")
    def test_forwards_decoding_errors(self, mock_run: MagicMock) -> None:
        """The decoding error handler is passed to subprocess."""
        mock_run.return_value = MagicMock(stdout="caf\udce9\n", stderr="", returncode=0)

        result = run_command(["readlink", "-f", "/link"], errors="surrogateescape")

        assert result.stdout == "caf\udce9\n"
        assert mock_run.call_args.kwargs["errors"] == "surrogateescape"

    def test_raises_file_not_found(self) -> None:
        """Missing executables raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            run_command(["definitely-not-a-real-command-fsview"])


class TestCommandExists:
    """Tests for command_exists function."""

    @patch("fsview.utils.shell.shutil.which", return_value="/usr/bin/readlink")
    def test_found(self, mock_which: MagicMock) -> None:
        """Commands on PATH exist."""
        assert command_exists("readlink")
        mock_which.assert_called_once_with("readlink")

    @patch("fsview.utils.shell.shutil.which", return_value=None)
    def test_missing(self, mock_which: MagicMock) -> None:
        """Commands not on PATH do not exist."""
        assert not command_exists("readlink")
