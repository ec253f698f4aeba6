"""
Tests for process dispatch and the ccline entry point.
"""

import os
import sys
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from ccline.cli import main
from ccline.dispatch import dispatch, normalize_exit_code
from ccline.errors import (
    ABNORMAL_EXIT_CODE,
    LAUNCHER_EXIT_CODE,
    BinaryNotFoundError,
    SpawnError,
    UnsupportedPlatformError,
)

PYTHON = sys.executable


# ==================== ProcessDispatcher Tests ====================

class TestNormalizeExitCode:
    """Tests for normalize_exit_code()."""

    @pytest.mark.parametrize("code", [0, 1, 2, 127, 255])
    def test_passthrough(self, code):
        assert normalize_exit_code(code) == code

    def test_signal_termination(self):
        assert normalize_exit_code(-9) == 137
        assert normalize_exit_code(-15) == 143

    def test_missing_status(self):
        assert normalize_exit_code(None) == ABNORMAL_EXIT_CODE


class TestDispatch:
    """Tests for dispatch() with real child processes."""

    @pytest.mark.parametrize("code", [0, 1, 3, 42, 255])
    def test_exit_code_fidelity(self, code):
        assert dispatch(PYTHON, ["-c", f"import sys; sys.exit({code})"]) == code

    def test_arguments_forwarded_unchanged(self, tmp_path):
        out = tmp_path / "argv.txt"
        script = "import sys; open(sys.argv[1], 'w').write('\\n'.join(sys.argv[2:]))"
        args = [str(out), "--config", "a b", "", "--theme=nord"]
        assert dispatch(PYTHON, ["-c", script] + args) == 0
        assert out.read_text().split("\n") == ["--config", "a b", "", "--theme=nord"]

    def test_stdout_is_inherited(self, capfd):
        dispatch(PYTHON, ["-c", "print('statusline')"])
        captured = capfd.readouterr()
        assert captured.out.strip() == "statusline"

    def test_missing_binary(self, tmp_path):
        missing = tmp_path / "ccline"
        with pytest.raises(SpawnError) as exc_info:
            dispatch(missing, [])
        assert exc_info.value.path == missing
        assert str(missing) in str(exc_info.value)

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_not_executable(self, tmp_path):
        binary = tmp_path / "ccline"
        binary.write_text("#!/bin/sh\nexit 0\n")
        binary.chmod(0o644)
        with pytest.raises(SpawnError) as exc_info:
            dispatch(binary, [])
        assert exc_info.value.reason

    def test_keeps_waiting_after_interrupt(self):
        proc = Mock()
        proc.wait.side_effect = [KeyboardInterrupt(), 130]
        with patch("ccline.dispatch.subprocess.Popen", return_value=proc) as popen:
            assert dispatch("/opt/ccline", ["--help"]) == 130
        popen.assert_called_once_with(["/opt/ccline", "--help"], shell=False)
        assert proc.wait.call_count == 2


# ==================== CLI Tests ====================

class TestMain:
    """Tests for the ccline entry point."""

    def test_forwards_argv(self):
        binary = Path("/opt/ccline/ccline")
        with patch("ccline.binary.find_binary", return_value=binary), \
                patch("ccline.dispatch.dispatch", return_value=0) as run:
            assert main(["--print", "--theme", "gruvbox"]) == 0
        run.assert_called_once_with(binary, ["--print", "--theme", "gruvbox"])

    def test_defaults_to_sys_argv(self):
        binary = Path("/opt/ccline/ccline")
        with patch.object(sys, "argv", ["ccline", "--check"]), \
                patch("ccline.binary.find_binary", return_value=binary), \
                patch("ccline.dispatch.dispatch", return_value=0) as run:
            main()
        run.assert_called_once_with(binary, ["--check"])

    def test_returns_child_exit_code(self):
        with patch("ccline.binary.find_binary", return_value=Path(PYTHON)):
            assert main(["-c", "import sys; sys.exit(7)"]) == 7

    def test_unsupported_platform(self, capsys):
        err = UnsupportedPlatformError("linux-ppc64le-musl", "darwin (x64/arm64)")
        with patch("ccline.binary.find_binary", side_effect=err), \
                patch("ccline.dispatch.dispatch") as run:
            assert main([]) == LAUNCHER_EXIT_CODE
        run.assert_not_called()
        captured = capsys.readouterr()
        assert captured.out == ""
        lines = captured.err.splitlines()
        assert lines[0] == "Error: Unsupported platform linux-ppc64le-musl"
        assert lines[1] == "Supported platforms: darwin (x64/arm64)"

    def test_binary_not_found(self, capsys, tmp_path):
        err = BinaryNotFoundError(tmp_path / "ccline_linux_x64" / "ccline", "ccline-linux-x64")
        with patch("ccline.binary.find_binary", side_effect=err):
            assert main(["--help"]) == LAUNCHER_EXIT_CODE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: Binary not found at ")
        assert "Expected package: ccline-linux-x64" in captured.err

    def test_spawn_failure(self, capsys, tmp_path):
        with patch("ccline.binary.find_binary", return_value=tmp_path / "ccline"):
            assert main([]) == LAUNCHER_EXIT_CODE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: Failed to execute ")

    def test_loads_env_file(self, isolated_env):
        env_file = isolated_env / "ccline" / ".env"
        env_file.parent.mkdir(parents=True)
        env_file.write_text("CCLINE_DEBUG=1\n")
        with patch("ccline.binary.find_binary", return_value=Path("/opt/ccline")), \
                patch("ccline.dispatch.dispatch", return_value=0), \
                patch("ccline.cli.set_verbose") as set_verbose:
            main([])
        set_verbose.assert_called_once_with(True)
        assert os.environ["CCLINE_DEBUG"] == "1"
