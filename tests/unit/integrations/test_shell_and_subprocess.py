"""Tests for shell detection and the subprocess wrapper."""

import os
import sys
from pathlib import Path

import pytest

from kdev.core.kbuild.real import build_env
from kdev.core.shell.abc import detect_shell_from_env, merged_env
from kdev.core.subprocess import format_command, run_subprocess_with_context


@pytest.mark.parametrize(
    ("shell_env", "expected"),
    [
        ("/bin/bash", ("bash", Path.home() / ".bashrc")),
        ("/usr/local/bin/zsh", ("zsh", Path.home() / ".zshrc")),
        ("/usr/bin/fish", None),
        ("", None),
    ],
)
def test_detect_shell_from_env(shell_env: str, expected: tuple[str, Path] | None) -> None:
    assert detect_shell_from_env(shell_env) == expected


def test_build_env_prepends_toolchain(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATH", "/usr/bin")

    env = build_env(Path("/opt/clang/bin"))

    assert env is not None
    assert env["PATH"] == f"/opt/clang/bin{os.pathsep}/usr/bin"
    assert build_env(None) is None


def test_merged_env_layers_extra_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", "/home/dev")

    env = merged_env({"KDEV_VERSION": "v3"})

    assert env is not None
    assert env["KDEV_VERSION"] == "v3"
    assert env["HOME"] == "/home/dev"
    assert merged_env(None) is None


def test_failed_command_becomes_runtime_error() -> None:
    cmd = [sys.executable, "-c", "import sys; print('boom', file=sys.stderr); sys.exit(3)"]

    with pytest.raises(RuntimeError) as exc_info:
        run_subprocess_with_context(cmd, operation_context="run the failing tool")

    message = str(exc_info.value)
    assert "Failed to run the failing tool" in message
    assert "Exit code: 3" in message
    assert "boom" in message


def test_missing_binary_becomes_runtime_error() -> None:
    with pytest.raises(RuntimeError, match="kdev-no-such-tool"):
        run_subprocess_with_context(["kdev-no-such-tool"], operation_context="run a missing tool")


def test_format_command() -> None:
    assert format_command(["make", Path("out"), "-j6"]) == "make out -j6"


def test_non_executable_binary_becomes_runtime_error(tmp_path: Path) -> None:
    script = tmp_path / "pack-img.sh"
    script.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    script.chmod(0o644)

    with pytest.raises(RuntimeError, match="Cannot execute"):
        run_subprocess_with_context([str(script)], operation_context="package the image")
