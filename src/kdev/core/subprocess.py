"""Subprocess execution with rich error context.

Integration classes call external tools through this wrapper so that an
unexpected failure surfaces as a RuntimeError naming the operation, the command
line and whatever the tool printed.
"""

import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    capture_output: bool = True,
    check: bool = True,
    env: Mapping[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess with enriched error reporting for integration layer.

    Wraps subprocess.run() to catch CalledProcessError and re-raise as RuntimeError
    with operation context, stderr output, and command details.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution
        capture_output: Whether to capture stdout/stderr as text (default: True)
        check: Whether to raise on non-zero exit (default: True)
        env: Full environment for the child, None to inherit ours

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        RuntimeError: If the command fails, its binary is missing, or it
            cannot be executed
    """
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=capture_output,
            text=True,
            encoding="utf-8",
            check=check,
            env=env,
        )

    except subprocess.CalledProcessError as e:
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {format_command(cmd)}"
        error_msg += f"\nExit code: {e.returncode}"

        if e.stdout and e.stdout.strip():
            error_msg += f"\nstdout: {e.stdout.strip()}"

        if e.stderr and e.stderr.strip():
            error_msg += f"\nstderr: {e.stderr.strip()}"

        raise RuntimeError(error_msg) from e

    except FileNotFoundError as e:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {format_command(cmd)}"
        raise RuntimeError(error_msg) from e

    except OSError as e:
        error_msg = f"Cannot execute {cmd[0]} while trying to {operation_context}: {e.strerror}"
        error_msg += f"\nFull command: {format_command(cmd)}"
        raise RuntimeError(error_msg) from e


def format_command(cmd: Sequence[str]) -> str:
    """Render a command line for display in dry-run and error output."""
    return " ".join(str(arg) for arg in cmd)
