"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from pathlib import Path
from typing import NoReturn

import click

from kdev.cli.output import user_output
from kdev.core.stage_result import StageResult


def fail(error_message: str) -> NoReturn:
    """Output a styled error and exit with status 1."""
    user_output(click.style("Error: ", fg="red") + error_message)
    raise SystemExit(1)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def path_exists(path: Path, error_message: str | None = None) -> None:
        """Ensure path exists, otherwise output styled error and exit.

        Example:
            >>> Ensure.path_exists(tree.vmlinux, "vmlinux not found - build the kernel first")
        """
        if not path.exists():
            fail(error_message or f"Path not found: {path}")

    @staticmethod
    def stage_succeeded(result: StageResult) -> StageResult:
        """Ensure a workflow chain succeeded, otherwise report its failed stage and exit.

        Exits with the failing command's own status when the stage carries one.
        """
        if not result.success:
            Ensure.exit_code_ok(
                result.exit_code or 1,
                f"{result.stage} failed: {result.message or 'unknown error'}",
            )
        return result

    @staticmethod
    def exit_code_ok(exit_code: int, error_message: str) -> None:
        """Ensure an external command exited with 0, otherwise exit with its code."""
        if exit_code != 0:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(exit_code)
