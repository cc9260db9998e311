"""No-op wrapper for shell operations."""

from pathlib import Path

from kdev.cli.output import user_output
from kdev.core.shell.abc import Shell
from kdev.core.subprocess import format_command


class DryRunShell(Shell):
    """Prints foreground commands instead of running them."""

    def __init__(self, wrapped: Shell) -> None:
        self._wrapped = wrapped

    def detect_shell(self) -> tuple[str, Path] | None:
        return self._wrapped.detect_shell()

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return self._wrapped.get_installed_tool_path(tool_name)

    def run_command(
        self, command: list[str], cwd: Path | None = None, env: dict[str, str] | None = None
    ) -> int:
        user_output(f"[dry-run] {format_command(command)}")
        return 0
