"""Shell operations interface.

Covers the interactive shell the user sources kdev into, and running
user-facing programs (the packaging script, the text editor) in the
foreground.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path


def detect_shell_from_env(shell_env: str) -> tuple[str, Path] | None:
    """Map a $SHELL value to (shell_name, rc_file), or None if unsupported."""
    if not shell_env:
        return None
    shell_name = Path(shell_env).name
    if shell_name == "bash":
        return ("bash", Path.home() / ".bashrc")
    if shell_name == "zsh":
        return ("zsh", Path.home() / ".zshrc")
    return None


class Shell(ABC):
    """Abstract interface for shell detection and foreground commands."""

    @abstractmethod
    def detect_shell(self) -> tuple[str, Path] | None:
        """Detect the user's interactive shell.

        Returns:
            (shell_name, rc_file) for a supported shell, None otherwise
        """
        ...

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Return the absolute path of an executable on PATH, or None."""
        ...

    @abstractmethod
    def run_command(
        self, command: list[str], cwd: Path | None = None, env: dict[str, str] | None = None
    ) -> int:
        """Run a command in the foreground, attached to the terminal.

        Args:
            command: Command and arguments
            cwd: Working directory
            env: Extra environment variables layered over the current environment

        Returns:
            Exit code of the command
        """
        ...


def merged_env(extra: dict[str, str] | None) -> dict[str, str] | None:
    if not extra:
        return None
    env = os.environ.copy()
    env.update(extra)
    return env
