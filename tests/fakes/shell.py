"""Fake implementation of Shell for testing.

This fake enables testing shell-dependent functionality without
requiring specific shell configurations, installed tools or a packaging script.
"""

from pathlib import Path

from kdev.core.shell.abc import Shell


class FakeShell(Shell):
    """In-memory fake implementation of shell operations.

    Constructor Injection:
    - All state is provided via constructor parameters
    - Only call tracking mutates after construction

    When to Use:
    - Testing commands that detect the user's shell (init)
    - Testing behavior when tools are/aren't installed (info)
    - Testing packaging without a real pack script

    Examples:
        # Pack script that "creates" its output file
        >>> shell = FakeShell(create_output=True)
        >>> shell.run_command(["flasher/pack-img.sh", "/tmp/flash.img"])
        0

        # Failing editor
        >>> shell = FakeShell(command_exit_code=1)
    """

    def __init__(
        self,
        *,
        detected_shell: tuple[str, Path] | None = None,
        installed_tools: dict[str, str] | None = None,
        command_exit_code: int = 0,
        create_output: bool = False,
    ) -> None:
        """Initialize fake with predetermined shell and tool availability.

        Args:
            detected_shell: Shell to return from detect_shell(), or None if no shell
                should be detected. Format: (shell_name, rc_file_path)
            installed_tools: Mapping of tool name to executable path. Tools not in
                this mapping will return None from get_installed_tool_path()
            command_exit_code: Exit code to return from run_command() (default: 0)
            create_output: If True, a successful run_command() writes a placeholder
                file at the path given as the command's last argument, the way
                the packaging script produces its image
        """
        self._detected_shell = detected_shell
        self._installed_tools = installed_tools or {}
        self._command_exit_code = command_exit_code
        self._create_output = create_output
        self._command_calls: list[tuple[list[str], Path | None, dict[str, str] | None]] = []

    def detect_shell(self) -> tuple[str, Path] | None:
        """Return the shell configured at construction time."""
        return self._detected_shell

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Return the tool path if configured, None otherwise."""
        return self._installed_tools.get(tool_name)

    def run_command(
        self, command: list[str], cwd: Path | None = None, env: dict[str, str] | None = None
    ) -> int:
        """Track call to run_command and return configured exit code."""
        self._command_calls.append((list(command), cwd, dict(env) if env else None))
        if self._create_output and self._command_exit_code == 0:
            Path(command[-1]).write_bytes(b"ANDROID!")
        return self._command_exit_code

    @property
    def command_calls(self) -> list[tuple[list[str], Path | None, dict[str, str] | None]]:
        """Get the list of run_command() calls that were made.

        Returns list of (command, cwd, env) tuples.

        This property is for test assertions only.
        """
        return self._command_calls.copy()
