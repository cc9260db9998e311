"""Real shell operations."""

import logging
import os
import shutil
from pathlib import Path

from kdev.core.shell.abc import Shell, detect_shell_from_env, merged_env
from kdev.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealShell(Shell):
    """Production implementation using $SHELL, shutil.which and subprocess."""

    def detect_shell(self) -> tuple[str, Path] | None:
        return detect_shell_from_env(os.environ.get("SHELL", ""))

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)

    def run_command(
        self, command: list[str], cwd: Path | None = None, env: dict[str, str] | None = None
    ) -> int:
        logger.debug("Running %s in %s", command, cwd)
        result = run_subprocess_with_context(
            command,
            operation_context=f"run {command[0]}",
            cwd=cwd,
            capture_output=False,
            check=False,
            env=merged_env(env),
        )
        return result.returncode
