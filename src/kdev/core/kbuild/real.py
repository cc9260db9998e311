"""Real kernel build operations using subprocess."""

import logging
import os
import subprocess
from pathlib import Path

from kdev.core.kbuild.abc import KernelBuild
from kdev.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


def build_env(path_prefix: Path | None) -> dict[str, str] | None:
    """Environment for a child process, with an optional PATH prefix.

    Returns None (inherit unchanged) when there is nothing to prepend.
    """
    if path_prefix is None:
        return None
    env = os.environ.copy()
    current = env.get("PATH", "")
    env["PATH"] = f"{path_prefix}{os.pathsep}{current}" if current else str(path_prefix)
    return env


class RealKernelBuild(KernelBuild):
    """Production implementation calling make, nm and the compiler driver."""

    def make(self, kernel_root: Path, args: list[str], *, path_prefix: Path | None = None) -> int:
        cmd = ["make", *args]
        logger.debug("Running %s in %s", cmd, kernel_root)
        # Exit code is the result here, so check=False and no capture
        result = run_subprocess_with_context(
            cmd,
            operation_context="run make",
            cwd=kernel_root,
            capture_output=False,
            check=False,
            env=build_env(path_prefix),
        )
        return result.returncode

    def list_symbols_by_size(self, vmlinux: Path) -> str:
        result = run_subprocess_with_context(
            ["nm", "--size-sort", "-r", str(vmlinux)],
            operation_context=f"list symbols in {vmlinux}",
        )
        return result.stdout

    def compiler_version_line(
        self, compiler: str, *, path_prefix: Path | None = None
    ) -> str | None:
        try:
            result = subprocess.run(
                [compiler, "--version"],
                capture_output=True,
                text=True,
                check=False,
                env=build_env(path_prefix),
                timeout=10,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired):
            logger.debug("Compiler %s could not be run", compiler)
            return None

        if result.returncode != 0 or not result.stdout:
            return None
        return result.stdout.splitlines()[0]
