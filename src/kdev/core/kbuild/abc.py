"""Kernel build system operations interface.

This module defines the abstract interface for the external build tools
(make, nm and the compiler driver), following the ABC-based dependency
injection used for every integration in kdev.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class KernelBuild(ABC):
    """Abstract interface for kernel build tool invocations.

    Real implementations use subprocess. Fake implementations are pure
    in-memory for unit tests without a kernel tree or toolchain.
    """

    @abstractmethod
    def make(self, kernel_root: Path, args: list[str], *, path_prefix: Path | None = None) -> int:
        """Run make in the kernel tree.

        Output is streamed to the terminal, not captured.

        Args:
            kernel_root: Directory to run make in
            args: Full make argument list (flags, variables, targets)
            path_prefix: Optional toolchain directory prepended to PATH

        Returns:
            Exit code from make
        """
        ...

    @abstractmethod
    def list_symbols_by_size(self, vmlinux: Path) -> str:
        """Return `nm --size-sort -r` output for the linked kernel image.

        Raises:
            RuntimeError: If nm fails or is not installed
        """
        ...

    @abstractmethod
    def compiler_version_line(
        self, compiler: str, *, path_prefix: Path | None = None
    ) -> str | None:
        """Return the first line of `<compiler> --version`.

        Returns:
            The raw first line, or None if the compiler cannot be run
        """
        ...
