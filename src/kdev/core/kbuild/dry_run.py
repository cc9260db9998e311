"""No-op wrapper for kernel build operations."""

from pathlib import Path

from kdev.cli.output import user_output
from kdev.core.kbuild.abc import KernelBuild
from kdev.core.subprocess import format_command


class DryRunKernelBuild(KernelBuild):
    """No-op wrapper that prints make invocations instead of running them.

    Read-only operations are delegated to the wrapped implementation.

    Usage:
        real_ops = RealKernelBuild()
        noop_ops = DryRunKernelBuild(real_ops)

        # Prints "[dry-run] make -j6 ..." and returns 0
        noop_ops.make(kernel_root, ["-j6", "ARCH=arm64"])
    """

    def __init__(self, wrapped: KernelBuild) -> None:
        self._wrapped = wrapped

    def make(self, kernel_root: Path, args: list[str], *, path_prefix: Path | None = None) -> int:
        user_output(f"[dry-run] {format_command(['make', *args])}")
        return 0

    def list_symbols_by_size(self, vmlinux: Path) -> str:
        return self._wrapped.list_symbols_by_size(vmlinux)

    def compiler_version_line(
        self, compiler: str, *, path_prefix: Path | None = None
    ) -> str | None:
        return self._wrapped.compiler_version_line(compiler, path_prefix=path_prefix)
