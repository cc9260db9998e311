"""Kernel build tool subpackage.

Abstractions over make, nm and the compiler driver with support for testing
via fakes and dry-run via wrappers.
"""

from kdev.core.kbuild.abc import KernelBuild
from kdev.core.kbuild.dry_run import DryRunKernelBuild
from kdev.core.kbuild.real import RealKernelBuild

__all__ = ["DryRunKernelBuild", "KernelBuild", "RealKernelBuild"]
