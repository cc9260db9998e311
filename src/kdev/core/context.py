"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import click

from kdev.cli.output import user_output
from kdev.core.adb.abc import Adb
from kdev.core.adb.dry_run import DryRunAdb
from kdev.core.adb.real import RealAdb
from kdev.core.config_store import (
    BuildConfig,
    ConfigStore,
    FilesystemConfigStore,
    with_jobs_override,
)
from kdev.core.fastboot.abc import Fastboot
from kdev.core.fastboot.dry_run import DryRunFastboot
from kdev.core.fastboot.real import RealFastboot
from kdev.core.kbuild.abc import KernelBuild
from kdev.core.kbuild.dry_run import DryRunKernelBuild
from kdev.core.kbuild.real import RealKernelBuild
from kdev.core.kernel_root import resolve_kernel_root
from kdev.core.kernel_tree import KernelTree
from kdev.core.shell.abc import Shell
from kdev.core.shell.dry_run import DryRunShell
from kdev.core.shell.real import RealShell
from kdev.core.time.abc import Time
from kdev.core.time.real import RealTime
from kdev.core.user_feedback import InteractiveFeedback, SuppressedFeedback, UserFeedback


@dataclass(frozen=True)
class KdevContext:
    """Immutable context holding all dependencies for kdev operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    kbuild: KernelBuild
    fastboot: Fastboot
    adb: Adb
    shell: Shell
    time: Time
    config_store: ConfigStore
    feedback: UserFeedback
    cwd: Path  # Current working directory at CLI invocation
    kernel_root: Path
    config: BuildConfig
    dry_run: bool

    @property
    def tree(self) -> KernelTree:
        return KernelTree(root=self.kernel_root, config=self.config)

    def resolve(self, path: Path) -> Path:
        """Resolve a user-supplied path against the invocation directory."""
        if path.is_absolute():
            return path
        return self.cwd / path

    @staticmethod
    def for_test(
        kbuild: KernelBuild | None = None,
        fastboot: Fastboot | None = None,
        adb: Adb | None = None,
        shell: Shell | None = None,
        time: Time | None = None,
        config_store: ConfigStore | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
        kernel_root: Path | None = None,
        config: BuildConfig | None = None,
        dry_run: bool = False,
    ) -> "KdevContext":
        """Create test context with optional pre-configured integration classes.

        Any integration not supplied is replaced with its empty fake. The
        kernel root defaults to cwd, and cwd defaults to a sentinel path so
        that a test never touches the real working directory by accident.

        Example:
            >>> kbuild = FakeKernelBuild(exit_codes=[2])
            >>> ctx = KdevContext.for_test(kbuild=kbuild, cwd=tmp_path)
        """
        from tests.fakes.adb import FakeAdb
        from tests.fakes.fastboot import FakeFastboot
        from tests.fakes.kbuild import FakeKernelBuild
        from tests.fakes.shell import FakeShell
        from tests.fakes.time import FakeTime
        from tests.fakes.user_feedback import FakeUserFeedback

        from kdev.core.config_store import InMemoryConfigStore

        if kbuild is None:
            kbuild = FakeKernelBuild()

        if fastboot is None:
            fastboot = FakeFastboot()

        if adb is None:
            adb = FakeAdb()

        if shell is None:
            shell = FakeShell()

        if time is None:
            time = FakeTime()

        if feedback is None:
            feedback = FakeUserFeedback()

        if config is None:
            config = BuildConfig.defaults()

        if config_store is None:
            config_store = InMemoryConfigStore(config=config)

        if cwd is None:
            cwd = Path("/test/default/cwd")

        if kernel_root is None:
            kernel_root = cwd

        # Apply dry-run wrappers if needed (matching production behavior)
        if dry_run:
            kbuild = DryRunKernelBuild(kbuild)
            fastboot = DryRunFastboot(fastboot)
            adb = DryRunAdb(adb)
            shell = DryRunShell(shell)

        return KdevContext(
            kbuild=kbuild,
            fastboot=fastboot,
            adb=adb,
            shell=shell,
            time=time,
            config_store=config_store,
            feedback=feedback,
            cwd=cwd,
            kernel_root=kernel_root,
            config=config,
            dry_run=dry_run,
        )


def safe_cwd() -> tuple[Path | None, str | None]:
    """Get current working directory, detecting if it no longer exists.

    Returns:
        (path, None) on success, (None, error_message) if the directory is gone
    """
    try:
        return (Path.cwd(), None)
    except (FileNotFoundError, OSError):
        return (None, "Current working directory no longer exists")


def _exit_with_error(message: str) -> NoReturn:
    user_output(click.style("Error: ", fg="red") + message)
    raise SystemExit(1)


def create_context(*, dry_run: bool, quiet: bool = False) -> KdevContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap process-spawning integrations with dry-run
                 wrappers that print intended commands without executing them
        quiet: If True, use SuppressedFeedback so that only errors reach
               the terminal

    Returns:
        KdevContext with real implementations
    """
    # 1. Capture cwd (no deps)
    cwd, error_msg = safe_cwd()
    if cwd is None:
        _exit_with_error(error_msg or "Current working directory is unavailable")

    # 2. Locate the kernel tree; outside one, the cwd stands in with defaults
    config_store = FilesystemConfigStore()
    kernel_root = resolve_kernel_root(cwd)

    # 3. Load build config (defaults if not initialized yet)
    try:
        if config_store.exists(kernel_root):
            config = config_store.load(kernel_root)
        else:
            config = BuildConfig.defaults()
        config = with_jobs_override(config)
    except ValueError as e:
        _exit_with_error(str(e))

    # 4. Choose feedback implementation based on mode
    feedback: UserFeedback
    if quiet:
        feedback = SuppressedFeedback()
    else:
        feedback = InteractiveFeedback()

    # 5. Create integration classes, wrapped for dry-run if needed
    kbuild: KernelBuild = RealKernelBuild()
    fastboot: Fastboot = RealFastboot()
    adb: Adb = RealAdb()
    shell: Shell = RealShell()
    if dry_run:
        kbuild = DryRunKernelBuild(kbuild)
        fastboot = DryRunFastboot(fastboot)
        adb = DryRunAdb(adb)
        shell = DryRunShell(shell)

    return KdevContext(
        kbuild=kbuild,
        fastboot=fastboot,
        adb=adb,
        shell=shell,
        time=RealTime(),
        config_store=config_store,
        feedback=feedback,
        cwd=cwd,
        kernel_root=kernel_root,
        config=config,
        dry_run=dry_run,
    )
