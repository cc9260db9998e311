"""Fake kernel build operations for testing without a toolchain."""

from pathlib import Path

from kdev.core.kbuild.abc import KernelBuild


class FakeKernelBuild(KernelBuild):
    """In-memory fake of make, nm and the compiler driver.

    Records every make invocation. Exit codes are consumed in order from
    `exit_codes`; once exhausted, make succeeds.

    When `counter_file` is given, every successful make that is not a `clean`
    bumps it the way the kernel build does: 1 when missing, otherwise the
    previous number plus one.

    Example:
        kbuild = FakeKernelBuild(exit_codes=[0, 2])
        kbuild.make(root, ["clean"])  # 0
        kbuild.make(root, ["-j6"])  # 2
        assert kbuild.make_calls[1][1] == ["-j6"]
    """

    def __init__(
        self,
        *,
        exit_codes: list[int] | None = None,
        counter_file: Path | None = None,
        nm_output: str = "",
        nm_error: str | None = None,
        compiler_versions: dict[str, str] | None = None,
    ) -> None:
        self._exit_codes = list(exit_codes or [])
        self._counter_file = counter_file
        self._nm_output = nm_output
        self._nm_error = nm_error
        self._compiler_versions = compiler_versions or {}
        self.make_calls: list[tuple[Path, list[str], Path | None]] = []
        self.nm_calls: list[Path] = []
        self.version_calls: list[tuple[str, Path | None]] = []

    def make(self, kernel_root: Path, args: list[str], *, path_prefix: Path | None = None) -> int:
        self.make_calls.append((kernel_root, list(args), path_prefix))
        exit_code = self._exit_codes.pop(0) if self._exit_codes else 0
        if exit_code == 0 and self._counter_file is not None and "clean" not in args:
            self._bump_counter(self._counter_file)
        return exit_code

    def list_symbols_by_size(self, vmlinux: Path) -> str:
        self.nm_calls.append(vmlinux)
        if self._nm_error is not None:
            raise RuntimeError(self._nm_error)
        return self._nm_output

    def compiler_version_line(
        self, compiler: str, *, path_prefix: Path | None = None
    ) -> str | None:
        self.version_calls.append((compiler, path_prefix))
        return self._compiler_versions.get(compiler)

    @property
    def make_args(self) -> list[list[str]]:
        """Argument lists of every make call, for test assertions."""
        return [args for _, args, _ in self.make_calls]

    @staticmethod
    def _bump_counter(counter_file: Path) -> None:
        counter_file.parent.mkdir(parents=True, exist_ok=True)
        if counter_file.exists():
            value = int(counter_file.read_text(encoding="utf-8").strip()) + 1
        else:
            value = 1
        counter_file.write_text(f"{value}\n", encoding="utf-8")
