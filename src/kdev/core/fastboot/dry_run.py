"""No-op wrapper for fastboot operations."""

from pathlib import Path

from kdev.cli.output import user_output
from kdev.core.fastboot.abc import Fastboot


class DryRunFastboot(Fastboot):
    """Prints device-changing fastboot commands instead of running them.

    Device probes are delegated to the wrapped implementation.
    """

    def __init__(self, wrapped: Fastboot) -> None:
        self._wrapped = wrapped

    def list_devices(self) -> list[str]:
        return self._wrapped.list_devices()

    def get_var(self, name: str) -> str | None:
        return self._wrapped.get_var(name)

    def reboot_bootloader(self) -> None:
        user_output("[dry-run] fastboot reboot bootloader")

    def boot(self, image: Path) -> int:
        user_output(f"[dry-run] fastboot boot {image}")
        return 0
