"""No-op wrapper for adb operations."""

from kdev.cli.output import user_output
from kdev.core.adb.abc import Adb, AdbDevice


class DryRunAdb(Adb):
    """Prints the reboot command instead of running it; probes are delegated."""

    def __init__(self, wrapped: Adb) -> None:
        self._wrapped = wrapped

    def list_devices(self) -> list[AdbDevice]:
        return self._wrapped.list_devices()

    def reboot_bootloader(self) -> None:
        user_output("[dry-run] adb reboot bootloader")
