"""Fake fastboot operations for testing without a device."""

from pathlib import Path

from kdev.core.fastboot.abc import Fastboot


class FakeFastboot(Fastboot):
    """In-memory fake fastboot.

    Attributes:
        reboot_calls: Number of reboot_bootloader() calls
        boot_calls: Images passed to boot()

    Example:
        # Device sitting in fastbootd
        fastboot = FakeFastboot(devices=["0A1B2C"], variables={"is-userspace": "yes"})
    """

    def __init__(
        self,
        *,
        devices: list[str] | None = None,
        variables: dict[str, str] | None = None,
        boot_exit_code: int = 0,
    ) -> None:
        self._devices = list(devices or [])
        self._variables = dict(variables or {})
        self._boot_exit_code = boot_exit_code
        self.reboot_calls = 0
        self.boot_calls: list[Path] = []

    def list_devices(self) -> list[str]:
        return list(self._devices)

    def get_var(self, name: str) -> str | None:
        if not self._devices:
            return None
        return self._variables.get(name)

    def reboot_bootloader(self) -> None:
        self.reboot_calls += 1

    def boot(self, image: Path) -> int:
        self.boot_calls.append(image)
        return self._boot_exit_code
