"""Fastboot operations interface."""

from abc import ABC, abstractmethod
from pathlib import Path


class Fastboot(ABC):
    """Abstract interface for the fastboot device tool.

    Probes (list_devices, get_var) never raise for an absent device or a
    missing tool; they report "nothing found" instead.
    """

    @abstractmethod
    def list_devices(self) -> list[str]:
        """Return serials of devices currently in fastboot mode."""
        ...

    @abstractmethod
    def get_var(self, name: str) -> str | None:
        """Return the value of a bootloader variable, or None if unavailable."""
        ...

    @abstractmethod
    def reboot_bootloader(self) -> None:
        """Reboot the attached device into the bootloader."""
        ...

    @abstractmethod
    def boot(self, image: Path) -> int:
        """Boot an image transiently without flashing it.

        Returns:
            Exit code from fastboot
        """
        ...


def is_userspace_fastboot(fastboot: Fastboot) -> bool:
    """Check whether the attached device is in fastbootd (userspace fastboot)."""
    if not fastboot.list_devices():
        return False
    return fastboot.get_var("is-userspace") == "yes"
