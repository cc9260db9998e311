"""Adb operations interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class AdbDevice:
    """One row of `adb devices` output."""

    serial: str
    state: str  # "device", "recovery", "unauthorized", "offline", ...


class Adb(ABC):
    """Abstract interface for the adb device tool."""

    @abstractmethod
    def list_devices(self) -> list[AdbDevice]:
        """Return attached devices; empty when none or adb is unavailable."""
        ...

    @abstractmethod
    def reboot_bootloader(self) -> None:
        """Reboot the attached device into the bootloader."""
        ...


def has_booted_device(adb: Adb) -> bool:
    """Check whether a device running the full OS is attached."""
    return any(device.state == "device" for device in adb.list_devices())
