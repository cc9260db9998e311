"""Real adb operations using subprocess."""

import logging
import subprocess

from kdev.core.adb.abc import Adb, AdbDevice
from kdev.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

PROBE_TIMEOUT_SECONDS = 10


def parse_adb_devices(output: str) -> list[AdbDevice]:
    """Parse `adb devices` output, skipping the header and daemon chatter."""
    devices: list[AdbDevice] = []
    for line in output.splitlines():
        if line.startswith("List of devices") or line.startswith("*"):
            continue
        parts = line.split()
        if len(parts) >= 2:
            devices.append(AdbDevice(serial=parts[0], state=parts[1]))
    return devices


class RealAdb(Adb):
    """Production implementation calling the adb CLI."""

    def list_devices(self) -> list[AdbDevice]:
        try:
            result = subprocess.run(
                ["adb", "devices"],
                capture_output=True,
                text=True,
                check=False,
                timeout=PROBE_TIMEOUT_SECONDS,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired):
            logger.debug("adb devices probe failed")
            return []
        if result.returncode != 0:
            return []
        return parse_adb_devices(result.stdout)

    def reboot_bootloader(self) -> None:
        result = run_subprocess_with_context(
            ["adb", "reboot", "bootloader"],
            operation_context="reboot device into bootloader via adb",
            check=False,
        )
        if result.returncode != 0:
            logger.debug("adb reboot bootloader exited with %d", result.returncode)
