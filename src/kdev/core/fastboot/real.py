"""Real fastboot operations using subprocess."""

import logging
import subprocess
from pathlib import Path

from kdev.core.fastboot.abc import Fastboot
from kdev.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

PROBE_TIMEOUT_SECONDS = 10


def parse_fastboot_devices(output: str) -> list[str]:
    """Parse `fastboot devices` output into serials.

    Lines look like `<serial>\\tfastboot`.
    """
    serials: list[str] = []
    for line in output.splitlines():
        parts = line.split()
        if len(parts) >= 2 and parts[1] == "fastboot":
            serials.append(parts[0])
    return serials


def parse_getvar(output: str, name: str) -> str | None:
    """Extract `<name>: <value>` from `fastboot getvar` output."""
    prefix = f"{name}:"
    for line in output.splitlines():
        stripped = line.strip()
        if stripped.startswith(prefix):
            return stripped[len(prefix) :].strip()
    return None


class RealFastboot(Fastboot):
    """Production implementation calling the fastboot CLI."""

    def _probe(self, args: list[str]) -> str | None:
        try:
            result = subprocess.run(
                ["fastboot", *args],
                capture_output=True,
                text=True,
                check=False,
                timeout=PROBE_TIMEOUT_SECONDS,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired):
            logger.debug("fastboot %s probe failed", " ".join(args))
            return None
        # fastboot reports getvar results on stderr
        return result.stdout + result.stderr

    def list_devices(self) -> list[str]:
        output = self._probe(["devices"])
        if output is None:
            return []
        return parse_fastboot_devices(output)

    def get_var(self, name: str) -> str | None:
        output = self._probe(["getvar", name])
        if output is None:
            return None
        return parse_getvar(output, name)

    def reboot_bootloader(self) -> None:
        result = run_subprocess_with_context(
            ["fastboot", "reboot", "bootloader"],
            operation_context="reboot device into bootloader via fastboot",
            check=False,
        )
        if result.returncode != 0:
            logger.debug("fastboot reboot bootloader exited with %d", result.returncode)

    def boot(self, image: Path) -> int:
        result = run_subprocess_with_context(
            ["fastboot", "boot", str(image)],
            operation_context=f"boot {image}",
            capture_output=False,
            check=False,
        )
        return result.returncode
