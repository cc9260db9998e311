"""Transient boot of a kernel image on the attached device."""

import logging
from pathlib import Path

from kdev.core.adb.abc import has_booted_device
from kdev.core.context import KdevContext
from kdev.core.fastboot.abc import is_userspace_fastboot
from kdev.core.stage_result import StageResult

logger = logging.getLogger(__name__)


def install_image(ctx: KdevContext, image: Path) -> StageResult:
    """Boot image on the device via fastboot without flashing it.

    Gets the device into the bootloader first: from fastbootd with a fastboot
    reboot, from Android with an adb reboot. The two checks are independent;
    an absent device simply skips its reboot.
    """
    image_path = ctx.resolve(image)
    if not image_path.is_file():
        return StageResult.failed("install", f"Image not found: {image}")

    if is_userspace_fastboot(ctx.fastboot):
        logger.debug("Device is in fastbootd")
        ctx.feedback.info("Rebooting from fastbootd into the bootloader")
        ctx.fastboot.reboot_bootloader()

    if has_booted_device(ctx.adb):
        logger.debug("Device is running Android")
        ctx.feedback.info("Rebooting from Android into the bootloader")
        ctx.adb.reboot_bootloader()

    start = ctx.time.monotonic()
    exit_code = ctx.fastboot.boot(image_path)
    duration = ctx.time.monotonic() - start
    if exit_code != 0:
        return StageResult.failed(
            "install", f"fastboot boot exited with code {exit_code}", duration_seconds=duration
        )
    return StageResult(
        stage="install", success=True, duration_seconds=duration, output_path=image_path
    )
