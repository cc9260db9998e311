"""Flashable image creation.

Stages the kernel image and device tree blobs into the flasher payload
directory, then hands off to the tree's packaging script.
"""

import logging
import os
import shutil
from pathlib import Path

from kdev.core.context import KdevContext
from kdev.core.stage_result import StageResult
from kdev.core.versioning import BuildCounterMissing, describe_version, read_build_counter

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_PATH = Path("flash.img")
BUILDS_DIR = Path("builds")


def counter_package_path(ctx: KdevContext, counter: str) -> Path:
    """builds/<kernel>-<device>-test<counter>.img"""
    config = ctx.config
    return BUILDS_DIR / f"{config.kernel_name}-{config.device_name}-test{counter}.img"


def release_package_path(ctx: KdevContext, version: int) -> Path:
    """builds/<kernel>-<device>-v<version>.img"""
    config = ctx.config
    return BUILDS_DIR / f"{config.kernel_name}-{config.device_name}-v{version}.img"


def _stage_payload(ctx: KdevContext, dtbs: list[Path]) -> None:
    """Copy the kernel image and the concatenated DTBs into the payload directory."""
    tree = ctx.tree
    payload_dir = tree.payload_dir
    payload_dir.mkdir(parents=True, exist_ok=True)

    shutil.copyfile(tree.kernel_image, payload_dir / tree.kernel_image.name)

    with (payload_dir / "dtb").open("wb") as out:
        for dtb in dtbs:
            out.write(dtb.read_bytes())


def create_package(
    ctx: KdevContext, output_path: Path, release_version: int | None = None
) -> StageResult:
    """Create a flashable image with the current kernel build at output_path.

    Args:
        ctx: Application context
        output_path: Destination image, relative paths resolve against ctx.cwd
        release_version: Positive number for a stable release; None or 0 for a
            test build numbered by the build counter

    Returns:
        StageResult naming the produced image, or the reason packaging failed
    """
    tree = ctx.tree
    start = ctx.time.monotonic()

    # A working-copy image is still packaged right after a counter reset
    version = describe_version(tree, release_version, allow_missing_counter=True)
    if not version.version:
        logger.warning("No build counter at %s, packaging without a version", tree.counter_file)

    if not tree.kernel_image.is_file():
        return StageResult.failed("package", f"Kernel image not found: {tree.kernel_image}")

    dtbs = sorted(tree.dtb_dir.glob("*.dtb")) if tree.dtb_dir.is_dir() else []
    if not dtbs:
        return StageResult.failed("package", f"No device tree blobs found in {tree.dtb_dir}")

    if not tree.pack_script.is_file():
        return StageResult.failed("package", f"Packaging script not found: {tree.pack_script}")
    if not os.access(tree.pack_script, os.X_OK):
        return StageResult.failed(
            "package", f"Packaging script is not executable: {tree.pack_script}"
        )

    destination = ctx.resolve(output_path)
    try:
        _stage_payload(ctx, dtbs)
        # The destination directory must exist and the destination itself must not
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.unlink(missing_ok=True)
    except OSError as e:
        return StageResult.failed("package", f"Failed to prepare package inputs: {e}")

    logger.debug("Packaging %s as %s %s", destination, version.label, version.version)
    ctx.feedback.info(f"  IMG     {output_path}")

    exit_code = ctx.shell.run_command(
        [str(tree.pack_script), str(destination)], cwd=ctx.cwd, env=version.as_env()
    )
    duration = ctx.time.monotonic() - start
    if exit_code != 0:
        return StageResult.failed(
            "package",
            f"Packaging script exited with code {exit_code}",
            duration_seconds=duration,
            exit_code=exit_code,
        )

    return StageResult(
        stage="package",
        success=True,
        duration_seconds=duration,
        output_path=destination,
    )


def create_test_package(ctx: KdevContext) -> StageResult:
    """Create a test package named after the current build counter."""
    try:
        counter = read_build_counter(ctx.tree)
    except BuildCounterMissing as e:
        return StageResult.failed("package", f"{e} - build the kernel first")
    return create_package(ctx, counter_package_path(ctx, counter))
