"""Build, package and install pipelines.

Every chain is a sequence of stages where a stage runs only when the one
before it succeeded. The first failed StageResult is returned as-is.
"""

import logging

from kdev.cli.output import format_duration
from kdev.core.context import KdevContext
from kdev.core.install import install_image
from kdev.core.packaging import (
    DEFAULT_IMAGE_PATH,
    create_package,
    create_test_package,
    release_package_path,
)
from kdev.core.stage_result import StageResult

logger = logging.getLogger(__name__)


def compile_kernel(ctx: KdevContext, extra_args: list[str] | tuple[str, ...] = ()) -> StageResult:
    """Run make with the base flags plus extra_args and report the elapsed time."""
    args = [*ctx.config.base_compile_flags, *extra_args]
    logger.debug("make args: %s", args)

    start = ctx.time.monotonic()
    exit_code = ctx.kbuild.make(ctx.kernel_root, args, path_prefix=ctx.config.compiler.bin_dir)
    duration = ctx.time.monotonic() - start

    if exit_code != 0:
        ctx.feedback.error(
            f"Build failed after {format_duration(duration)} (exit code {exit_code})"
        )
        return StageResult.failed(
            "compile",
            f"make exited with code {exit_code}",
            duration_seconds=duration,
            exit_code=exit_code,
        )

    ctx.feedback.info(f"Build finished in {format_duration(duration)}")
    return StageResult(stage="compile", success=True, duration_seconds=duration)


def clean(ctx: KdevContext) -> StageResult:
    return compile_kernel(ctx, ["clean"])


def release(
    ctx: KdevContext, version: int, extra_args: list[str] | tuple[str, ...] = ()
) -> StageResult:
    """Build and package a stable release tagged v<version>."""
    result = compile_kernel(
        ctx, [f"LOCALVERSION=-v{version}", "KBUILD_BUILD_VERSION=1", *extra_args]
    )
    if not result.success:
        return result
    return create_package(ctx, release_package_path(ctx, version), release_version=version)


def clean_release(
    ctx: KdevContext, version: int, extra_args: list[str] | tuple[str, ...] = ()
) -> StageResult:
    result = clean(ctx)
    if not result.success:
        return result
    return release(ctx, version, extra_args)


def clean_build(ctx: KdevContext, extra_args: list[str] | tuple[str, ...] = ()) -> StageResult:
    """Build a clean working-copy package."""
    result = clean(ctx)
    if not result.success:
        return result
    return incremental_build(ctx, extra_args)


def incremental_build(
    ctx: KdevContext, extra_args: list[str] | tuple[str, ...] = ()
) -> StageResult:
    """Build an incremental working-copy package."""
    result = compile_kernel(ctx, extra_args)
    if not result.success:
        return result
    return create_package(ctx, DEFAULT_IMAGE_PATH)


def build_test_package(
    ctx: KdevContext, extra_args: list[str] | tuple[str, ...] = ()
) -> StageResult:
    """Build an incremental test package."""
    result = compile_kernel(ctx, extra_args)
    if not result.success:
        return result
    return create_test_package(ctx)


def build_and_install(
    ctx: KdevContext, extra_args: list[str] | tuple[str, ...] = ()
) -> StageResult:
    """Build an incremental working-copy kernel and boot it on the device."""
    result = incremental_build(ctx, extra_args)
    if not result.success:
        return result
    return install_image(ctx, DEFAULT_IMAGE_PATH)
