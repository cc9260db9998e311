from pathlib import Path

import click

from kdev.cli.stage_output import run_chain
from kdev.core.context import KdevContext
from kdev.core.packaging import DEFAULT_IMAGE_PATH, create_package, create_test_package


@click.command("package")
@click.argument(
    "output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_IMAGE_PATH,
    required=False,
)
@click.option(
    "--release-version",
    type=click.IntRange(min=0),
    envvar="RELEASE_VER",
    default=None,
    help="Package as stable release v<N> instead of a test build (env: RELEASE_VER).",
)
@click.pass_obj
def package_cmd(ctx: KdevContext, output: Path, release_version: int | None) -> None:
    """Create a flashable image of the current kernel build at OUTPUT."""
    run_chain(ctx, lambda: create_package(ctx, output, release_version=release_version))


@click.command("package-test")
@click.pass_obj
def package_test_cmd(ctx: KdevContext) -> None:
    """Create a test package named after the build counter."""
    run_chain(ctx, lambda: create_test_package(ctx))
