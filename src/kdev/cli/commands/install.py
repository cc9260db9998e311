from pathlib import Path

import click

from kdev.cli.stage_output import run_chain
from kdev.core.context import KdevContext
from kdev.core.install import install_image
from kdev.core.packaging import DEFAULT_IMAGE_PATH


@click.command("install")
@click.argument(
    "image",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_IMAGE_PATH,
    required=False,
)
@click.pass_obj
def install_cmd(ctx: KdevContext, image: Path) -> None:
    """Boot IMAGE (default: flash.img) on the device via fastboot.

    The image is booted once, not flashed.
    """
    run_chain(ctx, lambda: install_image(ctx, image))
