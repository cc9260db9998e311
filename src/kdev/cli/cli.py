import logging
import os

import click

from kdev.cli.commands.build import (
    build_install_cmd,
    clean_build_cmd,
    inc_build_cmd,
    make_cmd,
    test_build_cmd,
)
from kdev.cli.commands.config import config_group
from kdev.cli.commands.counter import counter_group
from kdev.cli.commands.info import info_cmd
from kdev.cli.commands.init import init_cmd
from kdev.cli.commands.install import install_cmd
from kdev.cli.commands.package import package_cmd, package_test_cmd
from kdev.cli.commands.release import clean_release_cmd, release_cmd
from kdev.cli.commands.shell_integration import root_cmd, shell_init_cmd
from kdev.cli.commands.size import size_group
from kdev.cli.help_formatter import GroupedCommandGroup
from kdev.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(cls=GroupedCommandGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="kdev")
@click.option("--dry-run", is_flag=True, help="Print external commands instead of running them.")
@click.option("-q", "--quiet", is_flag=True, help="Only show errors.")
@click.pass_context
def cli(ctx: click.Context, dry_run: bool, quiet: bool) -> None:
    """Interactive helpers for Android kernel development."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run, quiet=quiet)


cli.add_command(make_cmd)
cli.add_command(clean_build_cmd)
cli.add_command(inc_build_cmd)
cli.add_command(test_build_cmd)
cli.add_command(package_cmd)
cli.add_command(package_test_cmd)
cli.add_command(release_cmd)
cli.add_command(clean_release_cmd)
cli.add_command(counter_group)
cli.add_command(install_cmd)
cli.add_command(build_install_cmd)
cli.add_command(config_group)
cli.add_command(size_group)
cli.add_command(info_cmd)
cli.add_command(init_cmd)
cli.add_command(shell_init_cmd)
cli.add_command(root_cmd)


def main() -> None:
    """CLI entry point used by the `kdev` console script."""
    # Enable debug logging if KDEV_DEBUG environment variable is set
    if os.environ.get("KDEV_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    cli()
