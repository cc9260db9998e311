import click

from kdev.cli.stage_output import run_chain
from kdev.core.context import KdevContext
from kdev.core.workflow import (
    build_and_install,
    build_test_package,
    clean_build,
    compile_kernel,
    incremental_build,
)

PASSTHROUGH = {"ignore_unknown_options": True, "allow_interspersed_args": False}


@click.command("make", context_settings=PASSTHROUGH)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def make_cmd(ctx: KdevContext, args: tuple[str, ...]) -> None:
    """Run make with the configured kernel flags plus ARGS."""
    run_chain(ctx, lambda: compile_kernel(ctx, args))


@click.command("clean-build", context_settings=PASSTHROUGH)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def clean_build_cmd(ctx: KdevContext, args: tuple[str, ...]) -> None:
    """Build a clean working-copy package."""
    run_chain(ctx, lambda: clean_build(ctx, args))


@click.command("inc-build", context_settings=PASSTHROUGH)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def inc_build_cmd(ctx: KdevContext, args: tuple[str, ...]) -> None:
    """Build an incremental working-copy package."""
    run_chain(ctx, lambda: incremental_build(ctx, args))


@click.command("test-build", context_settings=PASSTHROUGH)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def test_build_cmd(ctx: KdevContext, args: tuple[str, ...]) -> None:
    """Build an incremental test package."""
    run_chain(ctx, lambda: build_test_package(ctx, args))


@click.command("build-install", context_settings=PASSTHROUGH)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def build_install_cmd(ctx: KdevContext, args: tuple[str, ...]) -> None:
    """Build an incremental working-copy kernel and boot it via fastboot."""
    run_chain(ctx, lambda: build_and_install(ctx, args))
