import click

from kdev.cli.stage_output import run_chain
from kdev.core.context import KdevContext
from kdev.core.workflow import clean_release, release

PASSTHROUGH = {"ignore_unknown_options": True, "allow_interspersed_args": False}


@click.command("release", context_settings=PASSTHROUGH)
@click.argument("version", type=click.IntRange(min=1))
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def release_cmd(ctx: KdevContext, version: int, args: tuple[str, ...]) -> None:
    """Build an incremental release package v<VERSION>.

    ARGS are passed through to make.
    """
    run_chain(ctx, lambda: release(ctx, version, args))


@click.command("clean-release", context_settings=PASSTHROUGH)
@click.argument("version", type=click.IntRange(min=1))
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def clean_release_cmd(ctx: KdevContext, version: int, args: tuple[str, ...]) -> None:
    """Build a clean release package v<VERSION>."""
    run_chain(ctx, lambda: clean_release(ctx, version, args))
