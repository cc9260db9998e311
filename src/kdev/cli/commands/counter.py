import click

from kdev.cli.ensure import fail
from kdev.cli.output import machine_output
from kdev.core.context import KdevContext
from kdev.core.versioning import BuildCounterMissing, read_build_counter, reset_build_counter


@click.group("counter")
def counter_group() -> None:
    """Inspect or reset the kernel build counter."""


@counter_group.command("show")
@click.pass_obj
def show_cmd(ctx: KdevContext) -> None:
    """Print the current build number."""
    try:
        machine_output(read_build_counter(ctx.tree))
    except BuildCounterMissing as e:
        fail(str(e))


@counter_group.command("reset")
@click.pass_obj
def reset_cmd(ctx: KdevContext) -> None:
    """Reset the build number; the next build starts over."""
    if reset_build_counter(ctx.tree):
        ctx.feedback.success("✓ Build counter reset")
    else:
        ctx.feedback.info("Build counter already reset")
