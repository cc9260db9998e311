import click

from kdev.cli.ensure import Ensure, fail
from kdev.cli.output import machine_output
from kdev.core.context import KdevContext
from kdev.core.size_report import (
    DEFAULT_OBJECT_LIMIT,
    DEFAULT_SYMBOL_LIMIT,
    object_size_report,
    symbol_size_report,
)


@click.group("size")
def size_group() -> None:
    """Find what takes up space in the kernel."""


@size_group.command("objects")
@click.argument("limit", type=click.IntRange(min=1), default=DEFAULT_OBJECT_LIMIT, required=False)
@click.pass_obj
def objects_cmd(ctx: KdevContext, limit: int) -> None:
    """List the LIMIT largest compiled objects (default 75)."""
    out_dir = ctx.tree.out_dir
    Ensure.path_exists(out_dir, f"Output directory not found: {out_dir}")
    for line in object_size_report(ctx, limit):
        machine_output(line)


@size_group.command("symbols")
@click.argument("limit", type=click.IntRange(min=1), default=DEFAULT_SYMBOL_LIMIT, required=False)
@click.pass_obj
def symbols_cmd(ctx: KdevContext, limit: int) -> None:
    """List the LIMIT largest symbols in vmlinux, excluding .bss (default 25)."""
    vmlinux = ctx.tree.vmlinux
    Ensure.path_exists(vmlinux, f"vmlinux not found at {vmlinux} - build the kernel first")
    try:
        lines = symbol_size_report(ctx, limit)
    except RuntimeError as e:
        fail(str(e))
    for line in lines:
        machine_output(line)
