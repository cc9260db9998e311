import click

from kdev.cli.ensure import Ensure, fail
from kdev.cli.output import machine_output
from kdev.core.context import KdevContext
from kdev.core.kconfig import (
    commit_config,
    diff_config,
    edit_config_interactive,
    edit_config_raw,
    reset_config,
    resolve_editor,
)


@click.group("config")
def config_group() -> None:
    """Compare, update and edit the kernel configuration."""


@config_group.command("diff")
@click.pass_obj
def diff_cmd(ctx: KdevContext) -> None:
    """Show changes from the defconfig to the current config.

    Exits with status 1 when the two differ.
    """
    try:
        lines = diff_config(ctx.tree)
    except FileNotFoundError as e:
        fail(f"Config file not found: {e.filename}")

    for line in lines:
        machine_output(line)

    if lines:
        raise SystemExit(1)


@config_group.command("commit")
@click.pass_obj
def commit_cmd(ctx: KdevContext) -> None:
    """Overwrite the defconfig with the current config."""
    tree = ctx.tree
    Ensure.path_exists(
        tree.current_config_file, f"No current config at {tree.current_config_file}"
    )
    commit_config(tree)
    ctx.feedback.success(f"✓ Updated {tree.defconfig_file.relative_to(tree.root)}")


@config_group.command("reset")
@click.pass_obj
def reset_cmd(ctx: KdevContext) -> None:
    """Regenerate the current config from the defconfig."""
    try:
        exit_code = reset_config(ctx)
    except RuntimeError as e:
        fail(str(e))
    Ensure.exit_code_ok(exit_code, f"make {ctx.config.defconfig} failed")


@config_group.command("menu")
@click.pass_obj
def menu_cmd(ctx: KdevContext) -> None:
    """Open the interactive config editor (make nconfig)."""
    try:
        exit_code = edit_config_interactive(ctx)
    except RuntimeError as e:
        fail(str(e))
    Ensure.exit_code_ok(exit_code, "make nconfig failed")


@config_group.command("edit")
@click.option("--editor", help="Editor to use instead of $EDITOR.")
@click.pass_obj
def edit_cmd(ctx: KdevContext, editor: str | None) -> None:
    """Edit the current config as raw text."""
    chosen = resolve_editor(editor)
    try:
        exit_code = edit_config_raw(ctx, chosen)
    except RuntimeError as e:
        fail(str(e))
    Ensure.exit_code_ok(exit_code, f"{chosen} exited with code {exit_code}")
