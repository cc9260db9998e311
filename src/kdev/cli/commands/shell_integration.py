import click

from kdev.cli.output import machine_output
from kdev.core.context import KdevContext
from kdev.core.shell_script import render_setup_script


@click.command("shell-init")
@click.pass_obj
def shell_init_cmd(ctx: KdevContext) -> None:
    """Print the shell setup script.

    Load it into bash or zsh with `source <(kdev shell-init)`; run `unsetup`
    to remove everything it defined.
    """
    machine_output(render_setup_script(ctx.config, ctx.kernel_root), nl=False)


@click.command("root")
@click.pass_obj
def root_cmd(ctx: KdevContext) -> None:
    """Print the kernel root directory."""
    machine_output(str(ctx.kernel_root))
