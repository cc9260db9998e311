import click

from kdev.cli.output import user_output
from kdev.core.config_store import BuildConfig
from kdev.core.context import KdevContext


@click.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing kdev.toml.")
@click.pass_obj
def init_cmd(ctx: KdevContext, force: bool) -> None:
    """Write a kdev.toml with default settings into the kernel root."""
    store = ctx.config_store
    config_path = store.path(ctx.kernel_root)

    if store.exists(ctx.kernel_root) and not force:
        user_output(
            click.style("Error: ", fg="red")
            + f"{config_path} already exists.\n\n"
            + "Use --force to overwrite the existing configuration."
        )
        raise SystemExit(1)

    store.save(ctx.kernel_root, BuildConfig.defaults())
    user_output(click.style("✓ ", fg="green") + f"Created {config_path}")

    shell_info = ctx.shell.detect_shell()
    if shell_info is None:
        return
    shell_name, rc_file = shell_info
    user_output("")
    user_output(f"To load the helper functions in every {shell_name} session, add to {rc_file}:")
    user_output('  source <(kdev shell-init)')
