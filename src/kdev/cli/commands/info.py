import click
from rich.console import Console
from rich.table import Table

from kdev.core.context import KdevContext
from kdev.core.toolchain import compiler_command, compiler_version
from kdev.core.versioning import BuildCounterMissing, read_build_counter

TOOLS = ("make", "nm", "adb", "fastboot")


def _counter_text(ctx: KdevContext) -> str:
    try:
        return read_build_counter(ctx.tree)
    except BuildCounterMissing:
        return "[dim]not built[/dim]"


@click.command("info")
@click.pass_obj
def info_cmd(ctx: KdevContext) -> None:
    """Show the build configuration, toolchain and build counter."""
    config = ctx.config
    config_path = ctx.config_store.path(ctx.kernel_root)

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("key", style="cyan", no_wrap=True)
    table.add_column("value")

    table.add_row("kernel root", str(ctx.kernel_root))
    if ctx.config_store.exists(ctx.kernel_root):
        table.add_row("config", str(config_path))
    else:
        table.add_row("config", "[yellow]defaults[/yellow] (run `kdev init`)")
    table.add_row("kernel", config.kernel_name)
    table.add_row("device", config.device_name)
    table.add_row("defconfig", config.defconfig)
    table.add_row("arch", config.arch)
    table.add_row("jobs", str(config.jobs))
    table.add_row("make flags", " ".join(config.base_compile_flags))

    version = compiler_version(ctx)
    table.add_row("compiler", f"{compiler_command(config)} ({config.compiler.name})")
    table.add_row("compiler version", version or "[red]unknown[/red]")
    if config.compiler.bin_dir is not None:
        table.add_row("toolchain dir", str(config.compiler.bin_dir))

    table.add_row("build counter", _counter_text(ctx))

    for tool in TOOLS:
        path = ctx.shell.get_installed_tool_path(tool)
        table.add_row(tool, path or "[red]not found[/red]")

    console = Console(stderr=True)
    console.print(table)
