"""Custom Click help formatter for organized command display."""

import click

SECTIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Build", ("make", "clean-build", "inc-build", "test-build")),
    ("Package & Release", ("package", "package-test", "release", "clean-release", "counter")),
    ("Device", ("install", "build-install")),
    ("Inspection", ("config", "size", "info")),
    ("Setup", ("init", "shell-init", "root")),
)


class GroupedCommandGroup(click.Group):
    """Click Group that organizes commands into workflow sections in help output."""

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format commands into organized sections."""
        commands: dict[str, click.Command] = {}
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands[subcommand] = cmd

        if not commands:
            return

        placed: set[str] = set()
        for title, names in SECTIONS:
            rows = [(name, commands[name]) for name in names if name in commands]
            if rows:
                with formatter.section(title):
                    self._format_command_list(formatter, rows)
                placed.update(name for name, _ in rows)

        others = [(name, cmd) for name, cmd in commands.items() if name not in placed]
        if others:
            with formatter.section("Other"):
                self._format_command_list(formatter, others)

    def _format_command_list(
        self,
        formatter: click.HelpFormatter,
        commands: list[tuple[str, click.Command]],
    ) -> None:
        """Format a list of commands with their help text."""
        rows = [(name, cmd.get_short_help_str(limit=formatter.width)) for name, cmd in commands]
        if rows:
            formatter.write_dl(rows)
