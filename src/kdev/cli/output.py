"""Output utilities for CLI commands with clear intent.

user_output() is for humans and goes to stderr. machine_output() is for
anything another program consumes (size reports, the shell integration
script, the build counter) and goes to stdout.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Print a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Print machine-consumable output to stdout."""
    click.echo(message, nl=nl)


def format_duration(seconds: float) -> str:
    """Format a duration the way build timing is reported.

    Examples:
        >>> format_duration(4.2)
        '4.2s'
        >>> format_duration(83)
        '1m 23s'
        >>> format_duration(3723)
        '1h 2m 3s'
    """
    if seconds < 60:
        return f"{seconds:.1f}s"

    total = int(round(seconds))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}h {minutes}m {secs}s"
    return f"{minutes}m {secs}s"
