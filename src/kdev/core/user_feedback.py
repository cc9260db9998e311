"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod

import click

from kdev.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output that's mode-aware.

    Workflow code calls ctx.feedback methods instead of threading a `quiet`
    flag through every function.

    Two modes:
    - Interactive: Show all diagnostics (info, success, errors)
    - Quiet: Suppress diagnostics, only show errors (`kdev --quiet`).
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown, even in quiet mode)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green", bold=True))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))


class SuppressedFeedback(UserFeedback):
    """Feedback for quiet mode (only errors shown)."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))
