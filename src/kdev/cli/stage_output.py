"""Reporting of workflow chain outcomes at the CLI boundary."""

from collections.abc import Callable

import click

from kdev.cli.ensure import Ensure
from kdev.cli.output import format_duration, user_output
from kdev.core.context import KdevContext
from kdev.core.stage_result import StageResult


def run_chain(ctx: KdevContext, chain: Callable[[], StageResult]) -> StageResult:
    """Run a workflow chain, exiting with a styled error if any stage fails.

    A RuntimeError from an integration (a missing tool, for instance) is
    reported the same way as a failed stage.
    """
    try:
        result = chain()
    except RuntimeError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e

    Ensure.stage_succeeded(result)

    if result.stage == "package" and result.output_path is not None:
        ctx.feedback.success(
            f"✓ Created {result.output_path} ({format_duration(result.duration_seconds)})"
        )
    return result
