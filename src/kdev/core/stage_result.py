"""Result type shared by every workflow stage."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StageResult:
    """Outcome of one workflow stage.

    A chain runs its next stage only when the previous result succeeded, and
    returns the first failed result unchanged so the caller can report it.
    `exit_code` is set when the stage failed because an external command
    exited non-zero.
    """

    stage: str
    success: bool
    duration_seconds: float = 0.0
    output_path: Path | None = None
    message: str | None = None
    exit_code: int | None = None

    @staticmethod
    def failed(
        stage: str,
        message: str,
        duration_seconds: float = 0.0,
        exit_code: int | None = None,
    ) -> "StageResult":
        return StageResult(
            stage=stage,
            success=False,
            duration_seconds=duration_seconds,
            message=message,
            exit_code=exit_code,
        )
