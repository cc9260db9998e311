"""Real time implementation using time.monotonic()."""

import time

from kdev.core.time.abc import Time


class RealTime(Time):
    """Production implementation using the system monotonic clock."""

    def monotonic(self) -> float:
        return time.monotonic()
