"""Time operations abstraction for testing.

This module provides an ABC for clock operations so that build timing can be
measured against a fake clock in tests.
"""

from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic clock reading in seconds.

        Only the difference between two readings is meaningful.
        """
        ...
