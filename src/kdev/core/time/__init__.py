from kdev.core.time.abc import Time
from kdev.core.time.real import RealTime

__all__ = ["RealTime", "Time"]
