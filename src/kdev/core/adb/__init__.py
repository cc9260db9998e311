from kdev.core.adb.abc import Adb, AdbDevice, has_booted_device
from kdev.core.adb.dry_run import DryRunAdb
from kdev.core.adb.real import RealAdb

__all__ = ["Adb", "AdbDevice", "DryRunAdb", "RealAdb", "has_booted_device"]
