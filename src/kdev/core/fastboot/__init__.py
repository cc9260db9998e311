from kdev.core.fastboot.abc import Fastboot, is_userspace_fastboot
from kdev.core.fastboot.dry_run import DryRunFastboot
from kdev.core.fastboot.real import RealFastboot

__all__ = ["DryRunFastboot", "Fastboot", "RealFastboot", "is_userspace_fastboot"]
