from kdev.core.shell.abc import Shell, detect_shell_from_env
from kdev.core.shell.dry_run import DryRunShell
from kdev.core.shell.real import RealShell

__all__ = ["DryRunShell", "RealShell", "Shell", "detect_shell_from_env"]
