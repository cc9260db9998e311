"""Kernel tree discovery.

Finds the kernel root from a given path without requiring a full KdevContext
(enables config loading before context creation).
"""

import os
from collections.abc import Mapping
from pathlib import Path

from kdev.core.config_store import CONFIG_FILENAME

# Exported by the shell helpers so they act on the tree they were set up for
KERNEL_ROOT_ENV = "KDEV_ROOT"


def discover_kernel_root(cwd: Path) -> Path | None:
    """Walk up from `cwd` to find a directory containing kdev.toml.

    Returns:
        The first directory (cwd included) holding kdev.toml, or None
    """
    cur = cwd.resolve()
    for parent in [cur, *cur.parents]:
        if (parent / CONFIG_FILENAME).is_file():
            return parent
    return None


def resolve_kernel_root(cwd: Path, environ: Mapping[str, str] | None = None) -> Path:
    """Kernel root for this invocation.

    $KDEV_ROOT wins when set; otherwise the nearest kdev.toml above cwd, and
    finally cwd itself.
    """
    env = os.environ if environ is None else environ
    override = env.get(KERNEL_ROOT_ENV)
    if override:
        return Path(override)
    return discover_kernel_root(cwd) or cwd
