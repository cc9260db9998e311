"""Kernel configuration inspection and editing.

The baseline is the checked-in defconfig; the current configuration is the
.config the build system generated in the output tree.
"""

import difflib
import os
from collections.abc import Mapping
from pathlib import Path

from kdev.core.context import KdevContext
from kdev.core.kernel_tree import KernelTree

DEFAULT_EDITOR = "vim"


def _display_name(tree: KernelTree, path: Path) -> str:
    """Path relative to the kernel root, or absolute when it lies outside it."""
    if path.is_relative_to(tree.root):
        return str(path.relative_to(tree.root))
    return str(path)


def diff_config(tree: KernelTree) -> list[str]:
    """Unified diff from the baseline defconfig to the current config.

    Returns:
        Diff lines without trailing newlines; empty when the files match

    Raises:
        FileNotFoundError: If either file is missing
    """
    baseline = tree.defconfig_file.read_text(encoding="utf-8").splitlines()
    current = tree.current_config_file.read_text(encoding="utf-8").splitlines()
    return list(
        difflib.unified_diff(
            baseline,
            current,
            fromfile=_display_name(tree, tree.defconfig_file),
            tofile=_display_name(tree, tree.current_config_file),
            lineterm="",
        )
    )


def commit_config(tree: KernelTree) -> None:
    """Overwrite the baseline defconfig with the current config.

    Raises:
        FileNotFoundError: If the current config does not exist
    """
    content = tree.current_config_file.read_bytes()
    tree.defconfig_file.parent.mkdir(parents=True, exist_ok=True)
    tree.defconfig_file.write_bytes(content)


def reset_config(ctx: KdevContext) -> int:
    """Regenerate the current config from the baseline via `make <defconfig>`."""
    return ctx.kbuild.make(
        ctx.kernel_root,
        [*ctx.config.base_compile_flags, ctx.config.defconfig],
        path_prefix=ctx.config.compiler.bin_dir,
    )


def edit_config_interactive(ctx: KdevContext) -> int:
    """Open the build system's interactive editor (`make nconfig`)."""
    return ctx.kbuild.make(
        ctx.kernel_root,
        [*ctx.config.base_compile_flags, "nconfig"],
        path_prefix=ctx.config.compiler.bin_dir,
    )


def resolve_editor(explicit: str | None, environ: Mapping[str, str] | None = None) -> str:
    """Pick the editor: explicit choice, then $EDITOR, then vim."""
    if explicit:
        return explicit
    env = os.environ if environ is None else environ
    return env.get("EDITOR") or DEFAULT_EDITOR


def edit_config_raw(ctx: KdevContext, editor: str) -> int:
    """Open the current .config in a text editor."""
    return ctx.shell.run_command([editor, str(ctx.tree.current_config_file)], cwd=ctx.cwd)
