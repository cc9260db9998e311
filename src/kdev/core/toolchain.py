"""Compiler identification for the configured compiler profile."""

import re

from kdev.core.config_store import BuildConfig
from kdev.core.context import KdevContext


def normalize_clang_version(line: str) -> str:
    """User-friendly clang version from the first `--version` line.

    Squeezes repeated spaces, trims trailing whitespace and drops any vendor
    text before the last mention of clang.

    Example:
        >>> normalize_clang_version("Android (6443078 based on r383902)  clang version 11.0.1 ")
        'clang version 11.0.1'
    """
    text = re.sub(r" +", " ", line)
    text = text.rstrip()
    return re.sub(r"^.*clang", "clang", text)


def normalize_gcc_version(line: str) -> str:
    """User-friendly gcc version from the first `--version` line.

    Example:
        >>> normalize_gcc_version("aarch64-linux-gnu-gcc (GCC) 10.2.0")
        'GCC 10.2.0'
    """
    parts = line.split("(")
    field = parts[1] if len(parts) > 1 else line
    return field.replace(")", "").rstrip()


def compiler_command(config: BuildConfig) -> str:
    """The compiler executable the build will use.

    An explicit CC= flag wins; gcc honours CROSS_COMPILE.
    """
    flags = dict(flag.split("=", 1) for flag in config.compiler.flags if "=" in flag)
    if "CC" in flags:
        return flags["CC"]
    if config.compiler.name == "gcc":
        return f"{flags.get('CROSS_COMPILE', '')}gcc"
    return "clang"


def compiler_version(ctx: KdevContext) -> str | None:
    """Normalized version of the configured compiler, or None if it cannot be run."""
    line = ctx.kbuild.compiler_version_line(
        compiler_command(ctx.config), path_prefix=ctx.config.compiler.bin_dir
    )
    if line is None:
        return None
    if ctx.config.compiler.name == "gcc":
        return normalize_gcc_version(line)
    return normalize_clang_version(line)
