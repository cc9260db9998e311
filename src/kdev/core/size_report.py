"""Size reports for compiled objects and kernel symbols."""

import math
from dataclasses import dataclass
from pathlib import Path

from kdev.core.context import KdevContext

DEFAULT_OBJECT_LIMIT = 75
DEFAULT_SYMBOL_LIMIT = 25

# Link outputs that aggregate other objects
AGGREGATE_OBJECTS = frozenset({"built-in.o", "vmlinux.o"})

# nm types for uninitialized data (.bss)
BSS_SYMBOL_TYPES = frozenset({"b", "B"})


@dataclass(frozen=True)
class ObjectSize:
    path: Path  # Relative to the output directory
    size: int

    @property
    def source_name(self) -> str:
        """The source file the object was compiled from."""
        return self.path.with_suffix(".c").as_posix()


def format_apparent_size(size: int) -> str:
    """Human-readable size in the style of `du -h`, rounding up.

    Examples:
        >>> format_apparent_size(512)
        '512'
        >>> format_apparent_size(4000)
        '4.0K'
        >>> format_apparent_size(12 * 1024 + 1)
        '13K'
    """
    if size < 1024:
        return str(size)

    value = float(size)
    unit = "K"
    for unit in "KMGTP":
        value /= 1024
        if value < 1024:
            break

    if value < 10:
        rounded = math.ceil(value * 10) / 10
        if rounded < 10:
            return f"{rounded:.1f}{unit}"
    return f"{math.ceil(value)}{unit}"


def collect_object_sizes(out_dir: Path) -> list[ObjectSize]:
    """All compiled objects under out_dir, largest first."""
    objects = [
        ObjectSize(path=path.relative_to(out_dir), size=path.stat().st_size)
        for path in out_dir.rglob("*.o")
        if path.is_file() and path.name not in AGGREGATE_OBJECTS
    ]
    objects.sort(key=lambda obj: (-obj.size, obj.path.as_posix()))
    return objects


def object_size_report(ctx: KdevContext, limit: int = DEFAULT_OBJECT_LIMIT) -> list[str]:
    """Largest objects as `<size>\\t<source file>` lines."""
    objects = collect_object_sizes(ctx.tree.out_dir)[:limit]
    return [f"{format_apparent_size(obj.size)}\t{obj.source_name}" for obj in objects]


def filter_symbol_lines(nm_output: str) -> list[str]:
    """Drop .bss symbols from `nm --size-sort -r` output.

    Lines look like `<size> <type> <name>`.
    """
    lines: list[str] = []
    for line in nm_output.splitlines():
        parts = line.split()
        if len(parts) < 3:
            continue
        if parts[1] in BSS_SYMBOL_TYPES:
            continue
        lines.append(line)
    return lines


def symbol_size_report(ctx: KdevContext, limit: int = DEFAULT_SYMBOL_LIMIT) -> list[str]:
    """Largest non-bss symbols in vmlinux, as printed by nm.

    Raises:
        RuntimeError: If nm fails
    """
    output = ctx.kbuild.list_symbols_by_size(ctx.tree.vmlinux)
    return filter_symbol_lines(output)[:limit]
