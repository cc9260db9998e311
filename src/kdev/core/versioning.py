"""Build counter and package version metadata."""

from dataclasses import dataclass

from kdev.core.kernel_tree import KernelTree


class BuildCounterMissing(Exception):
    """Raised when the build counter file does not exist yet."""


@dataclass(frozen=True)
class VersionDescriptor:
    """Version metadata for one package.

    Stable releases carry `v<N>`; test builds carry the raw build counter.
    """

    prefix: str  # "v" or "test"
    label: str  # "stable" or "test"
    version: str

    @property
    def is_release(self) -> bool:
        return self.label == "stable"

    def as_env(self) -> dict[str, str]:
        """Environment variables exported to the packaging script."""
        return {
            "KDEV_BUILD_TYPE": self.label,
            "KDEV_VERSION_PREFIX": self.prefix,
            "KDEV_VERSION": self.version,
        }


def read_build_counter(tree: KernelTree) -> str:
    """Return the build counter exactly as the build system wrote it.

    Raises:
        BuildCounterMissing: If the kernel has not been built since the last reset
    """
    counter_file = tree.counter_file
    if not counter_file.is_file():
        raise BuildCounterMissing(f"Build counter not found at {counter_file}")
    return counter_file.read_text(encoding="utf-8").strip()


def reset_build_counter(tree: KernelTree) -> bool:
    """Delete the build counter so the next build starts over.

    Returns:
        True if a counter file was removed, False if there was none
    """
    counter_file = tree.counter_file
    if not counter_file.exists():
        return False
    counter_file.unlink()
    return True


def describe_version(
    tree: KernelTree, release_version: int | None, *, allow_missing_counter: bool = False
) -> VersionDescriptor:
    """Select release or test metadata.

    A positive release version selects a stable release and never touches the
    counter file; anything else is a test build numbered by the counter.

    Args:
        tree: Kernel tree holding the counter file
        release_version: Positive number for a stable release
        allow_missing_counter: Use an empty test version instead of raising
            when no counter exists

    Raises:
        BuildCounterMissing: For a test build when no counter exists and
            allow_missing_counter is False
    """
    if release_version is not None and release_version > 0:
        return VersionDescriptor(prefix="v", label="stable", version=f"v{release_version}")
    try:
        counter = read_build_counter(tree)
    except BuildCounterMissing:
        if not allow_missing_counter:
            raise
        counter = ""
    return VersionDescriptor(prefix="test", label="test", version=counter)
