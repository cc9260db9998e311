"""Build configuration data structures and loading.

Provides the immutable BuildConfig loaded from `<kernel root>/kdev.toml` once
at the CLI entry point.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from pathlib import Path

import tomlkit
from pydantic import ValidationError

from kdev.core.config_schema import KdevSettings

CONFIG_FILENAME = "kdev.toml"


@dataclass(frozen=True)
class CompilerProfile:
    """Compiler-specific settings appended to the base make flags."""

    name: str
    flags: tuple[str, ...]
    bin_dir: Path | None  # Prepended to PATH by the shell integration


@dataclass(frozen=True)
class PackageLayout:
    """Paths used to assemble a flashable image, relative to the kernel root."""

    image_name: str
    dtb_dir: str
    payload_dir: Path
    pack_script: Path


@dataclass(frozen=True)
class BuildConfig:
    """Immutable build configuration.

    Loaded once at CLI entry point and stored in KdevContext.
    """

    kernel_name: str
    defconfig: str
    arch: str
    device_name: str
    jobs: int
    out_dir: str
    compiler: CompilerProfile
    package: PackageLayout

    @property
    def base_compile_flags(self) -> list[str]:
        """Flags passed to every make invocation, compiler profile last."""
        return [
            f"-j{self.jobs}",
            f"ARCH={self.arch}",
            f"O={self.out_dir}",
            *self.compiler.flags,
        ]

    @staticmethod
    def from_settings(settings: KdevSettings) -> "BuildConfig":
        bin_dir = settings.compiler.bin_dir
        return BuildConfig(
            kernel_name=settings.kernel_name,
            defconfig=settings.defconfig,
            arch=settings.arch,
            device_name=settings.device_name,
            jobs=settings.jobs,
            out_dir=settings.out_dir,
            compiler=CompilerProfile(
                name=settings.compiler.name,
                flags=tuple(settings.compiler.flags),
                bin_dir=Path(bin_dir).expanduser() if bin_dir else None,
            ),
            package=PackageLayout(
                image_name=settings.package.image_name,
                dtb_dir=settings.package.dtb_dir,
                payload_dir=Path(settings.package.payload_dir),
                pack_script=Path(settings.package.pack_script),
            ),
        )

    @staticmethod
    def defaults() -> "BuildConfig":
        return BuildConfig.from_settings(KdevSettings())


def with_jobs_override(config: BuildConfig, environ: dict[str, str] | None = None) -> BuildConfig:
    """Apply the KDEV_JOBS environment override to the parallelism setting.

    Raises:
        ValueError: If KDEV_JOBS is set but is not a positive integer
    """
    env = os.environ if environ is None else environ
    raw = env.get("KDEV_JOBS")
    if raw is None or raw == "":
        return config
    if not raw.isdigit() or int(raw) < 1:
        raise ValueError(f"KDEV_JOBS must be a positive integer, got {raw!r}")

    return replace(config, jobs=int(raw))


def parse_config(text: str, source: Path) -> BuildConfig:
    """Parse and validate kdev.toml content.

    Raises:
        ValueError: If the TOML is malformed or fails validation
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {source}: {e}") from e

    try:
        settings = KdevSettings.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {source}:\n{e}") from e

    return BuildConfig.from_settings(settings)


def render_config(config: BuildConfig) -> str:
    """Render a BuildConfig as kdev.toml text."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("kdev build configuration"))
    doc["kernel_name"] = config.kernel_name
    doc["defconfig"] = config.defconfig
    doc["arch"] = config.arch
    doc["device_name"] = config.device_name
    doc["jobs"] = config.jobs
    doc["out_dir"] = config.out_dir

    compiler = tomlkit.table()
    compiler["name"] = config.compiler.name
    compiler["flags"] = list(config.compiler.flags)
    if config.compiler.bin_dir is not None:
        compiler["bin_dir"] = str(config.compiler.bin_dir)
    doc["compiler"] = compiler

    package = tomlkit.table()
    package["image_name"] = config.package.image_name
    package["dtb_dir"] = config.package.dtb_dir
    package["payload_dir"] = config.package.payload_dir.as_posix()
    package["pack_script"] = config.package.pack_script.as_posix()
    doc["package"] = package

    return tomlkit.dumps(doc)


class ConfigStore(ABC):
    """Abstract interface for kdev.toml access.

    Provides dependency injection for config access, enabling in-memory
    implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self, kernel_root: Path) -> bool:
        """Check if a config file exists for the kernel tree."""
        ...

    @abstractmethod
    def load(self, kernel_root: Path) -> BuildConfig:
        """Load the build config.

        Raises:
            FileNotFoundError: If config doesn't exist
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def save(self, kernel_root: Path, config: BuildConfig) -> None:
        """Save the build config."""
        ...

    @abstractmethod
    def path(self, kernel_root: Path) -> Path:
        """Get the path to the config file (for error messages)."""
        ...


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads/writes <kernel root>/kdev.toml."""

    def exists(self, kernel_root: Path) -> bool:
        return self.path(kernel_root).exists()

    def load(self, kernel_root: Path) -> BuildConfig:
        config_path = self.path(kernel_root)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found at {config_path}")
        return parse_config(config_path.read_text(encoding="utf-8"), config_path)

    def save(self, kernel_root: Path, config: BuildConfig) -> None:
        config_path = self.path(kernel_root)
        if config_path.exists() and not os.access(config_path, os.W_OK):
            raise PermissionError(f"Cannot write to file: {config_path}")
        config_path.write_text(render_config(config), encoding="utf-8")

    def path(self, kernel_root: Path) -> Path:
        return kernel_root / CONFIG_FILENAME


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: BuildConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self, kernel_root: Path) -> bool:
        return self._config is not None

    def load(self, kernel_root: Path) -> BuildConfig:
        if self._config is None:
            raise FileNotFoundError(f"Config not found at {self.path(kernel_root)}")
        return self._config

    def save(self, kernel_root: Path, config: BuildConfig) -> None:
        self._config = config

    def path(self, kernel_root: Path) -> Path:
        return kernel_root / CONFIG_FILENAME
