"""Well-known paths inside a kernel tree."""

from dataclasses import dataclass
from pathlib import Path

from kdev.core.config_store import BuildConfig


@dataclass(frozen=True)
class KernelTree:
    """A kernel source tree and the build output locations derived from it."""

    root: Path
    config: BuildConfig

    @property
    def out_dir(self) -> Path:
        return self.root / self.config.out_dir

    @property
    def counter_file(self) -> Path:
        """Build counter maintained by the kernel build system."""
        return self.out_dir / ".version"

    @property
    def boot_dir(self) -> Path:
        return self.out_dir / "arch" / self.config.arch / "boot"

    @property
    def kernel_image(self) -> Path:
        return self.boot_dir / self.config.package.image_name

    @property
    def dtb_dir(self) -> Path:
        return self.boot_dir / "dts" / self.config.package.dtb_dir

    @property
    def payload_dir(self) -> Path:
        return self.root / self.config.package.payload_dir

    @property
    def pack_script(self) -> Path:
        return self.root / self.config.package.pack_script

    @property
    def defconfig_file(self) -> Path:
        """Checked-in baseline configuration."""
        return self.root / "arch" / self.config.arch / "configs" / self.config.defconfig

    @property
    def current_config_file(self) -> Path:
        """Configuration generated by the build system."""
        return self.out_dir / ".config"

    @property
    def vmlinux(self) -> Path:
        return self.out_dir / "vmlinux"
