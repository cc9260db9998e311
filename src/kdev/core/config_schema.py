"""Schema for kdev.toml.

The TOML file is validated with pydantic and then converted into the frozen
BuildConfig dataclass that the rest of kdev reads.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

SUPPORTED_COMPILERS = ("clang", "gcc")


class CompilerSection(BaseModel):
    """The [compiler] table: which toolchain builds the kernel and how."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = "clang"
    flags: list[str] = Field(default_factory=list)
    bin_dir: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if v not in SUPPORTED_COMPILERS:
            msg = f"compiler must be one of {', '.join(SUPPORTED_COMPILERS)}, got {v!r}"
            raise ValueError(msg)
        return v


class PackageSection(BaseModel):
    """The [package] table: where flashable image inputs live."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    image_name: str = "Image.lz4"
    dtb_dir: str = "google"
    payload_dir: str = "flasher/rd/payload"
    pack_script: str = "flasher/pack-img.sh"


class KdevSettings(BaseModel):
    """Complete kdev.toml structure."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kernel_name: str = "ProtonKernel"
    defconfig: str = "redbull_defconfig"
    arch: str = "arm64"
    device_name: str = "pixel5"
    jobs: int = Field(default=6, ge=1)
    out_dir: str = "out"
    compiler: CompilerSection = Field(default_factory=CompilerSection)
    package: PackageSection = Field(default_factory=PackageSection)

    @field_validator("kernel_name", "defconfig", "arch", "device_name", "out_dir")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            msg = "value cannot be empty"
            raise ValueError(msg)
        return v
