"""Tests for compiler identification."""

from dataclasses import replace
from pathlib import Path

from kdev.core.config_store import BuildConfig, CompilerProfile
from kdev.core.context import KdevContext
from kdev.core.toolchain import (
    compiler_command,
    compiler_version,
    normalize_clang_version,
    normalize_gcc_version,
)
from tests.fakes.kbuild import FakeKernelBuild

AOSP_CLANG = "Android (6443078 based on r383902)  clang version 11.0.1  "


def _with_compiler(name: str, flags: tuple[str, ...] = (), bin_dir: Path | None = None):
    return replace(
        BuildConfig.defaults(), compiler=CompilerProfile(name=name, flags=flags, bin_dir=bin_dir)
    )


def test_clang_version_drops_vendor_prefix() -> None:
    assert normalize_clang_version(AOSP_CLANG) == "clang version 11.0.1"


def test_plain_clang_version_is_kept() -> None:
    assert normalize_clang_version("clang version 17.0.6") == "clang version 17.0.6"


def test_gcc_version_uses_text_after_parenthesis() -> None:
    line = "aarch64-linux-gnu-gcc (Ubuntu 9.4.0-1ubuntu1) 9.4.0"

    assert normalize_gcc_version(line) == "Ubuntu 9.4.0-1ubuntu1 9.4.0"


def test_compiler_command_selection() -> None:
    assert compiler_command(_with_compiler("clang")) == "clang"
    assert compiler_command(_with_compiler("clang", ("CC=clang-17",))) == "clang-17"
    assert compiler_command(_with_compiler("gcc")) == "gcc"
    gcc_cross = _with_compiler("gcc", ("CROSS_COMPILE=aarch64-linux-gnu-",))
    assert compiler_command(gcc_cross) == "aarch64-linux-gnu-gcc"


def test_compiler_version_uses_toolchain_dir(tmp_path: Path) -> None:
    kbuild = FakeKernelBuild(compiler_versions={"clang": AOSP_CLANG})
    config = _with_compiler("clang", bin_dir=tmp_path)
    ctx = KdevContext.for_test(kbuild=kbuild, config=config, cwd=tmp_path)

    assert compiler_version(ctx) == "clang version 11.0.1"
    assert kbuild.version_calls == [("clang", tmp_path)]


def test_compiler_version_unknown_when_not_runnable(tmp_path: Path) -> None:
    ctx = KdevContext.for_test(cwd=tmp_path)

    assert compiler_version(ctx) is None
