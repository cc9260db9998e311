"""Tests for kernel configuration helpers."""

from dataclasses import replace
from pathlib import Path

import pytest

from kdev.core.config_store import BuildConfig
from kdev.core.context import KdevContext
from kdev.core.kconfig import (
    commit_config,
    diff_config,
    edit_config_interactive,
    edit_config_raw,
    reset_config,
    resolve_editor,
)
from tests.fakes.kbuild import FakeKernelBuild
from tests.fakes.shell import FakeShell
from tests.test_utils.kernel_env import make_tree, write_configs


def test_identical_configs_have_empty_diff(tmp_path: Path) -> None:
    tree = make_tree(tmp_path)
    write_configs(tree, baseline="CONFIG_A=y\n", current="CONFIG_A=y\n")

    assert diff_config(tree) == []


def test_diff_shows_changes_with_relative_names(tmp_path: Path) -> None:
    tree = make_tree(tmp_path)
    write_configs(tree, baseline="CONFIG_A=y\nCONFIG_B=y\n", current="CONFIG_A=y\nCONFIG_C=m\n")

    lines = diff_config(tree)

    assert lines[0] == "--- arch/arm64/configs/redbull_defconfig"
    assert lines[1] == "+++ out/.config"
    assert "-CONFIG_B=y" in lines
    assert "+CONFIG_C=m" in lines


def test_diff_with_out_dir_outside_the_tree(tmp_path: Path) -> None:
    out_dir = tmp_path / "build-out"
    config = replace(BuildConfig.defaults(), out_dir=str(out_dir))
    tree = make_tree(tmp_path / "kernel", config)
    write_configs(tree, baseline="CONFIG_A=y\n", current="CONFIG_A=m\n")

    lines = diff_config(tree)

    assert lines[0] == "--- arch/arm64/configs/redbull_defconfig"
    assert lines[1] == f"+++ {out_dir / '.config'}"
    assert "+CONFIG_A=m" in lines


def test_diff_without_current_config_raises(tmp_path: Path) -> None:
    tree = make_tree(tmp_path)
    write_configs(tree, baseline="CONFIG_A=y\n", current=None)

    with pytest.raises(FileNotFoundError):
        diff_config(tree)


def test_commit_overwrites_baseline(tmp_path: Path) -> None:
    tree = make_tree(tmp_path)
    write_configs(tree, baseline="CONFIG_A=y\nCONFIG_OLD=y\n", current="CONFIG_A=m\n")

    commit_config(tree)

    assert tree.defconfig_file.read_text(encoding="utf-8") == "CONFIG_A=m\n"
    assert diff_config(tree) == []


def test_reset_runs_make_defconfig(tmp_path: Path) -> None:
    kbuild = FakeKernelBuild()
    ctx = KdevContext.for_test(kbuild=kbuild, cwd=tmp_path)

    assert reset_config(ctx) == 0
    assert kbuild.make_args == [["-j6", "ARCH=arm64", "O=out", "redbull_defconfig"]]


def test_menu_runs_make_nconfig(tmp_path: Path) -> None:
    kbuild = FakeKernelBuild(exit_codes=[2])
    ctx = KdevContext.for_test(kbuild=kbuild, cwd=tmp_path)

    assert edit_config_interactive(ctx) == 2
    assert kbuild.make_args[0][-1] == "nconfig"


def test_edit_opens_current_config(tmp_path: Path) -> None:
    shell = FakeShell()
    ctx = KdevContext.for_test(shell=shell, cwd=tmp_path)

    edit_config_raw(ctx, "nano")

    command, cwd, _ = shell.command_calls[0]
    assert command == ["nano", str(tmp_path / "out" / ".config")]
    assert cwd == tmp_path


def test_editor_resolution_order() -> None:
    assert resolve_editor("emacs", {"EDITOR": "nano"}) == "emacs"
    assert resolve_editor(None, {"EDITOR": "nano"}) == "nano"
    assert resolve_editor(None, {"EDITOR": ""}) == "vim"
    assert resolve_editor(None, {}) == "vim"
