"""Tests for flashable image creation."""

from pathlib import Path

from kdev.core.context import KdevContext
from kdev.core.packaging import (
    counter_package_path,
    create_package,
    create_test_package,
    release_package_path,
)
from tests.fakes.shell import FakeShell
from tests.fakes.user_feedback import FakeUserFeedback
from tests.test_utils.kernel_env import make_tree, write_build_outputs, write_pack_script


def _ready_tree(root: Path, counter: str | None = "42"):
    tree = make_tree(root)
    write_build_outputs(tree, counter=counter)
    write_pack_script(tree)
    return tree


def test_test_package_is_named_after_counter(tmp_path: Path) -> None:
    tree = _ready_tree(tmp_path, counter="42")
    shell = FakeShell(create_output=True)
    ctx = KdevContext.for_test(shell=shell, cwd=tmp_path)

    result = create_test_package(ctx)

    expected = tmp_path / "builds" / "ProtonKernel-pixel5-test42.img"
    assert result.success
    assert result.output_path == expected
    assert expected.exists()

    command, cwd, env = shell.command_calls[0]
    assert command == [str(tree.pack_script), str(expected)]
    assert cwd == tmp_path
    assert env == {
        "KDEV_BUILD_TYPE": "test",
        "KDEV_VERSION_PREFIX": "test",
        "KDEV_VERSION": "42",
    }


def test_release_package_ignores_missing_counter(tmp_path: Path) -> None:
    _ready_tree(tmp_path, counter=None)
    shell = FakeShell(create_output=True)
    ctx = KdevContext.for_test(shell=shell, cwd=tmp_path)

    result = create_package(ctx, release_package_path(ctx, 3), release_version=3)

    assert result.success
    assert result.output_path == tmp_path / "builds" / "ProtonKernel-pixel5-v3.img"
    _, _, env = shell.command_calls[0]
    assert env == {
        "KDEV_BUILD_TYPE": "stable",
        "KDEV_VERSION_PREFIX": "v",
        "KDEV_VERSION": "v3",
    }


def test_zero_release_version_means_test_build(tmp_path: Path) -> None:
    _ready_tree(tmp_path, counter="7")
    shell = FakeShell(create_output=True)
    ctx = KdevContext.for_test(shell=shell, cwd=tmp_path)

    result = create_package(ctx, Path("flash.img"), release_version=0)

    assert result.success
    _, _, env = shell.command_calls[0]
    assert env is not None
    assert env["KDEV_BUILD_TYPE"] == "test"
    assert env["KDEV_VERSION"] == "7"


def test_stale_output_is_removed_even_when_packaging_fails(tmp_path: Path) -> None:
    _ready_tree(tmp_path)
    stale = tmp_path / "builds" / "x.img"
    stale.parent.mkdir()
    stale.write_bytes(b"old image")
    ctx = KdevContext.for_test(shell=FakeShell(command_exit_code=1), cwd=tmp_path)

    result = create_package(ctx, Path("builds/x.img"))

    assert not result.success
    assert result.stage == "package"
    assert "exited with code 1" in (result.message or "")
    assert not stale.exists()


def test_existing_output_is_replaced(tmp_path: Path) -> None:
    _ready_tree(tmp_path)
    target = tmp_path / "flash.img"
    target.write_bytes(b"old image")
    ctx = KdevContext.for_test(shell=FakeShell(create_output=True), cwd=tmp_path)

    result = create_package(ctx, Path("flash.img"))

    assert result.success
    assert target.read_bytes() == b"ANDROID!"


def test_payload_holds_image_and_concatenated_dtbs(tmp_path: Path) -> None:
    tree = _ready_tree(tmp_path)
    ctx = KdevContext.for_test(shell=FakeShell(create_output=True), cwd=tmp_path)

    create_package(ctx, Path("flash.img"))

    assert (tree.payload_dir / "Image.lz4").read_bytes() == b"KERNEL-IMAGE"
    # Blobs are concatenated in sorted file name order
    assert (tree.payload_dir / "dtb").read_bytes() == b"DTB-brambleDTB-redfin"


def test_missing_kernel_image_fails_before_packaging(tmp_path: Path) -> None:
    tree = _ready_tree(tmp_path)
    tree.kernel_image.unlink()
    shell = FakeShell()
    ctx = KdevContext.for_test(shell=shell, cwd=tmp_path)

    result = create_package(ctx, Path("flash.img"))

    assert not result.success
    assert "Kernel image not found" in (result.message or "")
    assert shell.command_calls == []


def test_missing_dtbs_fail(tmp_path: Path) -> None:
    tree = make_tree(tmp_path)
    write_build_outputs(tree, dtbs={})
    write_pack_script(tree)
    ctx = KdevContext.for_test(cwd=tmp_path)

    result = create_package(ctx, Path("flash.img"))

    assert not result.success
    assert "No device tree blobs" in (result.message or "")


def test_non_executable_pack_script_fails(tmp_path: Path) -> None:
    tree = _ready_tree(tmp_path)
    tree.pack_script.chmod(0o644)
    shell = FakeShell()
    ctx = KdevContext.for_test(shell=shell, cwd=tmp_path)

    result = create_package(ctx, Path("flash.img"))

    assert not result.success
    assert result.stage == "package"
    assert "Packaging script is not executable" in (result.message or "")
    assert shell.command_calls == []


def test_working_copy_package_without_counter_has_empty_version(tmp_path: Path) -> None:
    _ready_tree(tmp_path, counter=None)
    shell = FakeShell(create_output=True)
    ctx = KdevContext.for_test(shell=shell, cwd=tmp_path)

    result = create_package(ctx, Path("flash.img"))

    assert result.success
    _, _, env = shell.command_calls[0]
    assert env == {
        "KDEV_BUILD_TYPE": "test",
        "KDEV_VERSION_PREFIX": "test",
        "KDEV_VERSION": "",
    }


def test_failed_packaging_script_carries_exit_code(tmp_path: Path) -> None:
    _ready_tree(tmp_path)
    ctx = KdevContext.for_test(shell=FakeShell(command_exit_code=4), cwd=tmp_path)

    result = create_package(ctx, Path("flash.img"))

    assert not result.success
    assert result.exit_code == 4


def test_missing_pack_script_fails(tmp_path: Path) -> None:
    tree = make_tree(tmp_path)
    write_build_outputs(tree)
    ctx = KdevContext.for_test(cwd=tmp_path)

    result = create_package(ctx, Path("flash.img"))

    assert not result.success
    assert "Packaging script not found" in (result.message or "")


def test_test_package_without_counter_fails(tmp_path: Path) -> None:
    _ready_tree(tmp_path, counter=None)
    shell = FakeShell()
    ctx = KdevContext.for_test(shell=shell, cwd=tmp_path)

    result = create_test_package(ctx)

    assert not result.success
    assert "build the kernel first" in (result.message or "")
    assert shell.command_calls == []


def test_relative_output_resolves_against_cwd(tmp_path: Path) -> None:
    kernel_root = tmp_path / "kernel"
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    _ready_tree(kernel_root)
    ctx = KdevContext.for_test(
        shell=FakeShell(create_output=True), cwd=elsewhere, kernel_root=kernel_root
    )

    result = create_package(ctx, Path("out.img"))

    assert result.output_path == elsewhere / "out.img"


def test_package_announces_image(tmp_path: Path) -> None:
    _ready_tree(tmp_path)
    feedback = FakeUserFeedback()
    ctx = KdevContext.for_test(
        shell=FakeShell(create_output=True), feedback=feedback, cwd=tmp_path
    )

    create_package(ctx, Path("flash.img"))

    assert "INFO:   IMG     flash.img" in feedback.messages


def test_package_paths() -> None:
    ctx = KdevContext.for_test()

    assert counter_package_path(ctx, "9") == Path("builds/ProtonKernel-pixel5-test9.img")
    assert release_package_path(ctx, 12) == Path("builds/ProtonKernel-pixel5-v12.img")
