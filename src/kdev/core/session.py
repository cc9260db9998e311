"""Interactive shell session bookkeeping.

Sourcing kdev into a shell defines variables and helper functions there. Every
name is recorded in two registry lists kept in the shell itself, so one
`unsetup` call can remove everything again without restarting the shell, even
after kdev was sourced more than once.

This module models that lifecycle in-process: SessionEnvironment stands in
for the shell's global bindings, ShellSession performs initialize/shutdown
against it, and kdev.core.shell_script renders the very same steps as shell
code for the real thing.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from kdev.core.config_store import BuildConfig
from kdev.core.kernel_root import KERNEL_ROOT_ENV

VARIABLES_REGISTRY = "_kdev_vars"
FUNCTIONS_REGISTRY = "_kdev_functions"
SAVED_PATH_VARIABLE = "_kdev_old_path"

VariableValue = str | list[str]


class EntryKind(Enum):
    VARIABLE = "variable"
    FUNCTION = "function"


@dataclass(frozen=True)
class HelperFunction:
    """A shell function defined by the session."""

    name: str
    body: str
    description: str


def _forward(*subcommand: str) -> str:
    return " ".join([f'{KERNEL_ROOT_ENV}="$kroot"', "kdev", *subcommand, '"$@"'])


HELPER_FUNCTIONS: tuple[HelperFunction, ...] = (
    HelperFunction("msg", 'echo -e "\\e[1;32m$1\\e[0m"', "Show an informational message"),
    HelperFunction("croot", 'cd "$kroot"', "Go to the root of the kernel repository"),
    HelperFunction("buildnum", _forward("counter", "show"), "Get the current build number"),
    HelperFunction("zerover", _forward("counter", "reset"), "Reset the kernel version number"),
    HelperFunction("kmake", _forward("make"), "Make wrapper for kernel compilation"),
    HelperFunction("mkimg", _forward("package"), "Create a flashable image"),
    HelperFunction("dimg", _forward("package-test"), "Create a test package"),
    HelperFunction("rel", _forward("release"), "Build an incremental release package"),
    HelperFunction("crel", _forward("clean-release"), "Build a clean release package"),
    HelperFunction("cleanbuild", _forward("clean-build"), "Build a clean working-copy package"),
    HelperFunction("incbuild", _forward("inc-build"), "Build an incremental working-copy package"),
    HelperFunction("dbuild", _forward("test-build"), "Build an incremental test package"),
    HelperFunction("ktest", _forward("install"), "Boot the given package on the device"),
    HelperFunction("inc", _forward("build-install"), "Build and boot a working-copy kernel"),
    HelperFunction(
        "dc", _forward("config", "diff"), "Diff the defconfig against the current config"
    ),
    HelperFunction(
        "cpc", _forward("config", "commit"), "Update the defconfig with the current config"
    ),
    HelperFunction("mc", _forward("config", "reset"), "Reset the current config to the defconfig"),
    HelperFunction("cf", _forward("config", "menu"), "Open an interactive config editor"),
    HelperFunction("ec", _forward("config", "edit"), "Edit the raw text config"),
    HelperFunction("osize", _forward("size", "objects"), "Largest objects in the kernel"),
    HelperFunction("ssize", _forward("size", "symbols"), "Largest symbols in the kernel"),
)

TEARDOWN_FUNCTION = "unsetup"

# Registered on every setup so teardown also removes the bookkeeping itself
BOOKKEEPING_VARIABLES = (VARIABLES_REGISTRY, FUNCTIONS_REGISTRY, SAVED_PATH_VARIABLE)


def session_variables(config: BuildConfig, kernel_root: Path) -> dict[str, VariableValue]:
    """Variables exported into the shell, in definition order."""
    return {
        "kernel_name": config.kernel_name,
        "defconfig": config.defconfig,
        "arch": config.arch,
        "kmake_flags": config.base_compile_flags,
        "device_name": config.device_name,
        "kroot": str(kernel_root),
    }


def tracked_variable_names(config: BuildConfig, kernel_root: Path) -> list[str]:
    """Names a setup appends to the variables registry, in order."""
    return [*session_variables(config, kernel_root), *BOOKKEEPING_VARIABLES]


def function_names() -> list[str]:
    return [helper.name for helper in HELPER_FUNCTIONS] + [TEARDOWN_FUNCTION]


class SessionEnvironment:
    """In-memory model of a shell's global variables and functions."""

    def __init__(
        self,
        variables: dict[str, VariableValue] | None = None,
        functions: dict[str, str] | None = None,
    ) -> None:
        self.variables: dict[str, VariableValue] = dict(variables or {})
        self.functions: dict[str, str] = dict(functions or {})

    def get_variable(self, name: str) -> VariableValue | None:
        return self.variables.get(name)

    def set_variable(self, name: str, value: VariableValue) -> None:
        self.variables[name] = value

    def unset_variable(self, name: str) -> bool:
        """Remove a variable; returns False if it was not set."""
        return self.variables.pop(name, None) is not None

    def define_function(self, name: str, body: str) -> None:
        self.functions[name] = body

    def unset_function(self, name: str) -> bool:
        """Remove a function; returns False if it was not defined."""
        return self.functions.pop(name, None) is not None

    def snapshot(self) -> tuple[dict[str, VariableValue], dict[str, str]]:
        """Copy of all bindings, for before/after comparison."""
        variables = {
            name: list(value) if isinstance(value, list) else value
            for name, value in self.variables.items()
        }
        return variables, dict(self.functions)


class EnvironmentRegistry:
    """The two append-only name lists, stored as arrays in the environment.

    Keeping the lists in the environment rather than in this object means a
    second setup appends to the first one's lists, and teardown sees exactly
    what the shell would see.
    """

    def __init__(self, env: SessionEnvironment) -> None:
        self._env = env

    def _list(self, key: str) -> list[str]:
        value = self._env.get_variable(key)
        if isinstance(value, list):
            return list(value)
        return []

    @property
    def tracked_variables(self) -> list[str]:
        return self._list(VARIABLES_REGISTRY)

    @property
    def tracked_functions(self) -> list[str]:
        return self._list(FUNCTIONS_REGISTRY)

    def register(self, name: str, kind: EntryKind) -> None:
        key = VARIABLES_REGISTRY if kind is EntryKind.VARIABLE else FUNCTIONS_REGISTRY
        self._env.set_variable(key, [*self._list(key), name])

    def teardown(self) -> None:
        """Remove every tracked name, then restore PATH if it was saved.

        Names that are already gone are skipped silently, so duplicates and
        repeated teardowns are harmless.
        """
        for name in self.tracked_functions:
            self._env.unset_function(name)

        saved_path = self._env.get_variable(SAVED_PATH_VARIABLE)
        if isinstance(saved_path, str) and saved_path:
            self._env.set_variable("PATH", saved_path)

        # Includes the registry arrays themselves
        for name in self.tracked_variables:
            self._env.unset_variable(name)


class ShellSession:
    """initialize()/shutdown() lifecycle over a SessionEnvironment."""

    def __init__(self, env: SessionEnvironment) -> None:
        self.env = env
        self.registry = EnvironmentRegistry(env)

    def initialize(self, config: BuildConfig, kernel_root: Path) -> None:
        for name, value in session_variables(config, kernel_root).items():
            self.env.set_variable(name, value)
        for name in tracked_variable_names(config, kernel_root):
            self.registry.register(name, EntryKind.VARIABLE)

        for helper in HELPER_FUNCTIONS:
            self.env.define_function(helper.name, helper.body)
        self.env.define_function(TEARDOWN_FUNCTION, "teardown")
        for name in function_names():
            self.registry.register(name, EntryKind.FUNCTION)

        bin_dir = config.compiler.bin_dir
        if bin_dir is not None:
            current_path = self.env.get_variable("PATH")
            current = current_path if isinstance(current_path, str) else ""
            # Only the first setup saves PATH; later ones see it already modified
            if not self.env.get_variable(SAVED_PATH_VARIABLE):
                self.env.set_variable(SAVED_PATH_VARIABLE, current)
            self.env.set_variable("PATH", f"{bin_dir}:{current}" if current else str(bin_dir))

    def shutdown(self) -> None:
        self.registry.teardown()
