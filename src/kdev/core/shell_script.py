"""Render the session lifecycle as bash/zsh code.

`kdev shell-init` prints the setup script; users source it with
`source <(kdev shell-init)` and undo it with `unsetup`.
"""

import shlex
from pathlib import Path

from kdev.core.config_store import BuildConfig
from kdev.core.session import (
    FUNCTIONS_REGISTRY,
    HELPER_FUNCTIONS,
    SAVED_PATH_VARIABLE,
    TEARDOWN_FUNCTION,
    VARIABLES_REGISTRY,
    function_names,
    session_variables,
    tracked_variable_names,
)


def _quote_value(value: str | list[str]) -> str:
    if isinstance(value, list):
        return "(" + " ".join(shlex.quote(item) for item in value) + ")"
    return shlex.quote(value)


def render_teardown_function() -> str:
    """The `unsetup` function.

    unset calls are silenced because names repeat when the setup script was
    sourced more than once.
    """
    return f"""function {TEARDOWN_FUNCTION}() {{
	local func var

	# Unset functions
	for func in "${{{FUNCTIONS_REGISTRY}[@]}}"; do
		unset -f "$func" > /dev/null 2>&1
	done

	# Restore PATH, if modified
	if [[ -n "${SAVED_PATH_VARIABLE}" ]]; then
		export PATH="${SAVED_PATH_VARIABLE}"
	fi

	# Unset variables
	for var in "${{{VARIABLES_REGISTRY}[@]}}"; do
		unset -v "$var" > /dev/null 2>&1
	done
}}
"""


def render_setup_script(config: BuildConfig, kernel_root: Path) -> str:
    """Full setup script for the given build configuration."""
    variables = session_variables(config, kernel_root)
    tracked_variables = tracked_variable_names(config, kernel_root)

    lines: list[str] = [
        "# kdev shell integration",
        "# Source this from bash or zsh; run `unsetup` to remove everything it defines.",
        "",
        "#### CONFIGURATION ####",
        "",
    ]
    for name, value in variables.items():
        lines.append(f"{name}={_quote_value(value)}")

    lines += [
        "",
        "#### BASE ####",
        "",
        "# Index of all variables and functions we set",
        f"{VARIABLES_REGISTRY}+=({' '.join(tracked_variables)})",
        f"{FUNCTIONS_REGISTRY}+=({' '.join(function_names())})",
        "",
    ]

    bin_dir = config.compiler.bin_dir
    if bin_dir is not None:
        lines += [
            "# Put the toolchain first on PATH, remembering the original once",
            f'if [[ -z "${SAVED_PATH_VARIABLE}" ]]; then',
            f'\t{SAVED_PATH_VARIABLE}="$PATH"',
            "fi",
            f'export PATH={shlex.quote(str(bin_dir))}:"$PATH"',
            "",
        ]

    for helper in HELPER_FUNCTIONS:
        lines += [
            f"# {helper.description}",
            f"function {helper.name}() {{",
            f"\t{helper.body}",
            "}",
            "",
        ]

    lines.append("# Clean up shell environment and remove all traces of kdev")
    return "\n".join(lines) + "\n" + render_teardown_function()
