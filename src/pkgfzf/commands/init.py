"""Init command -- print the shell integration script.

Implements ``pkgfzf init SHELL``, meant to be evaluated from a shell
startup file::

    eval "$(pkgfzf init zsh)"

This is the one place where pkgfzf fails loudly: when the fuzzy finder is
not installed the command prints a diagnostic, emits no script, and exits
with :data:`~pkgfzf.exit_codes.EXIT_PREREQUISITE_MISSING`, so no completion
gets registered.
"""

from __future__ import annotations

import shutil
from typing import Optional

import typer

from pkgfzf.exceptions import PkgfzfError
from pkgfzf.output import debug, error, print_data


def _executable() -> str:
    """Command the generated script uses to call back into pkgfzf."""
    return shutil.which("pkgfzf") or "pkgfzf"


def init_command(
    shell: Optional[str] = typer.Argument(
        None, help="Shell to initialise (zsh, bash). Auto-detected if omitted."
    ),
) -> None:
    """Print the completion script for SHELL after checking for fzf.

    Args:
        shell: ``zsh`` or ``bash``. Auto-detected from ``$SHELL`` if omitted.

    Raises:
        typer.Exit: With code 8 if fzf is missing, or 2 for an unsupported shell.

    Example::

        eval "$(pkgfzf init zsh)"
        eval "$(pkgfzf init bash)"
    """
    from pkgfzf.config import load_global_config_or_default
    from pkgfzf.selector import require_selector
    from pkgfzf.shell import detect_shell, render_script

    config = load_global_config_or_default()
    shell = shell or detect_shell()

    try:
        fzf_path = require_selector(config.selector.binary)
        script = render_script(shell, _executable(), config.selector.binary)
    except PkgfzfError as exc:
        error(f"pkgfzf: {exc}")
        raise typer.Exit(code=exc.exit_code) from None

    debug(f"Using {fzf_path}")
    print_data(script.rstrip("\n"))
