"""Shell commands -- install and display the completion script.

This module implements the ``pkgfzf shell`` command group with two
sub-commands:

* ``shell install`` -- Auto-detect (or explicitly specify) the user's
  shell and write the completion script to a file the startup file can
  source.
* ``shell show`` -- Print the completion script to stdout for manual
  installation or piping to a file.

Supported shells: zsh, bash. Unlike ``pkgfzf init``, neither command
checks for fzf; the written script performs that check itself each time a
shell starts.
"""

from __future__ import annotations

from typing import Optional

import typer

from pkgfzf.exceptions import PkgfzfError
from pkgfzf.output import error, print_data, success, suggest


shell_app = typer.Typer(no_args_is_help=True)
"""Typer application for the ``shell`` command group."""


@shell_app.command("install")
def shell_install(
    shell: Optional[str] = typer.Argument(
        None,
        help="Shell to install completion for (zsh, bash). Auto-detected if omitted.",
    ),
) -> None:
    """Install the completion script for SHELL.

    Writes the script to:

    * **zsh**: ``~/.zsh/pkgfzf.zsh``
    * **bash**: ``~/.bash_completion.d/pkgfzf``

    Args:
        shell: Shell name. Auto-detected from ``$SHELL`` if omitted.

    Raises:
        typer.Exit: With code 2 if the shell is unsupported.

    Example::

        pkgfzf shell install
        pkgfzf shell install bash
    """
    from pkgfzf.commands.init import _executable
    from pkgfzf.config import load_global_config_or_default
    from pkgfzf.shell import detect_shell, install_path, render_script

    config = load_global_config_or_default()
    shell = (shell or detect_shell()).lower()

    try:
        script = render_script(shell, _executable(), config.selector.binary)
        script_path = install_path(shell)
    except PkgfzfError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    script_path.parent.mkdir(parents=True, exist_ok=True)
    script_path.write_text(script, encoding="utf-8")

    rc_file = "~/.zshrc" if shell == "zsh" else "~/.bashrc"
    success(f"{shell.capitalize()} completion installed to {script_path}")
    suggest(f"Add to {rc_file}: source {script_path}")


@shell_app.command("show")
def shell_show(
    shell: Optional[str] = typer.Argument(
        None,
        help="Shell to show the completion script for (zsh, bash). Auto-detected if omitted.",
    ),
) -> None:
    """Print the completion script for SHELL to stdout.

    Example::

        pkgfzf shell show zsh > ~/.zsh/pkgfzf.zsh
    """
    from pkgfzf.commands.init import _executable
    from pkgfzf.config import load_global_config_or_default
    from pkgfzf.shell import detect_shell, render_script

    config = load_global_config_or_default()
    try:
        script = render_script(shell or detect_shell(), _executable(), config.selector.binary)
    except PkgfzfError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    print_data(script.rstrip("\n"))
