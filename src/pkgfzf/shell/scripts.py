"""Render zsh and bash completion shims that delegate to ``pkgfzf complete``.

The shim does three things:

1. Refuses to register anything when the fuzzy finder is missing, printing
   a diagnostic instead.
2. Defines one completion function that passes the tool name, the word
   list, and the 0-based cursor index to ``pkgfzf complete`` and inserts
   whatever it prints. The bash shim rebuilds the word list so that
   ``test:unit`` stays one word instead of being split at the colon.
3. Registers that function for ``yarn``, ``npm``, ``bun`` and ``deno``.

Everything else (routing, reading project files, running fzf) happens in
Python.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import Optional

from pkgfzf.exceptions import InvalidUsageError
from pkgfzf.models import ToolKind

SUPPORTED_SHELLS = ("zsh", "bash")

_ZSH_TEMPLATE = """\
# pkgfzf: fuzzy completion for {tools}

if ! command -v {fzf} >/dev/null 2>&1; then
    echo "pkgfzf: {fzf} is not installed" >&2
    return 1
fi

_pkgfzf_complete() {{
    local selected
    selected="$({exe} complete "$service" --cursor $((CURRENT - 1)) -- "${{words[@]}}")"
    if [[ -n "$selected" ]]; then
        compadd -U -- "$selected"
    fi
}}

compdef _pkgfzf_complete {tools}
"""

_BASH_TEMPLATE = """\
# pkgfzf: fuzzy completion for {tools}

if ! command -v {fzf} >/dev/null 2>&1; then
    echo "pkgfzf: {fzf} is not installed" >&2
    return 1
fi

# fzf draws over the prompt; the terminal's reply to \\e[5n triggers a redraw.
bind '"\\e[0n": redraw-current-line' 2>/dev/null

_pkgfzf_complete() {{
    local cur cword selected line
    local -a words
    if declare -F _get_comp_words_by_ref >/dev/null; then
        _get_comp_words_by_ref -n : cur words cword
    else
        line="${{COMP_LINE:0:COMP_POINT}}"
        read -r -a words <<< "$line"
        if [[ -z "$line" || "$line" == *[[:space:]] ]]; then
            words+=("")
        fi
        cword=$((${{#words[@]}} - 1))
        cur="${{words[cword]}}"
    fi

    selected="$({exe} complete "$1" --cursor "$cword" -- "${{words[@]}}")"
    printf '\\e[5n'

    if [[ -n "$selected" ]]; then
        COMPREPLY=("$selected")
        if declare -F __ltrim_colon_completions >/dev/null; then
            __ltrim_colon_completions "$cur"
        elif [[ "$cur" == *:* && "$COMP_WORDBREAKS" == *:* ]]; then
            COMPREPLY=("${{selected#"${{cur%"${{cur##*:}}"}}"}}")
        fi
    else
        COMPREPLY=()
    fi
}}

complete -F _pkgfzf_complete {tools}
"""

_TEMPLATES = {"zsh": _ZSH_TEMPLATE, "bash": _BASH_TEMPLATE}


def _check_shell(shell: str) -> str:
    shell = shell.lower()
    if shell not in _TEMPLATES:
        raise InvalidUsageError(
            f"Unsupported shell: {shell}. Supported: {', '.join(SUPPORTED_SHELLS)}"
        )
    return shell


def detect_shell(default: str = "zsh") -> str:
    """Guess the user's shell from ``$SHELL``."""
    return os.path.basename(os.environ.get("SHELL", "")) or default


def render_script(shell: str, executable: str = "pkgfzf", fzf_binary: str = "fzf") -> str:
    """Return the completion shim for *shell*.

    Args:
        shell: ``"zsh"`` or ``"bash"``.
        executable: Command used by the shim to call back into pkgfzf.
        fzf_binary: Fuzzy finder the shim checks for before registering.

    Raises:
        InvalidUsageError: If *shell* is not supported.
    """
    template = _TEMPLATES[_check_shell(shell)]
    return template.format(
        tools=" ".join(tool.value for tool in ToolKind),
        exe=shlex.quote(executable),
        fzf=shlex.quote(fzf_binary),
    )


def install_path(shell: str, home: Optional[Path] = None) -> Path:
    """Return where ``pkgfzf shell install`` writes the shim for *shell*.

    * **zsh**: ``~/.zsh/pkgfzf.zsh``
    * **bash**: ``~/.bash_completion.d/pkgfzf``

    Raises:
        InvalidUsageError: If *shell* is not supported.
    """
    home = home or Path.home()
    if _check_shell(shell) == "zsh":
        return home / ".zsh" / "pkgfzf.zsh"
    return home / ".bash_completion.d" / "pkgfzf"
