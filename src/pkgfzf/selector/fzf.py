"""Run ``fzf`` as an external process and read back the chosen line.

The protocol is plain text. Each candidate is written to fzf's stdin as
``name<TAB>description``. fzf is told to split on the tab, show only the
name column, and preview the rest. Whatever fzf prints on stdout is the
selected line, and its first whitespace-delimited token is the name. Empty
stdout (Escape, Ctrl-C, or no match) means no selection.

fzf draws its interface on ``/dev/tty``, so only stdin and stdout are
redirected; stderr is inherited from the shell.
"""

from __future__ import annotations

import shutil
import subprocess
from typing import Optional, Sequence

from pkgfzf.exceptions import SelectorNotFoundError
from pkgfzf.models import Candidate, SelectorOptions
from pkgfzf.output import debug
from pkgfzf.selector.base import Selector


def require_selector(binary: str = "fzf") -> str:
    """Return the absolute path of *binary*.

    Raises:
        SelectorNotFoundError: If *binary* is not installed or not on ``PATH``.
    """
    path = shutil.which(binary)
    if path is None:
        raise SelectorNotFoundError(f"{binary} is not installed")
    return path


def parse_selection(stdout: str) -> Optional[str]:
    """Extract the candidate name from fzf's stdout, or ``None`` if it is empty."""
    for line in stdout.splitlines():
        tokens = line.split()
        if tokens:
            return tokens[0]
    return None


class FzfSelector(Selector):
    """:class:`~pkgfzf.selector.base.Selector` backed by the ``fzf`` binary.

    Args:
        binary: Executable name or path of the fuzzy finder.
    """

    def __init__(self, binary: str = "fzf") -> None:
        self._binary = binary

    def build_command(self, options: SelectorOptions) -> list[str]:
        """Return the fzf argument vector for *options*."""
        command = [
            self._binary,
            "--delimiter=\t",
            "--preview=echo {2..}",
            f"--preview-window={options.preview_window}",
            f"--height={options.height}",
        ]
        if options.reverse:
            command.append("--reverse")
        command.extend(
            [
                f"--prompt={options.prompt}",
                "--with-nth=1",
                f"--bind={options.accept_key}:accept",
                f"--query={options.query}",
            ]
        )
        return command

    def select(
        self,
        candidates: Sequence[Candidate],
        options: SelectorOptions,
    ) -> Optional[str]:
        if not candidates:
            return None

        command = self.build_command(options)
        stdin = "".join(f"{c.render_line()}\n" for c in candidates)
        debug(f"Running {self._binary} with {len(candidates)} candidate(s)")
        try:
            result = subprocess.run(
                command,
                input=stdin,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
            )
        except FileNotFoundError:
            raise SelectorNotFoundError(f"{self._binary} is not installed") from None

        # fzf exits 1 on no match and 130 on abort; both leave stdout empty.
        debug(f"{self._binary} exited with status {result.returncode}")
        return parse_selection(result.stdout or "")
