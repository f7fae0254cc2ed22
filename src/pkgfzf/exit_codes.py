"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~pkgfzf.exceptions.PkgfzfError` subclass.
The shell shim only looks at stdout, but ``pkgfzf init`` exits non-zero
when its prerequisites are missing so that shell startup can detect it.

Example::

    $ pkgfzf init zsh
    $ echo $?
    8   # EXIT_PREREQUISITE_MISSING -- fzf is not on PATH
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments (unknown tool or shell)."""

EXIT_PREREQUISITE_MISSING = 8
"""A required external program (the fuzzy finder) could not be found."""

EXIT_INTERRUPTED = 130
"""The user pressed Ctrl-C."""
