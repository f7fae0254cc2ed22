"""Exception hierarchy for pkgfzf.

All exceptions inherit from :class:`PkgfzfError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`pkgfzf.exit_codes`.
The top-level error handler in :func:`pkgfzf.app.main` catches
``PkgfzfError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Only shell setup (``pkgfzf init``) is allowed to fail loudly. The
completion path catches these exceptions and degrades to "no completion".

Subclass hierarchy::

    PkgfzfError (exit 1)
    +-- InvalidUsageError       (exit 2)
    +-- ConfigError             (exit 1)
    +-- CacheError              (exit 1)
    +-- SelectorNotFoundError   (exit 8)
"""

from pkgfzf.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_PREREQUISITE_MISSING,
)


class PkgfzfError(Exception):
    """Base exception for all pkgfzf errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`pkgfzf.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(PkgfzfError):
    """Raised for invalid CLI arguments such as an unknown tool or shell."""

    exit_code = EXIT_INVALID_USAGE


class ConfigError(PkgfzfError):
    """Raised for configuration problems (invalid JSON, failed validation)."""

    exit_code = EXIT_GENERIC_FAILURE


class CacheError(PkgfzfError):
    """Raised when a completion cache file cannot be created, written, or read."""

    exit_code = EXIT_GENERIC_FAILURE


class SelectorNotFoundError(PkgfzfError):
    """Raised when the fuzzy-finder binary is not installed or not on ``PATH``."""

    exit_code = EXIT_PREREQUISITE_MISSING
