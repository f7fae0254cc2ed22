"""Typer application factory and CLI entry point for pkgfzf.

This module wires together the top-level Typer application and registers
the built-in sub-commands (``complete``, ``candidates``, ``init``,
``shell``, ``cache``, ``catalog``, ``config``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers, registers commands, and
invokes the Typer app. Unhandled exceptions are written to a crash log
under the data directory.

See Also:
    :mod:`pkgfzf.config`: Global configuration and cache-root resolution.
    :mod:`pkgfzf.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer

from pkgfzf import __version__
from pkgfzf.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INTERRUPTED


app = typer.Typer(
    name="pkgfzf",
    help="Fuzzy completion for yarn, npm, bun and deno.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"pkgfzf {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    cache_dir: Optional[str] = typer.Option(
        None, "--cache-dir", help="Completion cache directory override."
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Skip confirmations."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Initialises the global :class:`~pkgfzf.output.OutputManager` from
    CLI flags, and stores shared options (``cache_dir``, ``force``) in the
    Typer context so that sub-commands can read them via ``ctx.obj``.

    Args:
        ctx: Typer invocation context.
        version: If ``True``, print the version string and exit.
        cache_dir: Cache root override (highest precedence).
        json_output: Force JSON output format.
        plain_output: Force plain-text output format.
        no_color: Disable all colour and Rich markup.
        quiet: Suppress non-essential diagnostic output.
        verbose: Enable debug-level diagnostic output.
        force: Skip interactive confirmations.
    """
    from pkgfzf.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(
        OutputManager(
            format=fmt,
            no_color=no_color,
            quiet=quiet,
            verbose=verbose,
        )
    )

    ctx.ensure_object(dict)
    ctx.obj["cache_dir"] = cache_dir
    ctx.obj["force"] = force


def register_commands(target: typer.Typer) -> None:
    """Attach every built-in sub-command to *target*."""
    from pkgfzf.commands.cache import cache_app
    from pkgfzf.commands.catalog import catalog_command
    from pkgfzf.commands.complete import candidates_command, complete_command
    from pkgfzf.commands.config import config_app
    from pkgfzf.commands.init import init_command
    from pkgfzf.commands.shell import shell_app

    target.command("complete")(complete_command)
    target.command("candidates")(candidates_command)
    target.command("init")(init_command)
    target.command("catalog")(catalog_command)
    target.add_typer(shell_app, name="shell", help="Shell integration scripts.")
    target.add_typer(cache_app, name="cache", help="Completion cache management.")
    target.add_typer(config_app, name="config", help="Configuration management.")


register_commands(app)


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path.

    Args:
        exc: The unhandled exception to log.

    Returns:
        Absolute path to the written crash log file.
    """
    from pkgfzf.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``pkgfzf`` console script.

    Unhandled :class:`~pkgfzf.exceptions.PkgfzfError` instances cause a
    clean exit with the error's ``exit_code``. All other exceptions produce
    a crash log and a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as exc:
        from pkgfzf.exceptions import PkgfzfError
        from pkgfzf.output import error

        if isinstance(exc, PkgfzfError):
            error(str(exc))
            sys.exit(exc.exit_code)
        try:
            log_path = _write_crash_log(exc)
        except OSError:
            error(f"Unexpected error: {exc}")
        else:
            error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
