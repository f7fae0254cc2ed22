"""Built-in CLI sub-commands for pkgfzf.

This package groups all Typer sub-command modules that form the CLI's
top-level command tree:

* :mod:`~pkgfzf.commands.complete` -- answer one completion request
  (called by the shell shim) and list candidates for debugging.
* :mod:`~pkgfzf.commands.init` -- print the shell integration script.
* :mod:`~pkgfzf.commands.shell` -- install or show the shell script.
* :mod:`~pkgfzf.commands.cache` -- inspect and clear the completion cache.
* :mod:`~pkgfzf.commands.catalog` -- show the built-in subcommand table.
* :mod:`~pkgfzf.commands.config` -- view and modify global settings.

Each module either exports a :class:`typer.Typer` sub-application (for
multi-command groups like ``cache`` and ``config``) or a plain callback
function registered directly on the root app (for single commands like
``complete``).
"""
