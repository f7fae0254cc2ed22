"""Catalog command -- show a tool's built-in subcommand table."""

from __future__ import annotations

import typer

from pkgfzf.exceptions import InvalidUsageError
from pkgfzf.output import error, print_table


def catalog_command(
    tool: str = typer.Argument(help="Tool to show (yarn, npm, bun, deno)."),
) -> None:
    """Show the built-in subcommands offered for TOOL.

    This is the table written to the tool's cache file; the cache itself is
    shown by ``pkgfzf cache show``.

    Example::

        pkgfzf catalog deno
        pkgfzf --json catalog npm
    """
    from pkgfzf.catalog import lookup, parse_tool

    try:
        kind = parse_tool(tool)
    except InvalidUsageError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    rows = [[c.name, c.description] for c in lookup(kind)]
    print_table(["Name", "Description"], rows, title=f"{kind.value} subcommands")
