"""Cache commands -- inspect and clear the on-disk completion cache.

Cache files are never refreshed automatically. After upgrading pkgfzf (or
when a cache file was edited by hand) ``pkgfzf cache clear`` is the way to
get the current built-in catalog back; the files are rewritten on the next
completion request.
"""

from __future__ import annotations

from typing import Optional

import typer

from pkgfzf.exceptions import PkgfzfError
from pkgfzf.output import error, format_response, info, print_data, success


cache_app = typer.Typer(no_args_is_help=True)


def _open_cache(ctx: typer.Context):
    from pkgfzf.cache import CompletionCache
    from pkgfzf.config import load_global_config_or_default, resolve_cache_root

    cli_cache_dir = ctx.obj.get("cache_dir") if ctx.obj else None
    config = load_global_config_or_default()
    return CompletionCache(
        resolve_cache_root(cli_cache_dir, config), enabled=config.cache.enabled
    )


def _parse_optional_tool(tool: Optional[str]):
    from pkgfzf.catalog import parse_tool

    if tool is None:
        return None
    try:
        return parse_tool(tool)
    except PkgfzfError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


@cache_app.command("path")
def cache_path(
    ctx: typer.Context,
    tool: Optional[str] = typer.Argument(None, help="Show the file for one tool."),
) -> None:
    """Print the cache directory, or one tool's cache file.

    Example::

        pkgfzf cache path
        pkgfzf cache path yarn
    """
    cache = _open_cache(ctx)
    kind = _parse_optional_tool(tool)
    print_data(str(cache.path_for(kind) if kind else cache.cache_root))


@cache_app.command("show")
def cache_show(ctx: typer.Context) -> None:
    """Show the cache directory and how many entries each tool has cached.

    Tools without a cache file are shown as ``null`` (JSON) or ``None``.

    Example::

        pkgfzf cache show
        pkgfzf cache show --json
    """
    cache = _open_cache(ctx)
    format_response(cache.stats())


@cache_app.command("clear")
def cache_clear(
    ctx: typer.Context,
    tool: Optional[str] = typer.Argument(
        None, help="Only clear this tool's cache file."
    ),
) -> None:
    """Delete cache files so they are rebuilt on the next completion.

    Args:
        ctx: Typer context carrying the ``cache_dir`` override.
        tool: Clear only this tool; all tools when omitted.

    Raises:
        typer.Exit: With code 2 for an unknown tool, 1 if a file cannot be
            removed.

    Example::

        pkgfzf cache clear
        pkgfzf cache clear deno
    """
    cache = _open_cache(ctx)
    kind = _parse_optional_tool(tool)
    try:
        removed = cache.clear(kind)
    except PkgfzfError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    if not removed:
        info("Nothing to clear.")
        return
    for path in removed:
        info(f"Removed {path}")
    success(f"Cleared {len(removed)} cache file(s).")
