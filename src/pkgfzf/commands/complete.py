"""Complete command -- answer one shell completion request.

``pkgfzf complete`` is what the shell shim runs on every <Tab> press. It
builds a :class:`~pkgfzf.router.DispatchRouter` from the user config, runs
the request through it, and prints the chosen name on stdout. It prints
nothing when there is nothing to complete or the user aborts the picker.

Only an unknown tool name is reported as an error. Any other failure is
logged at debug level and ends in "no completion", since a traceback in the
middle of a command line is worse than no suggestion.

``pkgfzf candidates`` prints what the picker would be fed, without
launching it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from pkgfzf.exceptions import InvalidUsageError
from pkgfzf.output import OutputFormat, debug, error, format_response, get_output, print_data


def _make_selector(binary: str):
    """Create the interactive selector used by ``complete``."""
    from pkgfzf.selector import FzfSelector

    return FzfSelector(binary)


def _build_router(ctx: Optional[typer.Context]):
    """Wire cache, assembler, selector, and router from config and CLI flags."""
    from pkgfzf.assembler import CandidateAssembler
    from pkgfzf.cache import CompletionCache
    from pkgfzf.config import load_global_config_or_default, resolve_cache_root
    from pkgfzf.router import DispatchRouter

    cli_cache_dir = None
    if ctx is not None and ctx.obj:
        cli_cache_dir = ctx.obj.get("cache_dir")

    config = load_global_config_or_default()
    cache_root = resolve_cache_root(cli_cache_dir, config)
    debug(f"Cache root: {cache_root}")

    cache = CompletionCache(cache_root, enabled=config.cache.enabled)
    assembler = CandidateAssembler(cache, Path.cwd(), config.source_files)
    return DispatchRouter(
        assembler,
        _make_selector(config.selector.binary),
        config.selector,
    )


def complete_command(
    ctx: typer.Context,
    tool: str = typer.Argument(help="Tool being completed (yarn, npm, bun, deno)."),
    words: Optional[list[str]] = typer.Argument(
        None, help="Command line words, starting with the tool name."
    ),
    cursor: Optional[int] = typer.Option(
        None,
        "--cursor",
        "-c",
        help="0-based index of the word being completed (defaults to the last word).",
    ),
) -> None:
    """Pick a completion for the current command line and print it.

    Intended to be called by the shell integration script, e.g.::

        pkgfzf complete yarn --cursor 2 -- yarn run ""

    Args:
        ctx: Typer context carrying the ``cache_dir`` override.
        tool: Tool name; must be one of the supported tools.
        words: Words of the command line, ``words[0]`` being the tool.
        cursor: Index of the word under the cursor.

    Raises:
        typer.Exit: With code 2 if *tool* is not supported.
    """
    from pkgfzf.catalog import parse_tool
    from pkgfzf.router import CompletionRequest

    try:
        kind = parse_tool(tool)
    except InvalidUsageError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    words = list(words or [kind.value])
    if cursor is None:
        cursor = len(words) - 1

    try:
        router = _build_router(ctx)
        selected = router.complete(
            CompletionRequest(tool=kind, words=words, cursor=cursor)
        )
    except Exception as exc:
        debug(f"Completion failed: {exc!r}")
        return

    if selected:
        print_data(selected)


def candidates_command(
    ctx: typer.Context,
    tool: str = typer.Argument(help="Tool to list candidates for."),
    subcommand: Optional[str] = typer.Option(
        None, "--subcommand", "-s", help="Subcommand context, e.g. 'run' or 'task'."
    ),
) -> None:
    """Print the candidates the picker would show, without launching it.

    Plain output is the exact ``name<TAB>description`` text fed to fzf.

    Example::

        pkgfzf candidates yarn
        pkgfzf candidates deno --subcommand task --json
    """
    from pkgfzf.catalog import parse_tool

    try:
        kind = parse_tool(tool)
    except InvalidUsageError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    router = _build_router(ctx)
    candidates = router.assembler.assemble(kind, subcommand)

    if get_output().format == OutputFormat.PLAIN:
        for candidate in candidates:
            print_data(candidate.render_line())
    else:
        format_response([c.model_dump(mode="json") for c in candidates])
