"""pkgfzf -- Fuzzy completion for package manager CLIs.

This package lets a user pick a subcommand, ``package.json`` script, or
``deno.json`` task for ``yarn``, ``npm``, ``bun`` and ``deno`` through an
interactive ``fzf`` prompt instead of static tab completion.

Typical setup::

    eval "$(pkgfzf init zsh)"    # register completion for all four tools

The shell shim calls ``pkgfzf complete`` on every <Tab>, which routes the
request, assembles candidates, runs ``fzf`` and prints the chosen name.

Modules:
    app: Typer application factory and CLI entry point.
    models: Pydantic models shared across the entire package.
    config: XDG-aware configuration and cache-root resolution.
    catalog: Built-in subcommand tables for each supported tool.
    assembler: Merges catalog, cache, and project config candidates.
    router: Decides which candidates and prompt a completion request gets.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
