"""Built-in subcommand tables for each supported package manager.

The catalog is a fixed editorial table: one row per common subcommand with
a hand-written one-line description. It never touches the filesystem; the
on-disk copy lives in :mod:`pkgfzf.cache`.

The tables are deliberately plain ``(name, description)`` tuples so they
read like the cache files they are rendered into.
"""

from __future__ import annotations

from pkgfzf.exceptions import InvalidUsageError
from pkgfzf.models import Candidate, ToolKind, ToolProfile

_YARN = (
    ("add", "Add package to dependencies"),
    ("remove", "Remove package from dependencies"),
    ("install", "Install all dependencies"),
    ("upgrade", "Upgrade dependencies"),
    ("run", "Run script from package.json"),
    ("build", "Build the project"),
    ("test", "Run tests"),
    ("start", "Start the application"),
    ("dev", "Start development server"),
    ("lint", "Run linting"),
    ("format", "Format code"),
    ("clean", "Clean build artifacts"),
    ("cache", "Manage yarn cache"),
    ("info", "Show package information"),
    ("list", "List installed packages"),
    ("outdated", "Check for outdated packages"),
    ("audit", "Run security audit"),
    ("init", "Initialize new package"),
    ("version", "Manage package version"),
    ("publish", "Publish package"),
    ("workspace", "Manage workspace"),
    ("workspaces", "List workspaces"),
    ("dlx", "Download and execute package"),
    ("node", "Run node with yarn's resolution"),
    ("exec", "Execute command in project context"),
    ("create", "Create new project"),
    ("why", "Show why package is installed"),
)

_NPM = (
    ("install", "Install packages"),
    ("uninstall", "Remove packages"),
    ("update", "Update packages"),
    ("run", "Run package script"),
    ("build", "Build the project"),
    ("test", "Run tests"),
    ("start", "Start the application"),
    ("init", "Initialize package.json"),
    ("publish", "Publish package to registry"),
    ("version", "Manage package version"),
    ("audit", "Run security audit"),
    ("fund", "Display funding information"),
    ("list", "List installed packages"),
    ("outdated", "Check for outdated packages"),
    ("cache", "Manage npm cache"),
    ("config", "Manage npm configuration"),
    ("doctor", "Check npm environment"),
    ("pack", "Create tarball from package"),
    ("ping", "Ping npm registry"),
    ("search", "Search packages"),
    ("view", "View package information"),
    ("whoami", "Display npm username"),
)

_BUN = (
    ("install", "Install dependencies"),
    ("add", "Add dependency"),
    ("remove", "Remove dependency"),
    ("update", "Update dependencies"),
    ("run", "Run package script"),
    ("build", "Build project"),
    ("test", "Run tests"),
    ("create", "Create new project"),
    ("init", "Initialize package.json"),
    ("upgrade", "Upgrade bun version"),
    ("link", "Link package globally"),
    ("unlink", "Unlink package"),
    ("pm", "Package manager commands"),
    ("dev", "Start development server"),
    ("x", "Execute package"),
    ("exec", "Execute command"),
)

_DENO = (
    ("run", "Run TypeScript/JavaScript file"),
    ("compile", "Compile TypeScript to executable"),
    ("bundle", "Bundle modules"),
    ("install", "Install script as executable"),
    ("cache", "Cache dependencies"),
    ("info", "Show info about cache/modules"),
    ("doc", "Show documentation"),
    ("fmt", "Format source files"),
    ("lint", "Lint source files"),
    ("test", "Run tests"),
    ("types", "Print runtime TypeScript declarations"),
    ("upgrade", "Upgrade deno executable"),
    ("eval", "Evaluate script"),
    ("repl", "Start read-eval-print loop"),
    ("task", "Run task from deno.json"),
    ("bench", "Run benchmarks"),
    ("check", "Type-check files"),
    ("coverage", "Print coverage reports"),
    ("init", "Initialize new project"),
    ("jupyter", "Integration with Jupyter"),
    ("publish", "Publish module"),
    ("serve", "Start file server"),
    ("uninstall", "Uninstall script"),
    ("vendor", "Vendor dependencies"),
    ("help", "Show help"),
    ("completions", "Generate shell completions"),
)


def _profile(tool: ToolKind, rows: tuple[tuple[str, str], ...], *subcommands: str) -> ToolProfile:
    return ToolProfile(
        tool=tool,
        static_candidates=tuple(Candidate(name=n, description=d) for n, d in rows),
        subcommands=frozenset(subcommands),
    )


TOOL_PROFILES: dict[ToolKind, ToolProfile] = {
    ToolKind.YARN: _profile(ToolKind.YARN, _YARN, "run"),
    ToolKind.NPM: _profile(ToolKind.NPM, _NPM, "run"),
    ToolKind.BUN: _profile(ToolKind.BUN, _BUN, "run"),
    ToolKind.DENO: _profile(ToolKind.DENO, _DENO, "run", "task"),
}
"""Every supported tool mapped to its immutable profile."""

RESERVED_WORDS: frozenset[str] = frozenset(
    {tool.value for tool in ToolKind}
    | {sub for profile in TOOL_PROFILES.values() for sub in profile.subcommands}
)
"""Tool names and subcommand words; never used as a prefilled fuzzy query."""


def parse_tool(name: str) -> ToolKind:
    """Convert a command name into a :class:`~pkgfzf.models.ToolKind`.

    Raises:
        InvalidUsageError: If *name* is not a supported tool.
    """
    try:
        return ToolKind(name)
    except ValueError:
        supported = ", ".join(t.value for t in ToolKind)
        raise InvalidUsageError(
            f"Unsupported tool: {name}. Supported: {supported}"
        ) from None


def get_profile(tool: ToolKind) -> ToolProfile:
    """Return the :class:`~pkgfzf.models.ToolProfile` for *tool*."""
    return TOOL_PROFILES[tool]


def lookup(tool: ToolKind) -> list[Candidate]:
    """Return the built-in candidates for *tool*, in table order."""
    return list(TOOL_PROFILES[tool].static_candidates)


def render_catalog(tool: ToolKind) -> str:
    """Render the catalog for *tool* as cache-file text (``name<TAB>description`` lines)."""
    return "".join(f"{c.render_line()}\n" for c in TOOL_PROFILES[tool].static_candidates)
