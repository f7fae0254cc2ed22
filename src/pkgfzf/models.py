"""Canonical Pydantic models shared across all pkgfzf modules.

This is the single source of truth for data shapes in the project. The
models fall into two groups:

**Completion models** -- built and discarded on every completion request:
    :class:`ToolKind`, :class:`ConfigOrigin`, :class:`Candidate`,
    :class:`ToolProfile`, :class:`ConfigTaskSet`, and
    :class:`SelectorOptions`.

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`SelectorConfig`, :class:`CacheSettings`,
    :class:`SourceFilesConfig`, and :class:`GlobalConfig`.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Completion models ---


class ToolKind(str, enum.Enum):
    """Package manager CLIs that pkgfzf can complete for."""

    YARN = "yarn"
    NPM = "npm"
    BUN = "bun"
    DENO = "deno"


class ConfigOrigin(str, enum.Enum):
    """Which project file a :class:`ConfigTaskSet` was read from."""

    SCRIPTS = "scripts"
    TASKS = "tasks"


class Candidate(BaseModel):
    """One selectable completion item.

    ``name`` is what gets inserted on the command line and is the key used
    for deduplication. ``description`` is display-only. ``source_label``
    tags entries that come from project files when they are mixed with the
    built-in catalog, e.g. ``"[package.json script]"``.

    Example::

        Candidate(name="dev", description="vite", source_label="[package.json script]")
        # renders as "dev\\tvite [package.json script]"
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    source_label: Optional[str] = None

    @property
    def display_description(self) -> str:
        """Description as shown in the preview pane, with the origin label appended."""
        if self.source_label:
            return f"{self.description} {self.source_label}"
        return self.description

    def render_line(self) -> str:
        """Render as a ``name<TAB>description`` line for the fuzzy finder.

        Line breaks in the description (multi-line script commands) become
        spaces so that one candidate is always exactly one line.
        """
        description = self.display_description.replace("\r\n", " ")
        description = description.replace("\r", " ").replace("\n", " ")
        return f"{self.name}\t{description}"


class ToolProfile(BaseModel):
    """Immutable per-tool definition.

    ``subcommands`` lists the words that, in the second position of the
    command line, switch the completion to project scripts or tasks.
    """

    model_config = ConfigDict(frozen=True)

    tool: ToolKind
    static_candidates: tuple[Candidate, ...]
    subcommands: frozenset[str] = Field(default_factory=lambda: frozenset({"run"}))


class ConfigTaskSet(BaseModel):
    """Scripts or tasks read from the current project.

    Rebuilt on every invocation because project files can change between
    completions.
    """

    origin: ConfigOrigin
    entries: list[Candidate] = Field(default_factory=list)


class SelectorOptions(BaseModel):
    """Per-request options handed to a :class:`~pkgfzf.selector.base.Selector`."""

    prompt: str
    query: str = ""
    height: str = "40%"
    preview_window: str = "right:50%:wrap"
    accept_key: str = "tab"
    reverse: bool = True


# --- Configuration models ---


class SelectorConfig(BaseModel):
    """Fuzzy-finder settings stored in :class:`GlobalConfig`."""

    binary: str = Field(default="fzf", description="Fuzzy finder executable")
    height: str = Field(default="40%", description="Height of the finder window")
    preview_window: str = Field(
        default="right:50%:wrap", description="Preview pane geometry"
    )
    accept_key: str = Field(
        default="tab", description="Key bound to immediate accept"
    )
    reverse: bool = Field(default=True, description="Show the prompt at the top")


class CacheSettings(BaseModel):
    """Completion cache settings stored in :class:`GlobalConfig`."""

    enabled: bool = Field(default=True, description="Persist catalog tables to disk")
    directory: Optional[str] = Field(
        default=None,
        description="Cache root override (defaults to the XDG cache directory)",
    )


class SourceFilesConfig(BaseModel):
    """Settings for the source files offered by ``deno run``."""

    max_files: int = Field(default=20, description="Maximum number of files offered")
    max_depth: int = Field(
        default=2, description="Maximum directory depth, counting the file itself"
    )
    extensions: list[str] = Field(
        default_factory=lambda: [".ts", ".js", ".mts", ".mjs"],
        description="File extensions treated as runnable source files",
    )
    respect_gitignore: bool = Field(
        default=True, description="Skip files matched by the root .gitignore"
    )


class GlobalConfig(BaseModel):
    """User-wide configuration persisted as ``config.json``.

    Loaded by :func:`~pkgfzf.config.load_global_config` and saved by
    :func:`~pkgfzf.config.save_global_config`. Every field has a default,
    so an absent file is equivalent to ``GlobalConfig()``.
    """

    selector: SelectorConfig = Field(default_factory=SelectorConfig)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    source_files: SourceFilesConfig = Field(default_factory=SourceFilesConfig)
