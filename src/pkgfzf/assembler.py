"""Build the candidate list for a (tool, subcommand) pair.

Which sources feed a completion depends on the tool and on the subcommand
already typed. The mapping lives in :data:`POLICIES`, a table from
``(ToolKind, subcommand)`` to an ordered tuple of :class:`Source` values:

==========  ==========  ==============================================
tool        subcommand  sources
==========  ==========  ==============================================
yarn        ``run``     scripts
npm         ``run``     scripts
bun         ``run``     scripts
deno        ``run``     scripts, tasks, source files
deno        ``task``    tasks
yarn        (none)      catalog, labeled scripts
bun         (none)      catalog, labeled scripts
npm         (none)      catalog
deno        (none)      catalog, labeled tasks
==========  ==========  ==============================================

Any pair missing from the table produces no candidates. Lists are merged
with :func:`dedupe_candidates`, so the first source to offer a name wins.
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Iterable, Optional

from pkgfzf.cache import CompletionCache
from pkgfzf.models import Candidate, SourceFilesConfig, ToolKind
from pkgfzf.output import debug
from pkgfzf.sources import (
    DENO_TASK_LABEL,
    PACKAGE_SCRIPT_LABEL,
    find_source_files,
    read_scripts,
    read_tasks,
)


class Source(str, enum.Enum):
    """One list of candidates that can feed a completion."""

    CATALOG = "catalog"
    SCRIPTS = "scripts"
    SCRIPTS_LABELED = "scripts_labeled"
    TASKS = "tasks"
    TASKS_LABELED = "tasks_labeled"
    SOURCE_FILES = "source_files"


POLICIES: dict[tuple[ToolKind, Optional[str]], tuple[Source, ...]] = {
    (ToolKind.YARN, "run"): (Source.SCRIPTS,),
    (ToolKind.NPM, "run"): (Source.SCRIPTS,),
    (ToolKind.BUN, "run"): (Source.SCRIPTS,),
    (ToolKind.DENO, "run"): (Source.SCRIPTS, Source.TASKS, Source.SOURCE_FILES),
    (ToolKind.DENO, "task"): (Source.TASKS,),
    (ToolKind.YARN, None): (Source.CATALOG, Source.SCRIPTS_LABELED),
    (ToolKind.BUN, None): (Source.CATALOG, Source.SCRIPTS_LABELED),
    (ToolKind.NPM, None): (Source.CATALOG,),
    (ToolKind.DENO, None): (Source.CATALOG, Source.TASKS_LABELED),
}
"""Candidate sources for each ``(tool, subcommand)`` pair, in merge order."""


def dedupe_candidates(*lists: Iterable[Candidate]) -> list[Candidate]:
    """Concatenate *lists*, keeping the first candidate seen for each name.

    Candidates with an empty name are dropped.

    Example::

        dedupe_candidates([a_x, b_y], [b_z, c_w])  # -> [a_x, b_y, c_w]
    """
    seen: set[str] = set()
    merged: list[Candidate] = []
    for candidates in lists:
        for candidate in candidates:
            if not candidate.name.strip() or candidate.name in seen:
                continue
            seen.add(candidate.name)
            merged.append(candidate)
    return merged


def prompt_for(tool: ToolKind, subcommand: Optional[str] = None) -> str:
    """Return the fuzzy-finder prompt, e.g. ``"yarn > "`` or ``"deno task > "``."""
    if subcommand:
        return f"{tool.value} {subcommand} > "
    return f"{tool.value} > "


class CandidateAssembler:
    """Merge catalog, cache, and project-file candidates for a completion.

    Args:
        cache: Cache used for the built-in catalog.
        directory: Project directory whose ``package.json`` and
            ``deno.json(c)`` are read. Defaults to the current working
            directory at assembly time.
        source_settings: Limits for the ``deno run`` source file scan.
    """

    def __init__(
        self,
        cache: CompletionCache,
        directory: Optional[Path] = None,
        source_settings: Optional[SourceFilesConfig] = None,
    ) -> None:
        self._cache = cache
        self._directory = directory
        self._source_settings = source_settings or SourceFilesConfig()

    def assemble(
        self,
        tool: ToolKind,
        subcommand: Optional[str] = None,
        partial_word: str = "",
    ) -> list[Candidate]:
        """Return the deduplicated candidates for *tool* and *subcommand*.

        *partial_word* is not used for filtering; narrowing the list is the
        fuzzy finder's job, and the word only reaches it as the prefilled
        query.
        """
        sources = POLICIES.get((tool, subcommand))
        if sources is None:
            debug(f"No completion policy for {tool.value} {subcommand or ''}".rstrip())
            return []

        directory = self._directory or Path.cwd()
        lists = [self._load(source, tool, directory) for source in sources]
        candidates = dedupe_candidates(*lists)
        debug(
            f"Assembled {len(candidates)} candidate(s) for "
            f"{prompt_for(tool, subcommand).rstrip(' >')} from "
            f"{', '.join(s.value for s in sources)}"
        )
        return candidates

    def _load(self, source: Source, tool: ToolKind, directory: Path) -> list[Candidate]:
        if source is Source.CATALOG:
            return self._cache.get(tool)
        if source is Source.SCRIPTS:
            return read_scripts(directory).entries
        if source is Source.SCRIPTS_LABELED:
            return read_scripts(directory, label=PACKAGE_SCRIPT_LABEL).entries
        if source is Source.TASKS:
            return read_tasks(directory).entries
        if source is Source.TASKS_LABELED:
            return read_tasks(directory, label=DENO_TASK_LABEL).entries
        return find_source_files(directory, self._source_settings)
