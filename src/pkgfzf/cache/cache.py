"""Flat-file cache of the built-in catalog, one file per tool.

Each tool's catalog is written once to ``<cache_root>/<tool>.cache`` as
``name<TAB>description`` lines and reused on every later completion
request, in this process or any other. Entries never expire: a cache file
is only invalidated by deleting it (``pkgfzf cache clear``), so edits to
:mod:`pkgfzf.catalog` do not show up until then.

Every I/O failure degrades to the in-memory catalog. A completion request
must never fail because the cache directory is read-only or full.

See Also:
    :class:`~pkgfzf.models.CacheSettings` -- the Pydantic model that
    controls ``enabled`` and ``directory``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional

from pkgfzf import catalog
from pkgfzf.config import atomic_write
from pkgfzf.exceptions import CacheError
from pkgfzf.models import Candidate, ToolKind
from pkgfzf.output import debug

_SUFFIX = ".cache"


def render_lines(candidates: Iterable[Candidate]) -> str:
    """Render candidates as newline-terminated ``name<TAB>description`` lines."""
    return "".join(f"{c.render_line()}\n" for c in candidates)


def parse_lines(text: str) -> list[Candidate]:
    """Parse ``name<TAB>description`` lines back into candidates.

    Blank lines are skipped. A line without a tab becomes a candidate with
    an empty description.
    """
    candidates: list[Candidate] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        name, _, description = line.partition("\t")
        candidates.append(Candidate(name=name, description=description))
    return candidates


class CompletionCache:
    """Per-tool on-disk copy of :func:`pkgfzf.catalog.lookup`.

    Args:
        cache_root: Directory holding the ``<tool>.cache`` files. Created
            on first write if it does not exist.
        enabled: When ``False`` nothing is read or written and every call
            returns the in-memory catalog.

    Example::

        from pathlib import Path
        from pkgfzf.cache import CompletionCache
        from pkgfzf.models import ToolKind

        cache = CompletionCache(Path("/tmp/pkgfzf-cache"))
        cache.get(ToolKind.YARN)   # writes /tmp/pkgfzf-cache/yarn.cache
        cache.get(ToolKind.YARN)   # reads it back
    """

    def __init__(self, cache_root: str | Path, enabled: bool = True) -> None:
        self._cache_root = Path(cache_root)
        self._enabled = enabled

    @property
    def cache_root(self) -> Path:
        """The directory holding the cache files."""
        return self._cache_root

    def path_for(self, tool: ToolKind) -> Path:
        """Return the cache file path for *tool*."""
        return self._cache_root / f"{tool.value}{_SUFFIX}"

    def exists(self, tool: ToolKind) -> bool:
        """Whether a cache file has been written for *tool*."""
        return self.path_for(tool).is_file()

    def get(self, tool: ToolKind) -> list[Candidate]:
        """Return the catalog for *tool*, materialising the cache file on a miss.

        On a hit the file is read and parsed without consulting the catalog.
        Any I/O failure falls back to :func:`pkgfzf.catalog.lookup`.
        """
        if not self._enabled:
            return catalog.lookup(tool)

        try:
            if self.exists(tool):
                return self._read(tool)
            return self._write(tool)
        except CacheError as exc:
            debug(f"Cache unavailable, using built-in catalog: {exc}")
            return catalog.lookup(tool)

    def clear(self, tool: Optional[ToolKind] = None) -> list[Path]:
        """Delete the cache file for *tool*, or for every tool when ``None``.

        Returns:
            The paths that were actually removed.

        Raises:
            CacheError: If an existing cache file cannot be removed.
        """
        tools = [tool] if tool is not None else list(ToolKind)
        removed: list[Path] = []
        for t in tools:
            path = self.path_for(t)
            if not path.is_file():
                continue
            try:
                path.unlink()
            except OSError as exc:
                raise CacheError(f"Cannot remove {path}: {exc}") from exc
            removed.append(path)
        return removed

    def stats(self) -> dict[str, Any]:
        """Return cache statistics.

        Returns:
            A ``dict`` with ``enabled`` (bool), ``directory`` (str path), and
            ``tools`` mapping each tool name to the number of cached entries,
            or ``None`` when no cache file exists for it.
        """
        tools: dict[str, Optional[int]] = {}
        for tool in ToolKind:
            if self._enabled and self.exists(tool):
                try:
                    tools[tool.value] = len(self._read(tool))
                except CacheError:
                    tools[tool.value] = None
            else:
                tools[tool.value] = None
        return {
            "enabled": self._enabled,
            "directory": str(self._cache_root),
            "tools": tools,
        }

    def _read(self, tool: ToolKind) -> list[Candidate]:
        path = self.path_for(tool)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CacheError(f"Cannot read {path}: {exc}") from exc
        return parse_lines(text)

    def _write(self, tool: ToolKind) -> list[Candidate]:
        path = self.path_for(tool)
        text = catalog.render_catalog(tool)
        try:
            atomic_write(path, text)
        except OSError as exc:
            raise CacheError(f"Cannot write {path}: {exc}") from exc
        debug(f"Wrote completion cache: {path}")
        return parse_lines(text)
