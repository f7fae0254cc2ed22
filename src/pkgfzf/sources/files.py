"""Find runnable source files for ``deno run`` completion.

Walks the working directory to a shallow depth and collects files whose
extension looks runnable (``.ts``, ``.js``, ``.mts``, ``.mjs`` by default).
The walk is pre-order with names sorted, so the same tree always yields
the same list, and it stops as soon as ``max_files`` paths were found.

Directories like ``node_modules`` and ``.git`` are always pruned, and the
root ``.gitignore`` is honoured via :mod:`pathspec` when enabled.
"""

from __future__ import annotations

import os
from pathlib import Path

import pathspec

from pkgfzf.models import Candidate, SourceFilesConfig
from pkgfzf.output import debug

SOURCE_FILE_DESCRIPTION = "source file"

_ALWAYS_SKIP = frozenset({".git", "node_modules", ".cache", "__pycache__"})


def _load_gitignore(root: Path) -> pathspec.PathSpec | None:
    """Load ``.gitignore`` from *root* if it exists, returning a PathSpec matcher."""
    gitignore = root / ".gitignore"
    if not gitignore.is_file():
        return None
    try:
        lines = gitignore.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError as exc:
        debug(f"Ignoring {gitignore}: {exc}")
        return None
    return pathspec.PathSpec.from_lines("gitignore", lines)


def find_source_files(
    directory: Path,
    settings: SourceFilesConfig | None = None,
) -> list[Candidate]:
    """Collect up to ``settings.max_files`` runnable files below *directory*.

    Depth counts the file itself: with the default ``max_depth`` of 2,
    ``main.ts`` and ``src/app.ts`` are found but ``src/lib/util.ts`` is not.

    Args:
        directory: Root of the walk, normally the current working directory.
        settings: Limits and extensions; defaults to :class:`SourceFilesConfig`.

    Returns:
        One candidate per file, named by its ``/``-separated relative path,
        with the description ``"source file"``. Unreadable directories are
        skipped silently.
    """
    settings = settings or SourceFilesConfig()
    if settings.max_files <= 0 or settings.max_depth <= 0 or not directory.is_dir():
        return []

    extensions = tuple(settings.extensions)
    gitignore_spec = _load_gitignore(directory) if settings.respect_gitignore else None
    found: list[Candidate] = []

    def _ignored(rel_path: str, is_dir: bool) -> bool:
        if gitignore_spec is None:
            return False
        return gitignore_spec.match_file(rel_path + "/" if is_dir else rel_path)

    def _walk(current: Path, rel_dir: str, depth: int) -> None:
        try:
            entries = sorted(os.scandir(current), key=lambda e: e.name)
        except OSError:
            return
        for entry in entries:
            if len(found) >= settings.max_files:
                return
            rel_path = f"{rel_dir}/{entry.name}" if rel_dir else entry.name
            try:
                is_dir = entry.is_dir()
            except OSError:
                continue
            if is_dir:
                if depth < settings.max_depth and entry.name not in _ALWAYS_SKIP:
                    if not _ignored(rel_path, is_dir=True):
                        _walk(Path(entry.path), rel_path, depth + 1)
                continue
            if entry.name.endswith(extensions) and not _ignored(rel_path, is_dir=False):
                found.append(
                    Candidate(name=rel_path, description=SOURCE_FILE_DESCRIPTION)
                )

    _walk(directory, "", 1)
    return found
