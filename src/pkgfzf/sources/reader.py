"""Read scripts and tasks from ``package.json`` and ``deno.json(c)``.

Both files are decoded into small Pydantic models, so a file whose
``scripts`` or ``tasks`` key has the wrong shape fails validation the same
way a file with a syntax error fails parsing. Either way the caller gets an
empty :class:`~pkgfzf.models.ConfigTaskSet`: a missing key, a wrong type,
and a broken file are all "no entries". The reason is logged at debug level
and nothing else.

``deno.jsonc`` is JSON with ``//`` and ``/* */`` comments (and, in
practice, trailing commas). :func:`strip_jsonc_comments` removes them while
leaving string literals such as ``"https://deno.land"`` untouched.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from pkgfzf.models import Candidate, ConfigOrigin, ConfigTaskSet
from pkgfzf.output import debug

PACKAGE_JSON = "package.json"
DENO_CONFIG_NAMES = ("deno.json", "deno.jsonc")

PACKAGE_SCRIPT_LABEL = "[package.json script]"
DENO_TASK_LABEL = "[deno task]"

# A string literal is matched first so that comment markers inside it are
# consumed as part of the string and kept.
_JSONC_COMMENT = re.compile(r'("(?:\\.|[^"\\])*")|/\*[\s\S]*?\*/|//[^\n]*')
_JSONC_TRAILING_COMMA = re.compile(r'("(?:\\.|[^"\\])*")|,(\s*[}\]])')


class PackageManifest(BaseModel):
    """The part of ``package.json`` pkgfzf cares about."""

    model_config = ConfigDict(extra="ignore")

    scripts: dict[str, str] = Field(default_factory=dict)


class TaskRunnerConfig(BaseModel):
    """The part of ``deno.json`` pkgfzf cares about.

    A task is either a command string or an object such as
    ``{"command": "deno test", "dependencies": ["build"]}``.
    """

    model_config = ConfigDict(extra="ignore")

    tasks: dict[str, Union[str, dict[str, Any]]] = Field(default_factory=dict)


def strip_jsonc_comments(text: str) -> str:
    """Remove comments and trailing commas from JSON-with-comments text."""
    without_comments = _JSONC_COMMENT.sub(lambda m: m.group(1) or "", text)
    return _JSONC_TRAILING_COMMA.sub(
        lambda m: m.group(1) if m.group(1) is not None else m.group(2),
        without_comments,
    )


def find_task_config(directory: Path) -> Optional[Path]:
    """Return ``deno.json`` if present, else ``deno.jsonc``, else ``None``."""
    for name in DENO_CONFIG_NAMES:
        path = directory / name
        if path.is_file():
            return path
    return None


def _load_json(path: Path, jsonc: bool = False) -> Any:
    text = path.read_text(encoding="utf-8-sig")
    if jsonc:
        text = strip_jsonc_comments(text)
    return json.loads(text)


def _task_command(value: Union[str, dict[str, Any]]) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def read_scripts(directory: Path, label: Optional[str] = None) -> ConfigTaskSet:
    """Read the ``scripts`` map from ``<directory>/package.json``.

    Args:
        directory: Project directory, normally the current working directory.
        label: Optional ``source_label`` attached to every entry.

    Returns:
        Scripts in file order, or an empty set when the file is absent,
        unreadable, malformed, or has no usable ``scripts`` map.
    """
    result = ConfigTaskSet(origin=ConfigOrigin.SCRIPTS)
    path = directory / PACKAGE_JSON
    if not path.is_file():
        return result

    try:
        manifest = PackageManifest.model_validate(_load_json(path))
    except (OSError, ValueError) as exc:
        debug(f"Ignoring {path}: {exc}")
        return result

    result.entries = [
        Candidate(name=name, description=command, source_label=label)
        for name, command in manifest.scripts.items()
    ]
    return result


def read_tasks(directory: Path, label: Optional[str] = None) -> ConfigTaskSet:
    """Read the ``tasks`` map from ``deno.json`` or ``deno.jsonc``.

    ``deno.json`` wins when both files exist. Comments are stripped only for
    the ``.jsonc`` variant. Object-valued tasks are rendered as compact JSON.

    Args:
        directory: Project directory, normally the current working directory.
        label: Optional ``source_label`` attached to every entry.

    Returns:
        Tasks in file order, or an empty set when no config file exists or it
        cannot be used.
    """
    result = ConfigTaskSet(origin=ConfigOrigin.TASKS)
    path = find_task_config(directory)
    if path is None:
        return result

    try:
        config = TaskRunnerConfig.model_validate(
            _load_json(path, jsonc=path.suffix == ".jsonc")
        )
    except (OSError, ValueError) as exc:
        debug(f"Ignoring {path}: {exc}")
        return result

    result.entries = [
        Candidate(name=name, description=_task_command(value), source_label=label)
        for name, value in config.tasks.items()
    ]
    return result
