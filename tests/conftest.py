"""Shared test fixtures for pkgfzf.

Provides reusable fixtures for creating isolated config environments,
writing project files, substituting a scripted selector for fzf, and
running CLI commands. These fixtures are automatically discovered by pytest
and available to all test modules without explicit imports.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Optional, Sequence, Union

import pytest

from pkgfzf.models import Candidate, SelectorOptions
from pkgfzf.output import OutputFormat, OutputManager, reset_output, set_output
from pkgfzf.selector import Selector


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time.  When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale
    ("I/O operation on closed file").  Resetting forces a fresh manager
    to be created on next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Scripted selector
# ---------------------------------------------------------------------------


class ScriptedSelector(Selector):
    """Deterministic stand-in for fzf.

    Returns *choice* for every call (or ``choice(candidates)`` when it is
    callable) and records what it was asked to show.
    """

    def __init__(
        self,
        choice: Union[None, str, Callable[[Sequence[Candidate]], Optional[str]]] = None,
    ) -> None:
        self.choice = choice
        self.calls: list[tuple[list[Candidate], SelectorOptions]] = []

    def select(
        self,
        candidates: Sequence[Candidate],
        options: SelectorOptions,
    ) -> Optional[str]:
        self.calls.append((list(candidates), options))
        if callable(self.choice):
            return self.choice(candidates)
        return self.choice


@pytest.fixture
def scripted_selector() -> type[ScriptedSelector]:
    """The :class:`ScriptedSelector` class, for tests to instantiate."""
    return ScriptedSelector


# ---------------------------------------------------------------------------
# Project files
# ---------------------------------------------------------------------------


@pytest.fixture
def write_json() -> Callable[[Path, Any], Path]:
    """Return a helper that writes *data* as JSON to *path*."""

    def _write(path: Path, data: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An empty project directory, separate from the cache directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def cache_root(tmp_path: Path) -> Path:
    """A cache root that does not exist yet."""
    return tmp_path / "cache-root"


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Sets HOME, XDG_CONFIG_HOME, XDG_CACHE_HOME, and XDG_DATA_HOME to
    subdirectories of tmp_path so that tests never touch real user
    config, and changes the working directory to an empty project
    directory.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setattr("pkgfzf.config._is_xdg_platform", lambda: True)

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a PLAIN-format, quiet OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
