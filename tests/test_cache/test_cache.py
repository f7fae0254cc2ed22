"""Tests for the CompletionCache module."""

from __future__ import annotations

from pathlib import Path

import pytest

from pkgfzf import catalog
from pkgfzf.cache import CompletionCache, parse_lines, render_lines
from pkgfzf.models import Candidate, ToolKind


@pytest.fixture()
def cache(cache_root: Path) -> CompletionCache:
    return CompletionCache(cache_root)


# ------------------------------------------------------------------ #
# Line format
# ------------------------------------------------------------------ #


class TestLineFormat:
    def test_round_trip(self) -> None:
        candidates = [
            Candidate(name="add", description="Add package to dependencies"),
            Candidate(name="node", description="Run node with yarn's resolution"),
            Candidate(name="x", description=""),
        ]
        assert parse_lines(render_lines(candidates)) == candidates

    def test_render_includes_source_label(self) -> None:
        text = render_lines(
            [Candidate(name="dev", description="vite", source_label="[package.json script]")]
        )
        assert text == "dev\tvite [package.json script]\n"

    def test_parse_skips_blank_lines(self) -> None:
        assert parse_lines("a\tone\n\n   \nb\ttwo\n") == [
            Candidate(name="a", description="one"),
            Candidate(name="b", description="two"),
        ]

    def test_parse_line_without_tab(self) -> None:
        assert parse_lines("lonely\n") == [Candidate(name="lonely", description="")]

    def test_description_keeps_inner_tabs(self) -> None:
        assert parse_lines("a\tb\tc\n") == [Candidate(name="a", description="b\tc")]


# ------------------------------------------------------------------ #
# Miss / hit behaviour
# ------------------------------------------------------------------ #


class TestGet:
    def test_miss_creates_directory_and_file(self, cache: CompletionCache, cache_root: Path) -> None:
        assert not cache_root.exists()
        result = cache.get(ToolKind.YARN)
        assert result == catalog.lookup(ToolKind.YARN)
        assert (cache_root / "yarn.cache").is_file()
        assert (cache_root / "yarn.cache").read_text(encoding="utf-8") == catalog.render_catalog(
            ToolKind.YARN
        )

    def test_second_get_is_identical(self, cache: CompletionCache) -> None:
        assert cache.get(ToolKind.DENO) == cache.get(ToolKind.DENO)

    def test_hit_does_not_render_catalog(
        self, cache: CompletionCache, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        first = cache.get(ToolKind.NPM)

        def _boom(tool: ToolKind) -> str:
            raise AssertionError("catalog rendered on a cache hit")

        monkeypatch.setattr(catalog, "render_catalog", _boom)
        assert cache.get(ToolKind.NPM) == first

    def test_hit_survives_a_new_instance(self, cache_root: Path) -> None:
        CompletionCache(cache_root).get(ToolKind.BUN)
        assert CompletionCache(cache_root).exists(ToolKind.BUN)

    def test_existing_file_is_never_refreshed(self, cache: CompletionCache, cache_root: Path) -> None:
        cache_root.mkdir(parents=True)
        (cache_root / "yarn.cache").write_text("stale\tEdited by hand\n", encoding="utf-8")
        assert cache.get(ToolKind.YARN) == [Candidate(name="stale", description="Edited by hand")]

    def test_tools_use_separate_files(self, cache: CompletionCache, cache_root: Path) -> None:
        cache.get(ToolKind.YARN)
        cache.get(ToolKind.DENO)
        assert sorted(p.name for p in cache_root.iterdir()) == ["deno.cache", "yarn.cache"]

    def test_disabled_cache_writes_nothing(self, cache_root: Path) -> None:
        cache = CompletionCache(cache_root, enabled=False)
        assert cache.get(ToolKind.NPM) == catalog.lookup(ToolKind.NPM)
        assert not cache_root.exists()


# ------------------------------------------------------------------ #
# Failure fallback
# ------------------------------------------------------------------ #


class TestFallback:
    def test_unwritable_root_falls_back(self, tmp_path: Path) -> None:
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file in the way", encoding="utf-8")
        cache = CompletionCache(blocker / "cache")
        assert cache.get(ToolKind.YARN) == catalog.lookup(ToolKind.YARN)

    def test_write_error_falls_back(
        self, cache: CompletionCache, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _fail(path: Path, data: str) -> None:
            raise PermissionError("read-only file system")

        monkeypatch.setattr("pkgfzf.cache.cache.atomic_write", _fail)
        assert cache.get(ToolKind.DENO) == catalog.lookup(ToolKind.DENO)

    def test_unreadable_file_falls_back(
        self, cache: CompletionCache, cache_root: Path
    ) -> None:
        cache_root.mkdir(parents=True)
        (cache_root / "bun.cache").write_bytes(b"\xff\xfe\xfa not utf-8")
        assert cache.get(ToolKind.BUN) == catalog.lookup(ToolKind.BUN)


# ------------------------------------------------------------------ #
# Management helpers
# ------------------------------------------------------------------ #


class TestManagement:
    def test_path_for(self, cache: CompletionCache, cache_root: Path) -> None:
        assert cache.path_for(ToolKind.NPM) == cache_root / "npm.cache"

    def test_clear_one_tool(self, cache: CompletionCache) -> None:
        cache.get(ToolKind.YARN)
        cache.get(ToolKind.NPM)
        removed = cache.clear(ToolKind.YARN)
        assert removed == [cache.path_for(ToolKind.YARN)]
        assert not cache.exists(ToolKind.YARN)
        assert cache.exists(ToolKind.NPM)

    def test_clear_all(self, cache: CompletionCache) -> None:
        for tool in ToolKind:
            cache.get(tool)
        assert len(cache.clear()) == len(ToolKind)
        assert not any(cache.exists(tool) for tool in ToolKind)

    def test_clear_when_empty(self, cache: CompletionCache) -> None:
        assert cache.clear() == []

    def test_stats(self, cache: CompletionCache, cache_root: Path) -> None:
        cache.get(ToolKind.NPM)
        stats = cache.stats()
        assert stats["enabled"] is True
        assert stats["directory"] == str(cache_root)
        assert stats["tools"]["npm"] == len(catalog.lookup(ToolKind.NPM))
        assert stats["tools"]["yarn"] is None
