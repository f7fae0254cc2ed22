"""Tests for pkgfzf.sources.reader -- package.json scripts and deno tasks."""

from __future__ import annotations

from pathlib import Path

import pytest

from pkgfzf.models import ConfigOrigin
from pkgfzf.sources import (
    DENO_TASK_LABEL,
    PACKAGE_SCRIPT_LABEL,
    find_task_config,
    read_scripts,
    read_tasks,
    strip_jsonc_comments,
)


def _pairs(task_set) -> list[tuple[str, str]]:
    return [(c.name, c.description) for c in task_set.entries]


# ------------------------------------------------------------------ #
# package.json
# ------------------------------------------------------------------ #


class TestReadScripts:
    def test_scripts_in_file_order(self, project_dir: Path, write_json) -> None:
        write_json(
            project_dir / "package.json",
            {"name": "app", "scripts": {"test": "vitest", "dev": "vite", "build": "tsc"}},
        )
        result = read_scripts(project_dir)
        assert result.origin is ConfigOrigin.SCRIPTS
        assert _pairs(result) == [("test", "vitest"), ("dev", "vite"), ("build", "tsc")]

    def test_label_is_attached(self, project_dir: Path, write_json) -> None:
        write_json(project_dir / "package.json", {"scripts": {"dev": "vite"}})
        entry = read_scripts(project_dir, label=PACKAGE_SCRIPT_LABEL).entries[0]
        assert entry.source_label == "[package.json script]"
        assert entry.render_line() == "dev\tvite [package.json script]"

    def test_missing_file(self, project_dir: Path) -> None:
        assert read_scripts(project_dir).entries == []

    def test_malformed_json(self, project_dir: Path) -> None:
        (project_dir / "package.json").write_text('{"scripts": {"dev": ', encoding="utf-8")
        assert read_scripts(project_dir).entries == []

    def test_no_scripts_key(self, project_dir: Path, write_json) -> None:
        write_json(project_dir / "package.json", {"name": "app"})
        assert read_scripts(project_dir).entries == []

    @pytest.mark.parametrize(
        "payload",
        [
            {"scripts": ["dev", "build"]},
            {"scripts": {"dev": 1}},
            {"scripts": None},
            ["not", "an", "object"],
        ],
    )
    def test_wrong_types_yield_nothing(self, project_dir: Path, write_json, payload) -> None:
        write_json(project_dir / "package.json", payload)
        assert read_scripts(project_dir).entries == []

    def test_byte_order_mark_is_skipped(self, project_dir: Path) -> None:
        (project_dir / "package.json").write_bytes(
            b"\xef\xbb\xbf" + b'{"scripts": {"dev": "vite"}}'
        )
        assert _pairs(read_scripts(project_dir)) == [("dev", "vite")]

    def test_package_json_directory_is_ignored(self, project_dir: Path) -> None:
        (project_dir / "package.json").mkdir()
        assert read_scripts(project_dir).entries == []


# ------------------------------------------------------------------ #
# deno.json / deno.jsonc
# ------------------------------------------------------------------ #


class TestReadTasks:
    def test_deno_json_tasks(self, project_dir: Path, write_json) -> None:
        write_json(project_dir / "deno.json", {"tasks": {"start": "deno run main.ts", "fmt": "deno fmt"}})
        result = read_tasks(project_dir)
        assert result.origin is ConfigOrigin.TASKS
        assert _pairs(result) == [("start", "deno run main.ts"), ("fmt", "deno fmt")]

    def test_jsonc_block_comment(self, project_dir: Path) -> None:
        (project_dir / "deno.jsonc").write_text(
            '{ /* note */ "tasks": { "build": "tsc" } }', encoding="utf-8"
        )
        assert _pairs(read_tasks(project_dir)) == [("build", "tsc")]

    def test_jsonc_line_comments_and_trailing_commas(self, project_dir: Path) -> None:
        (project_dir / "deno.jsonc").write_text(
            "{\n"
            "  // tasks for local development\n"
            '  "tasks": {\n'
            '    "dev": "deno run --watch main.ts", // watch mode\n'
            "    /* multi\n"
            "       line */\n"
            '    "fetch": "deno run -A https://deno.land/x/tool.ts",\n'
            "  },\n"
            "}\n",
            encoding="utf-8",
        )
        assert _pairs(read_tasks(project_dir)) == [
            ("dev", "deno run --watch main.ts"),
            ("fetch", "deno run -A https://deno.land/x/tool.ts"),
        ]

    def test_structured_task_rendered_as_json(self, project_dir: Path, write_json) -> None:
        write_json(
            project_dir / "deno.json",
            {"tasks": {"test": {"command": "deno test", "dependencies": ["build"]}}},
        )
        assert _pairs(read_tasks(project_dir)) == [
            ("test", '{"command":"deno test","dependencies":["build"]}')
        ]

    def test_deno_json_preferred_over_jsonc(self, project_dir: Path, write_json) -> None:
        write_json(project_dir / "deno.json", {"tasks": {"plain": "echo json"}})
        (project_dir / "deno.jsonc").write_text(
            '{"tasks": {"commented": "echo jsonc"}}', encoding="utf-8"
        )
        assert find_task_config(project_dir) == project_dir / "deno.json"
        assert _pairs(read_tasks(project_dir)) == [("plain", "echo json")]

    def test_comments_in_plain_json_are_an_error(self, project_dir: Path) -> None:
        (project_dir / "deno.json").write_text(
            '{ // nope\n "tasks": {"a": "b"} }', encoding="utf-8"
        )
        assert read_tasks(project_dir).entries == []

    def test_label_is_attached(self, project_dir: Path, write_json) -> None:
        write_json(project_dir / "deno.json", {"tasks": {"dev": "deno run main.ts"}})
        entry = read_tasks(project_dir, label=DENO_TASK_LABEL).entries[0]
        assert entry.display_description == "deno run main.ts [deno task]"

    def test_missing_config(self, project_dir: Path) -> None:
        assert find_task_config(project_dir) is None
        assert read_tasks(project_dir).entries == []

    @pytest.mark.parametrize("payload", [{"tasks": "build"}, {"tasks": {"a": 3}}])
    def test_wrong_types_yield_nothing(self, project_dir: Path, write_json, payload) -> None:
        write_json(project_dir / "deno.json", payload)
        assert read_tasks(project_dir).entries == []


# ------------------------------------------------------------------ #
# strip_jsonc_comments
# ------------------------------------------------------------------ #


class TestStripJsoncComments:
    def test_strings_are_preserved(self) -> None:
        text = '{"url": "https://example.com/*x*/", "c": "// not a comment"}'
        assert strip_jsonc_comments(text) == text

    def test_escaped_quotes_in_strings(self) -> None:
        text = '{"a": "say \\"hi\\" // still string"} // gone'
        assert strip_jsonc_comments(text) == '{"a": "say \\"hi\\" // still string"} '

    def test_trailing_commas_removed(self) -> None:
        assert strip_jsonc_comments('{"a": [1, 2,], "b": 3,}') == '{"a": [1, 2], "b": 3}'

    def test_comma_inside_string_kept(self) -> None:
        assert strip_jsonc_comments('{"a": ",}"}') == '{"a": ",}"}'
