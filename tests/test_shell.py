"""Tests for pkgfzf.shell -- completion shim rendering and install paths."""

from __future__ import annotations

from pathlib import Path

import pytest

from pkgfzf.exceptions import InvalidUsageError
from pkgfzf.shell import SUPPORTED_SHELLS, detect_shell, install_path, render_script


class TestRenderScript:
    def test_zsh_registers_every_tool(self) -> None:
        script = render_script("zsh")
        assert "compdef _pkgfzf_complete yarn npm bun deno" in script
        assert 'pkgfzf complete "$service" --cursor $((CURRENT - 1)) -- "${words[@]}"' in script
        assert 'compadd -U -- "$selected"' in script

    def test_bash_registers_every_tool(self) -> None:
        script = render_script("bash")
        assert "complete -F _pkgfzf_complete yarn npm bun deno" in script
        assert "COMPREPLY=(\"$selected\")" in script

    def test_bash_keeps_colon_words_together(self) -> None:
        script = render_script("bash")
        assert "_get_comp_words_by_ref -n : cur words cword" in script
        assert 'line="${COMP_LINE:0:COMP_POINT}"' in script
        assert 'pkgfzf complete "$1" --cursor "$cword" -- "${words[@]}"' in script
        assert "COMP_CWORD" not in script
        assert '__ltrim_colon_completions "$cur"' in script

    def test_bash_redraws_after_fzf(self) -> None:
        script = render_script("bash")
        assert """bind '"\\e[0n": redraw-current-line'""" in script
        redraw = script.index("printf '\\e[5n'")
        assert script.index('complete "$1"') < redraw < script.index('COMPREPLY=("$selected")')

    @pytest.mark.parametrize("shell", SUPPORTED_SHELLS)
    def test_checks_for_fzf_first(self, shell: str) -> None:
        script = render_script(shell)
        check = script.index("command -v fzf")
        assert check < script.index("_pkgfzf_complete()")
        assert 'echo "pkgfzf: fzf is not installed" >&2' in script

    def test_executable_is_quoted(self) -> None:
        script = render_script("zsh", executable="/opt/my tools/pkgfzf")
        assert "'/opt/my tools/pkgfzf' complete" in script

    def test_custom_fzf_binary(self) -> None:
        script = render_script("bash", fzf_binary="sk")
        assert "command -v sk" in script
        assert "pkgfzf: sk is not installed" in script

    def test_shell_name_case_insensitive(self) -> None:
        assert render_script("ZSH") == render_script("zsh")

    def test_unsupported_shell(self) -> None:
        with pytest.raises(InvalidUsageError, match="Unsupported shell: fish"):
            render_script("fish")


class TestInstallPath:
    def test_zsh(self, tmp_path: Path) -> None:
        assert install_path("zsh", home=tmp_path) == tmp_path / ".zsh" / "pkgfzf.zsh"

    def test_bash(self, tmp_path: Path) -> None:
        assert install_path("bash", home=tmp_path) == tmp_path / ".bash_completion.d" / "pkgfzf"

    def test_unsupported(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidUsageError):
            install_path("powershell", home=tmp_path)


class TestDetectShell:
    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHELL", "/usr/local/bin/bash")
        assert detect_shell() == "bash"

    def test_default_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SHELL", raising=False)
        assert detect_shell() == "zsh"
