"""Turn a shell completion request into a candidate list, a prompt, and a pick.

Every request is evaluated on its own; nothing is remembered between two
<Tab> presses. The word being completed is either at the *command
position* (the first word after the tool name) or at an *argument
position* (any later word):

* At the command position the tool's catalog and project entries are
  offered, with prompt ``"<tool> > "``.
* At an argument position candidates are offered only when the second word
  is one of the tool's subcommands (``run`` for every tool, ``task`` for
  deno). Everything else falls through with no completion.

The partial word is the word under the cursor, or the word before it when
the cursor sits on an empty word. It becomes the prefilled fuzzy query
unless it is a tool name or a subcommand word.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, Field

from pkgfzf.assembler import CandidateAssembler, prompt_for
from pkgfzf.catalog import get_profile
from pkgfzf.exceptions import SelectorNotFoundError
from pkgfzf.models import Candidate, SelectorConfig, SelectorOptions, ToolKind
from pkgfzf.output import debug
from pkgfzf.selector import Selector, should_prefill


class Position(str, enum.Enum):
    """Where the completed word sits on the command line."""

    COMMAND = "command"
    ARGUMENT = "argument"


class CompletionRequest(BaseModel):
    """One completion request as reported by the shell.

    ``words`` is the whole command line split into words, ``words[0]``
    being the tool. ``cursor`` is the 0-based index of the word being
    completed, which may be an empty string.
    """

    tool: ToolKind
    words: list[str] = Field(default_factory=list)
    cursor: int = 1

    @property
    def position(self) -> Position:
        return Position.COMMAND if self.cursor <= 1 else Position.ARGUMENT

    @property
    def subcommand(self) -> Optional[str]:
        """The second word on the line, if there is one before the cursor."""
        if self.cursor > 1 and len(self.words) > 1:
            return self.words[1]
        return None

    @property
    def partial_word(self) -> str:
        """The word under the cursor, falling back to the previous word when empty."""
        word = self._word_at(self.cursor)
        if not word:
            word = self._word_at(self.cursor - 1)
        return word

    def _word_at(self, index: int) -> str:
        if 0 <= index < len(self.words):
            return self.words[index]
        return ""


class CompletionPlan(BaseModel):
    """What the router decided to show for a request."""

    subcommand: Optional[str] = None
    candidates: list[Candidate]
    options: SelectorOptions


class DispatchRouter:
    """Route completion requests to the assembler and the selector.

    Args:
        assembler: Builds candidate lists.
        selector: Presents candidates and returns the pick.
        selector_config: Window geometry and key binding for every request.
    """

    def __init__(
        self,
        assembler: CandidateAssembler,
        selector: Selector,
        selector_config: Optional[SelectorConfig] = None,
    ) -> None:
        self._assembler = assembler
        self._selector = selector
        self._selector_config = selector_config or SelectorConfig()

    @property
    def assembler(self) -> CandidateAssembler:
        """The assembler used to build candidate lists."""
        return self._assembler

    def plan(self, request: CompletionRequest) -> Optional[CompletionPlan]:
        """Decide candidates and selector options for *request*.

        Returns:
            ``None`` when the request falls through (an argument position
            not preceded by a known subcommand).
        """
        partial = request.partial_word

        if request.position is Position.COMMAND:
            subcommand = None
            if partial == request.tool.value:
                partial = ""
        else:
            subcommand = request.subcommand
            if subcommand not in get_profile(request.tool).subcommands:
                debug(f"No completion for {request.tool.value} argument after {subcommand!r}")
                return None

        candidates = self._assembler.assemble(request.tool, subcommand, partial)
        cfg = self._selector_config
        options = SelectorOptions(
            prompt=prompt_for(request.tool, subcommand),
            query=partial if should_prefill(partial) else "",
            height=cfg.height,
            preview_window=cfg.preview_window,
            accept_key=cfg.accept_key,
            reverse=cfg.reverse,
        )
        return CompletionPlan(subcommand=subcommand, candidates=candidates, options=options)

    def complete(self, request: CompletionRequest) -> Optional[str]:
        """Plan *request*, run the selector, and return the chosen name.

        Returns ``None`` when there is nothing to complete, nothing to
        choose from, the user aborted, or the selector is unavailable.
        """
        plan = self.plan(request)
        if plan is None or not plan.candidates:
            return None
        try:
            return self._selector.select(plan.candidates, plan.options)
        except SelectorNotFoundError as exc:
            debug(str(exc))
            return None
