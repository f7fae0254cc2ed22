"""Abstract base class for interactive selectors.

A selector receives the assembled candidates and per-request
:class:`~pkgfzf.models.SelectorOptions`, lets the user pick one, and
returns the picked name. Returning ``None`` means "no completion": the
user aborted, nothing matched, or there was nothing to choose from.

See Also:
    :mod:`pkgfzf.selector.fzf` for the ``fzf`` implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from pkgfzf.catalog import RESERVED_WORDS
from pkgfzf.models import Candidate, SelectorOptions


def should_prefill(word: str) -> bool:
    """Whether *word* should become the initial fuzzy query.

    Tool names and subcommand words (``run``, ``task``) are never used: after
    ``yarn run <Tab>`` the word ``run`` would only filter out every script.
    """
    return bool(word) and word not in RESERVED_WORDS


class Selector(ABC):
    """Abstract base class for candidate selectors."""

    @abstractmethod
    def select(
        self,
        candidates: Sequence[Candidate],
        options: SelectorOptions,
    ) -> Optional[str]:
        """Let the user choose one of *candidates*.

        Args:
            candidates: Deduplicated candidates in display order.
            options: Prompt, prefilled query, and window settings.

        Returns:
            The chosen candidate's name, or ``None`` when nothing was chosen.
        """
