"""Interactive selection of one candidate.

* :class:`~pkgfzf.selector.base.Selector` -- the abstract interface the
  router talks to.
* :class:`~pkgfzf.selector.fzf.FzfSelector` -- the real implementation,
  which pipes ``name<TAB>description`` lines into ``fzf``.

Tests substitute a scripted :class:`Selector` so that routing and assembly
can be exercised without a terminal.
"""

from pkgfzf.selector.base import Selector, should_prefill
from pkgfzf.selector.fzf import FzfSelector, parse_selection, require_selector

__all__ = [
    "FzfSelector",
    "Selector",
    "parse_selection",
    "require_selector",
    "should_prefill",
]
