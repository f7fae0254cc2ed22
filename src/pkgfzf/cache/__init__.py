"""On-disk completion cache for pkgfzf.

This package provides :class:`CompletionCache`, which persists each tool's
built-in catalog as a plain ``<tool>.cache`` text file under an injected
cache root and reads it back on later completion requests.

The cache is consumed by :class:`~pkgfzf.assembler.CandidateAssembler`
and is controlled by the ``cache`` section of the user configuration
(:class:`~pkgfzf.models.CacheSettings`).
"""

from pkgfzf.cache.cache import CompletionCache, parse_lines, render_lines

__all__ = ["CompletionCache", "parse_lines", "render_lines"]
