"""Project-file sources for completion candidates.

Everything in this package is read fresh on each completion request, since
the files can change between two <Tab> presses:

* :mod:`~pkgfzf.sources.reader` -- ``package.json`` scripts and
  ``deno.json``/``deno.jsonc`` tasks.
* :mod:`~pkgfzf.sources.files` -- runnable source files offered by
  ``deno run``.

None of these functions raise for missing or malformed input; they return
an empty result instead.
"""

from pkgfzf.sources.files import find_source_files
from pkgfzf.sources.reader import (
    DENO_TASK_LABEL,
    PACKAGE_SCRIPT_LABEL,
    find_task_config,
    read_scripts,
    read_tasks,
    strip_jsonc_comments,
)

__all__ = [
    "DENO_TASK_LABEL",
    "PACKAGE_SCRIPT_LABEL",
    "find_source_files",
    "find_task_config",
    "read_scripts",
    "read_tasks",
    "strip_jsonc_comments",
]
