"""Shell integration scripts.

:func:`~pkgfzf.shell.scripts.render_script` produces the snippet that a
user evaluates in their shell startup file to register ``pkgfzf`` as the
completion provider for every supported tool.
"""

from pkgfzf.shell.scripts import SUPPORTED_SHELLS, detect_shell, install_path, render_script

__all__ = ["SUPPORTED_SHELLS", "detect_shell", "install_path", "render_script"]
