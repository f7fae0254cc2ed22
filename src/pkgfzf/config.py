"""Configuration management with XDG paths, atomic writes, and cache-root resolution.

This module handles all persistent configuration for pkgfzf:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.pkgfzf/`` on macOS and Windows. See :func:`get_config_dir`,
  :func:`get_cache_dir`, :func:`get_data_dir`.
* **Global config** -- A single :class:`~pkgfzf.models.GlobalConfig`
  JSON file storing fuzzy-finder, cache, and source-file settings.
* **Cache root resolution** -- :func:`resolve_cache_root` picks the
  directory handed to :class:`~pkgfzf.cache.CompletionCache`.

Unlike most CLIs, the path helpers here never create directories: they are
called on every <Tab> press, and a read-only home directory must not break
completion. Writers create what they need.

All file writes use an atomic temp-file-then-rename strategy
(:func:`atomic_write`) so that two shells writing the same cache file at
once never leave a partial file behind.
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Optional

from pkgfzf.exceptions import ConfigError
from pkgfzf.models import GlobalConfig

_APP_NAME = "pkgfzf"
_CONFIG_FILENAME = "config.json"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory.

    On Linux/BSD: ``$XDG_CONFIG_HOME/pkgfzf/`` (default ``~/.config/pkgfzf/``).
    On macOS/Windows: ``~/.pkgfzf/``.
    """
    if _is_xdg_platform():
        return _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    return _fallback_base_dir()


def get_cache_dir() -> Path:
    """Return the default completion cache root.

    Cached catalog tables can be safely deleted at any time; they are
    regenerated on the next completion request.

    On Linux/BSD: ``$XDG_CACHE_HOME/pkgfzf/`` (default ``~/.cache/pkgfzf/``).
    On macOS/Windows: ``~/.pkgfzf/cache/``.
    """
    if _is_xdg_platform():
        return _xdg_base("XDG_CACHE_HOME", (".cache",)) / _APP_NAME
    return _fallback_base_dir() / "cache"


def get_data_dir() -> Path:
    """Return the data directory used for crash logs.

    On Linux/BSD: ``$XDG_DATA_HOME/pkgfzf/`` (default ``~/.local/share/pkgfzf/``).
    On macOS/Windows: ``~/.pkgfzf/``.
    """
    if _is_xdg_platform():
        return _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    return _fallback_base_dir()


# --- Atomic file writes ---


def atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is guaranteed to be an atomic rename on POSIX systems.
    On success the temp file is renamed over *path*; on any failure the temp
    file is cleaned up and the original exception propagates.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close in finally
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Global config ---


def global_config_path() -> Path:
    """Path to the global config file."""
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration from the config directory.

    Returns:
        The deserialised :class:`~pkgfzf.models.GlobalConfig`. If the
        file does not exist, a default instance is returned.

    Raises:
        ConfigError: If the file exists but cannot be read, contains invalid
            JSON, or fails Pydantic validation.
    """
    path = global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
        return GlobalConfig.model_validate(data)
    except (OSError, json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def load_global_config_or_default() -> GlobalConfig:
    """Load the global configuration, falling back to defaults on any error.

    Used on the completion path, where a broken config file must not turn a
    <Tab> press into an error message.
    """
    from pkgfzf.output import debug

    try:
        return load_global_config()
    except ConfigError as exc:
        debug(f"Ignoring config: {exc}")
        return GlobalConfig()


def save_global_config(config: GlobalConfig) -> None:
    """Persist the global configuration atomically to disk.

    Args:
        config: The configuration to save.
    """
    data = config.model_dump(mode="json")
    atomic_write(global_config_path(), json.dumps(data, indent=2) + "\n")


# --- Cache root resolution ---


def resolve_cache_root(
    cli_cache_dir: Optional[str] = None,
    config: Optional[GlobalConfig] = None,
) -> Path:
    """Resolve the completion cache root with full precedence chain.

    Precedence (high to low):
        1. CLI flag (``--cache-dir``)
        2. User config (``cache.directory``)
        3. XDG default (:func:`get_cache_dir`)

    Returns:
        The cache root path. It is not created here.
    """
    if cli_cache_dir:
        return Path(cli_cache_dir).expanduser()
    if config is not None and config.cache.directory:
        return Path(config.cache.directory).expanduser()
    return get_cache_dir()
