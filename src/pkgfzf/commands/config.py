"""Config commands -- view and modify global configuration.

Provides the ``pkgfzf config`` sub-command group for reading, updating,
and resetting the user's global configuration file
(:class:`~pkgfzf.models.GlobalConfig`). Settings control the fuzzy finder
(binary, height, preview window, accept key), the cache (enabled flag,
directory override), and the source files offered by ``deno run``.
"""

from __future__ import annotations

import typer

from pkgfzf.exceptions import ConfigError
from pkgfzf.output import error, format_response, info, success


config_app = typer.Typer(no_args_is_help=True)


def _load_or_exit():
    from pkgfzf.config import load_global_config

    try:
        return load_global_config()
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


@config_app.command("show")
def config_show() -> None:
    """Show current configuration.

    Loads the global config from disk and prints the config file path
    followed by the full configuration.

    Example::

        pkgfzf config show
        pkgfzf config show --json
    """
    from pkgfzf.config import global_config_path

    config = _load_or_exit()
    info(f"Config file: {global_config_path()}")
    format_response(config.model_dump(mode="json"))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        help="Config key (dot notation, e.g., 'selector.height')."
    ),
    value: str = typer.Argument(help="Value to set."),
) -> None:
    """Set a configuration value.

    Uses dot notation for nested keys. The value is coerced to match the
    existing field's type: booleans accept ``true/1/yes``, integers must
    parse, and lists are given comma-separated. The updated config is
    validated against :class:`~pkgfzf.models.GlobalConfig` before saving.

    Args:
        key: Dot-separated config key path (e.g. ``selector.height``).
        value: String value to set; coerced to the target field type.

    Raises:
        typer.Exit: With code 2 if the key path is invalid, the value
            cannot be coerced, or Pydantic validation fails.

    Example::

        pkgfzf config set selector.height 60%
        pkgfzf config set cache.directory ~/.cache/package-completions
        pkgfzf config set source_files.extensions .ts,.tsx,.js
    """
    from pkgfzf.config import save_global_config
    from pkgfzf.models import GlobalConfig

    config = _load_or_exit()
    data = config.model_dump(mode="json")

    keys = key.split(".")
    target = data
    for k in keys[:-1]:
        if k not in target or not isinstance(target[k], dict):
            error(f"Invalid config key: {key}")
            raise typer.Exit(code=2)
        target = target[k]

    final_key = keys[-1]
    if final_key not in target or isinstance(target[final_key], dict):
        error(f"Unknown config key: {key}")
        raise typer.Exit(code=2)

    current = target[final_key]
    if isinstance(current, bool):
        coerced = value.lower() in ("true", "1", "yes")
    elif isinstance(current, int):
        try:
            coerced = int(value)
        except ValueError:
            error(f"Expected integer for {key}, got: {value}")
            raise typer.Exit(code=2) from None
    elif isinstance(current, list):
        coerced = [item.strip() for item in value.split(",") if item.strip()]
    else:
        coerced = value

    target[final_key] = coerced

    try:
        new_config = GlobalConfig.model_validate(data)
    except ValueError as exc:
        error(f"Validation error: {exc}")
        raise typer.Exit(code=2) from None

    save_global_config(new_config)
    success(f"Set {key} = {coerced}")


@config_app.command("reset")
def config_reset(
    ctx: typer.Context,
) -> None:
    """Reset configuration to defaults.

    Replaces the persisted global config with a fresh
    :class:`~pkgfzf.models.GlobalConfig`. Asks for confirmation unless
    ``--force`` is active.

    Example::

        pkgfzf config reset
        pkgfzf --force config reset
    """
    from pkgfzf.config import save_global_config
    from pkgfzf.models import GlobalConfig

    force = ctx.obj.get("force", False) if ctx.obj else False
    if not force:
        confirmed = typer.confirm("Reset all config to defaults?")
        if not confirmed:
            info("Cancelled.")
            raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")
