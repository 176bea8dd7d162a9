"""``authgen config`` -- inspect and change the global settings file.

Settings are addressed with the dotted names that ``config show`` prints
in plain mode, e.g. ``defaults.jwt_algorithm`` or ``output.format``.
"""

from __future__ import annotations

import typer

from authgen.commands.generate import fail
from authgen.exceptions import AuthgenError
from authgen.output import info, record, success


config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show() -> None:
    """Print every setting with its current value.

    Example::

        authgen --plain config show
        authgen --json config show
    """
    from authgen.config import get_config_dir, load_global_config

    try:
        config = load_global_config()
    except AuthgenError as exc:
        raise fail(exc) from None
    info(f"Config directory: {get_config_dir()}")
    record(config.model_dump(mode="json"), title="Configuration")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(help="Dotted setting name, e.g. 'defaults.jwt_algorithm'."),
    value: str = typer.Argument(help="New value."),
) -> None:
    """Change one setting.

    The value is converted to the setting's type and checked before the
    file is written, so an unknown algorithm or a non-numeric length
    leaves the config untouched.

    Example::

        authgen config set default_profile billing
        authgen config set defaults.bearer_length 64
    """
    from authgen.config import update_global_config

    try:
        update_global_config(key, value)
    except AuthgenError as exc:
        raise fail(exc) from None
    success(f"Set {key} = {value}")


@config_app.command("reset")
def config_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation."),
) -> None:
    """Restore every setting to its default. Profiles are kept."""
    from authgen.config import save_global_config
    from authgen.models import GlobalConfig

    if not force and not typer.confirm("Reset all config to defaults?"):
        info("Cancelled.")
        raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")
