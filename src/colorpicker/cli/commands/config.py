"""Config command implementations."""

import sys
from pathlib import Path

import click

from colorpicker.exceptions import ColorPickerError, format_error_for_display
from colorpicker.models import PickerConfig
from colorpicker.models.config import DEFAULT_CONFIG_PATH


def _config_path(ctx: click.Context) -> Path:
    """Config path chosen on the parent group, or the default location."""
    return (ctx.obj or {}).get("config_path") or DEFAULT_CONFIG_PATH


@click.group(name="config")
def config():
    """Inspect or reset the picker configuration."""
    pass


@config.command(name="show")
@click.pass_context
def show_config(ctx: click.Context):
    """Display configuration values."""
    path = _config_path(ctx)
    try:
        cfg = PickerConfig.load_or_default(path)
    except ColorPickerError as e:
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"Error: {user_message}", err=True)
        if recovery_hint:
            click.echo(recovery_hint, err=True)
        sys.exit(1)

    source = path if path.exists() else "defaults (no config file)"
    click.echo(f"Configuration ({source}):\n")
    for name, field_info in PickerConfig.model_fields.items():
        value = getattr(cfg, name)
        if hasattr(value, "value"):
            value = value.value
        click.echo(f"  {name}: {value}")
        if field_info.description:
            click.echo(f"      {field_info.description}")


@config.command(name="path")
@click.pass_context
def config_path(ctx: click.Context):
    """Print where the config file lives."""
    click.echo(str(_config_path(ctx)))


@config.command(name="reset")
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation")
@click.pass_context
def reset_config(ctx: click.Context, yes: bool):
    """Reset the configuration to defaults."""
    path = _config_path(ctx)
    if not yes:
        click.confirm(f"Reset {path} to defaults?", abort=True)

    PickerConfig().save(path)
    click.echo(f"[OK] Configuration reset: {path}")
