"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from colorpicker import __version__

from .commands import config, convert

logger = logging.getLogger(__name__)

LOG_DIR = Path.home() / ".colorpicker" / "logs"
DEBUG_LOG_NAME = "colorpicker-debug.log"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where logs go for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / DEBUG_LOG_NAME
    return LOG_DIR / "colorpicker.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins when logging to a custom file
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="colorpicker")
@click.option(
    '--color',
    '-c',
    type=str,
    default=None,
    help="Initial color, as hex ('#ff8800') or channels ('255,136,0')"
)
@click.option(
    '--mode',
    '-m',
    type=click.Choice(['hex', 'rgb', 'hsv'], case_sensitive=False),
    default=None,
    help='Text fields shown at startup (default: from config)'
)
@click.option(
    '--config-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file to use instead of ~/.colorpicker/config.json'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help=f'Enable debug mode (DEBUG level, logs to ./{DEBUG_LOG_NAME})'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    color: Optional[str],
    mode: Optional[str],
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Color Picker - pick a color from a hue strip, a saturation/value surface
    or typed hex/RGB/HSV values.

    Drag on the surface or the hue strip with the mouse, or type into the
    fields. Press ctrl+q to pick (the hex code is printed) or escape to cancel.

    \b
    Examples:
      # Start from white (or the configured startup color)
      colorpicker

      # Start from a given color, with the RGB fields visible
      colorpicker --color '#3366cc' --mode rgb

      # Convert without opening the picker
      colorpicker convert 51,102,204

      # Enable debug logging
      colorpicker --debug
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_file

    # If a subcommand was invoked, don't run the app
    if ctx.invoked_subcommand is not None:
        return

    # Lazy imports to keep subcommands fast
    from colorpicker.cli.params import parse_color
    from colorpicker.exceptions import ErrorContext, format_error_for_display
    from colorpicker.models import InputMode, PickerConfig
    from colorpicker.tui import ColorPickerApp

    # TUI uses stdout, so we log to files
    log_path = setup_logging(verbose, debug, log_file, log_level)

    logger.info("Starting Color Picker")

    try:
        with ErrorContext("load configuration", logger):
            config_obj = PickerConfig.load_or_default(config_file)
        if mode:
            config_obj = config_obj.model_copy(update={"input_mode": InputMode(mode.lower())})

        initial_color = parse_color(color) if color else None

        app = ColorPickerApp(
            config=config_obj,
            initial_color=initial_color,
            config_path=config_file,
        )
        picked = app.run()

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
        return
    except click.Abort:
        raise
    except Exception as e:
        logger.exception("Error running application")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "="*70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("="*70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        click.echo("For logging options, run: colorpicker --help", err=True)
        sys.exit(1)

    if picked is None:
        logger.info("No color picked")
        sys.exit(1)

    click.echo(picked.to_hex())


cli.add_command(config)
cli.add_command(convert)

if __name__ == "__main__":
    cli()
