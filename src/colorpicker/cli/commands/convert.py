"""Convert command implementation."""

import sys

import click

from colorpicker.cli.params import parse_color
from colorpicker.exceptions import ColorParseError, format_error_for_display


@click.command(name="convert")
@click.argument("color")
def convert(color: str):
    """
    Show COLOR as hex, RGB and HSV.

    COLOR is a hex color ('#ff8800', 'f80') or three channels ('255,136,0').
    """
    try:
        parsed = parse_color(color)
    except ColorParseError as e:
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"Error: {user_message}", err=True)
        if recovery_hint:
            click.echo(recovery_hint, err=True)
        sys.exit(1)

    h, s, v = parsed.to_hsv()
    click.echo(f"HEX: {parsed.to_hex()}")
    click.echo(f"RGB: {parsed.r}, {parsed.g}, {parsed.b}")
    click.echo(f"HSV: {h}, {s:g}, {v:g}")
