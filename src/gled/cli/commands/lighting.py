"""Lighting mode commands."""

import logging

import click

from gled.devices import LedController
from gled.exceptions import GledError, format_error_for_display
from gled.models import (
    DEFAULT_BRIGHTNESS,
    DEFAULT_RATE,
    BreatheCommand,
    CycleCommand,
    IntroCommand,
    LightingCommand,
    SolidCommand,
)

from ..params import BRIGHTNESS, COLOR, RATE, TOGGLE

logger = logging.getLogger(__name__)


def send_command(ctx: click.Context, command: LightingCommand) -> None:
    """Send a command through the context's controller and report the result."""
    controller: LedController = ctx.obj

    try:
        transferred = controller.send(command)
    except Exception as e:
        logger.debug("Error sending LED command", exc_info=True)
        user_message, recovery_hint = format_error_for_display(e)

        click.echo("=" * 70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("=" * 70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        log_file = ctx.find_root().params.get("log_file")
        details = f"check the log file: {log_file}" if log_file else "rerun with -vv"
        if isinstance(e, GledError) and e.recoverable:
            click.echo(f"\nFor details, {details}", err=True)
        else:
            click.echo(
                f"\nThis looks like a bug in gled. Please report it; for details, {details}",
                err=True,
            )

        ctx.exit(1)

    click.echo(f"{transferred} bytes transferred to device")


@click.command()
@click.argument("color", type=COLOR)
@click.pass_context
def solid(ctx, color):
    """
    Solid color mode.

    \b
    COLOR  RRGGBB or RGB hex value, '#' optional
    """
    send_command(ctx, SolidCommand(color=color))


@click.command()
@click.argument("rate", type=RATE, required=False, default=DEFAULT_RATE)
@click.argument("brightness", type=BRIGHTNESS, required=False, default=DEFAULT_BRIGHTNESS)
@click.pass_context
def cycle(ctx, rate, brightness):
    """
    Cycle through all colors.

    \b
    RATE        100-60000 (number of milliseconds, default: 10000)
    BRIGHTNESS  1-100 (percentage, default: 100)
    """
    send_command(ctx, CycleCommand(rate=rate, brightness=brightness))


@click.command()
@click.argument("color", type=COLOR)
@click.argument("rate", type=RATE, required=False, default=DEFAULT_RATE)
@click.argument("brightness", type=BRIGHTNESS, required=False, default=DEFAULT_BRIGHTNESS)
@click.pass_context
def breathe(ctx, color, rate, brightness):
    """
    Single color breathing.

    \b
    COLOR       RRGGBB or RGB hex value, '#' optional
    RATE        100-60000 (number of milliseconds, default: 10000)
    BRIGHTNESS  1-100 (percentage, default: 100)
    """
    send_command(ctx, BreatheCommand(color=color, rate=rate, brightness=brightness))


@click.command()
@click.argument("toggle", type=TOGGLE)
@click.pass_context
def intro(ctx, toggle):
    """
    Enable/disable startup effect.

    \b
    TOGGLE  on|off
    """
    send_command(ctx, IntroCommand(toggle=toggle))
