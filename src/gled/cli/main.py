"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from gled import __version__

from .commands import breathe, cycle, intro, solid

logger = logging.getLogger(__name__)

# Handlers installed by setup_logging, replaced on each call
_handlers: list[logging.Handler] = []


def setup_logging(verbose: int, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    for handler in _handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    _handlers.append(console_handler)

    root_level = level
    if log_file:
        file_level = getattr(logging, log_level.upper())

        # Rotating file handler (keeps last 5 files, max 10MB each)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        _handlers.append(file_handler)
        root_level = min(level, file_level)

    root_logger.setLevel(root_level)
    for handler in _handlers:
        root_logger.addHandler(handler)

    logger.debug(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="gled")
@click.option(
    '--debug',
    '-debug',
    type=click.IntRange(0, 3),
    default=0,
    show_default=True,
    help='Debug level for libusb (0-3)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Also write logs to this file'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    debug: int,
    verbose: int,
    log_file: Optional[Path],
    log_level: str
):
    """
    Logitech G102 and G203 Prodigy Mouse LED control.

    \b
    Examples:
      gled solid ff0000          Solid red
      gled solid '#0f0'          Solid green (3-digit form)
      gled cycle 5000 50         Cycle every 5s at 50% brightness
      gled breathe 00f 2000      Blue breathing, 2s period
      gled intro off             Disable the startup effect
      gled -debug 3 cycle        Cycle with full libusb trace
    """
    from gled.devices import LedController
    from gled.devices.pyusb_transport import set_debug_level

    setup_logging(verbose, log_file, log_level)
    set_debug_level(debug)

    if ctx.invoked_subcommand is None:
        raise click.UsageError("Missing mode (solid, cycle, breathe or intro).", ctx=ctx)

    if ctx.obj is None:
        ctx.obj = LedController()


cli.add_command(solid)
cli.add_command(cycle)
cli.add_command(breathe)
cli.add_command(intro)

if __name__ == "__main__":
    cli()
