# dropin_manager/cli/main.py
"""Main CLI entry point for dropin-manager"""

import sys
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..constants import APP_NAME, LOG_FORMAT
from ..services import ConfigService, NoticeService

# Import all commands
from .commands import lifecycle, status

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )


class Context:
    """CLI context object with lazy configuration loading"""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize CLI context"""
        self.config_path = config_path
        self.verbose: bool = False
        self.debug: bool = False
        self._config_service: Optional[ConfigService] = None
        self._notices: Optional[NoticeService] = None

    @property
    def config_service(self) -> ConfigService:
        """Get config service (lazy loading)"""
        if self._config_service is None:
            self._config_service = ConfigService(self.config_path)
        return self._config_service

    @property
    def notices(self) -> NoticeService:
        """Get the shared notice sink

        Debug logging is on when either -d or the config's debug flag is set.
        """
        if self._notices is None:
            debug = self.debug or self.config_service.config.debug
            self._notices = NoticeService(debug=debug, console=console)
        return self._notices


@click.group(name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option('-c', '--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              help='Path to configuration file')
@click.pass_context
def cli(ctx, verbose, debug, quiet, config_path):
    """Drop-in Manager - keep versioned files deployed in a drop-in directory

    Copies each configured file into the privileged drop-in directory when
    it is missing or outdated, and records the installed version in a
    settings file so later checks are cheap.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(config_path)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(lifecycle.check)
cli.add_command(lifecycle.install)
cli.add_command(lifecycle.remove)
cli.add_command(lifecycle.activate)
cli.add_command(lifecycle.deactivate)
cli.add_command(status.status)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
