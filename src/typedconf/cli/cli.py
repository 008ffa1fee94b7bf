"""
typedconf CLI Application.

Command-line helpers for inspecting properties files and checking duration
strings with the same parsing rules the library applies.
"""

import logging
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..exceptions.config_exceptions import ConfigurationError
from ..utils.config import ClientConf, get_time_as_ms
from ..utils.config.environment import EnvironmentHandler
from ..utils.logging_config import LogFormat, LoggingManager, LogLevel

# Initialize console for rich output
console = Console()

app = typer.Typer(
    name="typedconf",
    help="Inspect typed configuration properties files",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

VERBOSE_ENV_VAR = "TYPEDCONF_VERBOSE"

_logger: Optional[logging.Logger] = None


def setup_logging(verbose: bool = False, log_format: LogFormat = LogFormat.STANDARD) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_format: Output format; STANDARD uses rich console output

    Returns:
        Configured logger instance
    """
    log_level = logging.DEBUG if verbose else logging.INFO

    if log_format == LogFormat.STANDARD:
        # Clear any existing handlers
        logging.getLogger().handlers.clear()

        rich_handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        rich_handler.setLevel(log_level)

        logging.basicConfig(
            level=log_level,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[rich_handler],
        )
    else:
        LoggingManager(log_level=LogLevel(log_level), log_format=log_format)

    logger = logging.getLogger("typedconf")
    logger.setLevel(log_level)

    return logger


def get_logger() -> logging.Logger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger


def load_conf(path: Path) -> ClientConf:
    """
    Load a properties file into a configuration store.

    Raises:
        typer.Exit: If loading fails
    """
    try:
        return ClientConf.from_file(path)
    except ConfigurationError as e:
        rprint(f"[red]Configuration Error:[/red] {e}")
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging (DEBUG level)",
    ),
    log_format: LogFormat = typer.Option(
        LogFormat.STANDARD,
        "--log-format",
        case_sensitive=False,
        help="Log output format",
    ),
) -> None:
    """
    typedconf CLI - typed access to key=value configuration files.

    Common workflows:
    • Check a duration: typedconf duration 2min
    • List a file: typedconf show client.properties
    • Read one key: typedconf get client.properties client.timeout --duration
    """
    global _logger
    if not verbose:
        verbose = EnvironmentHandler().get_env_var(VERBOSE_ENV_VAR, False, 'boolean')
    _logger = setup_logging(verbose, log_format)


@app.command()
def duration(
    text: str = typer.Argument(..., help="Duration such as 500, 30s, 2min or 1d"),
) -> None:
    """Print a duration string converted to milliseconds."""
    try:
        typer.echo(get_time_as_ms(text))
    except ConfigurationError as e:
        rprint(f"[red]Configuration Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def show(
    path: Path = typer.Argument(..., help="Properties file to read"),
) -> None:
    """Show every key/value pair of a properties file."""
    conf = load_conf(path)

    table = Table(title=str(path))
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in sorted(conf):
        table.add_row(escape(key), escape(value))

    console.print(table)
    get_logger().debug(f"Listed {len(conf)} entries from {path}")


@app.command()
def get(
    path: Path = typer.Argument(..., help="Properties file to read"),
    key: str = typer.Argument(..., help="Configuration key"),
    as_duration: bool = typer.Option(
        False,
        "--duration",
        "-d",
        help="Print the value converted to milliseconds",
    ),
) -> None:
    """Print the value of a single key."""
    conf = load_conf(path)

    value = conf.get(key)
    if value is None:
        rprint(f"[yellow]Key not set:[/yellow] {key}")
        raise typer.Exit(1)

    if as_duration:
        try:
            value = get_time_as_ms(value)
        except ConfigurationError as e:
            rprint(f"[red]Configuration Error:[/red] {e}")
            raise typer.Exit(1)

    typer.echo(value)


@app.command()
def version() -> None:
    """Show version information."""
    try:
        current = package_version("typedconf")
    except PackageNotFoundError:
        current = "0.1.0"
    rprint(f"typedconf [blue]v{current}[/blue]")


def handle_cli_error(error: Exception) -> None:
    """
    Handle CLI errors with user-friendly messages.

    Args:
        error: The exception that occurred
    """
    logger = get_logger()

    if isinstance(error, ConfigurationError):
        rprint(f"[red]Configuration Error:[/red] {error}")
        logger.debug("Configuration error details", exc_info=True)
    elif isinstance(error, PermissionError):
        rprint(f"[red]Permission Denied:[/red] {error}")
        logger.debug("Permission error details", exc_info=True)
    else:
        rprint(f"[red]Error:[/red] {error}")
        logger.debug("Unexpected error details", exc_info=True)


def cli_main() -> None:
    """
    Main CLI entry point with error handling.

    This function is called by the console script entry point.
    """
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt:
        rprint("\n[yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


if __name__ == "__main__":
    cli_main()
