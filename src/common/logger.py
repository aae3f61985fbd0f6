"""Logging utilities with rich console output for the error log tools.

The error log library logs through the standard ``logging`` module; the CLI
attaches a rich handler so those records render cleanly in a terminal.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Appended entry for notes/x.md")
    logger.info("Rotation evicted 3 entries")
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# Shared consoles so library logs and CLI output interleave correctly
console = Console()
error_console = Console(stderr=True)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def _resolve_level(level: str | None, default: str = "INFO") -> str:
    if level is None:
        level = os.getenv("LOG_LEVEL", default)
    return level.upper()


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a logger configured with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses environment variable LOG_LEVEL or defaults to INFO.
        show_time: Show timestamp in log output
        show_path: Show source location in log output

    Returns:
        Configured logger instance

    Example:
        >>> logger = get_logger(__name__, level="DEBUG")
        >>> logger.debug("Decoded 12 entries")
        DEBUG    Decoded 12 entries
    """
    logger = logging.getLogger(name)

    # Already configured by an earlier call
    if logger.handlers:
        return logger

    logger.setLevel(_resolve_level(level))
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # Keep propagation so pytest caplog can capture records
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger once at the CLI entry point.

    Module loggers from get_logger() already print to the console, so the
    root logger only carries the optional plain-text file handler.

    Args:
        level: Default logging level, overridden by LOG_LEVEL
        log_file: Optional file path to also write plain-text logs to
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(None, default=level))
    root_logger.handlers.clear()

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def progress(message: str) -> None:
    """Print a plain progress line.

    Example:
        >>> progress("Rotating error log...")
        Rotating error log...
    """
    console.print(message)


def success(message: str) -> None:
    """Print a success line with a green checkmark.

    Example:
        >>> success("Log cleared")
        ✓ Log cleared
    """
    console.print(f"[green]✓[/green] {message}")


def warning(message: str) -> None:
    """Print a warning line with a yellow marker."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def error(message: str) -> None:
    """Print an error line with a red X to stderr.

    Example:
        >>> error("Failed to write error log")
        ✗ Failed to write error log
    """
    error_console.print(f"[red]✗[/red] {message}")
