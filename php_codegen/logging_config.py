"""
Logging setup for php_codegen.

All modules obtain their logger through get_logger() so that records end up
under the ``php_codegen`` hierarchy. The CLI calls configure_logging() once
to attach a rich handler; library users keep full control otherwise.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "php_codegen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the php_codegen hierarchy."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False, console: Console = None) -> None:
    """
    Attach a rich handler to the package logger.

    Args:
        verbose: Log at DEBUG level instead of WARNING
        console: Console to log to (stderr by default)
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if _configured:
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    _configured = True
