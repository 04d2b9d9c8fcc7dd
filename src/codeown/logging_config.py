"""Logging setup for codeown.

All modules log through ``get_logger(__name__)`` under the ``codeown``
namespace. The CLI calls ``setup_logging`` once per command; library users
configure logging themselves.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "codeown"
FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """Route codeown logs to stderr through rich, optionally also to a file.

    Per-file git failures are logged at DEBUG, so they only show up with
    ``verbose``.

    Args:
        verbose: DEBUG level, with source paths and tracebacks locals
        quiet: ERROR level only; wins over ``verbose``
        log_file: Append plain-text logs here as well

    Returns:
        The ``codeown`` logger
    """
    level = _level(verbose, quiet)

    # stderr keeps stdout free for --dry-run and --format json output
    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            show_path=verbose,
            markup=False,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(str(log_file), mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt=FILE_DATE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name``, placed under the ``codeown`` namespace."""
    if name is None or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
