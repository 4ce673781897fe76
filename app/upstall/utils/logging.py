"""Logging configuration for upstall.

Routes log records for the 'upstall' logger hierarchy through Rich on
stderr so they don't mix with command output.
"""

import logging

from rich.logging import RichHandler

from upstall.utils.formatting import err_console

LOGGER_NAME = "upstall"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the application logger.

    Args:
        verbose: Log at DEBUG level.
        quiet: Only log warnings and errors. Ignored when verbose is set.

    Returns:
        The configured 'upstall' logger.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
