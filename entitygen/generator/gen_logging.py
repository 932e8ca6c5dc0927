"""Logging configuration for the entitygen command line.

Generator modules log through ``logging.getLogger(__name__)``, which places
them under the "entitygen" hierarchy. Levels are controlled by the CLI.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "entitygen"


def configure_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the entitygen logger hierarchy.

    Levels:
        --verbose / -v  -> DEBUG   (per property strategy detail)
        (default)       -> INFO    (one summary line per entity kind)
        --quiet / -q    -> WARNING (warnings and errors only)

    Args:
        verbose: Enable DEBUG-level output.
        quiet: Suppress INFO output (WARNING+ only).

    Returns:
        The configured "entitygen" logger.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Called once per CLI invocation, reuse the handler on repeated calls
    for handler in logger.handlers:
        handler.setLevel(level)
    if logger.handlers:
        return logger

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
