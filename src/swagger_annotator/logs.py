import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "swagger_annotator"


def configure_logging(*, verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Route package logs through rich; replaces handlers left by earlier calls."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(console=console, show_time=False, show_path=verbose, markup=False)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
