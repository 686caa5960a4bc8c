"""Console logging for appraisal runs.

Every module logs through ``logging.getLogger(__name__)``; those loggers
all live under the ``src`` package logger configured here, so one call
from the entry point sets up progress lines, per-CD warnings and, with
``--verbose``, the individual Discogs requests.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(
    level: int = logging.INFO,
    module_name: str = "src",
) -> logging.Logger:
    """Attach a stdout handler to the package logger.

    INFO shows per-CD progress and the batch summary; WARNING adds failed
    searches and price pages; DEBUG (``--verbose``) also logs each GET.
    Calling it again only changes the level, so the handler is never
    duplicated.

    Args:
        level: Logging level (default INFO).
        module_name: Logger to configure; ``src`` covers the whole project.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)

    return logger
