"""
Logging for the chart server.

The package logger and the Flask/werkzeug request log are set up together,
since both end up on the same console when the server runs.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Per-request access lines from the dev server
REQUEST_LOGGER = "werkzeug"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  debug: bool = False) -> logging.Logger:
    """
    Configure the 'census_scatter' logger.

    Args:
        level: Level for the package logger.
        log_file: Optional path; the file is truncated on each start.
        debug: Mirrors the server's --debug flag. Forces DEBUG on the package
            logger and keeps werkzeug's per-request lines, which are otherwise
            held back to warnings.
    """
    if debug:
        level = logging.DEBUG

    logger = logging.getLogger("census_scatter")
    logger.setLevel(level)
    # The Dash reloader imports the app twice
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logging.getLogger(REQUEST_LOGGER).setLevel(logging.INFO if debug else logging.WARNING)

    logger.debug("Logging at %s%s", logging.getLevelName(level),
                 f", also writing {log_file}" if log_file else "")
    return logger
