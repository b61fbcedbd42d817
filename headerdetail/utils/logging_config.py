import logging
import os
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "headerdetail"
LOG_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a single handler to the ``headerdetail`` package logger.

    Parameters
    ----------
    level:
        Logging level name. Falls back to ``HEADERDETAIL_LOG_LEVEL``, then INFO.
        Per-document line counts and skipped extractors are logged at DEBUG.
    log_file:
        Optional path to log output. When not provided, logs go to stderr.

    Calling it again replaces the handler installed by the previous call.
    """

    level_name = (level or os.getenv("HEADERDETAIL_LOG_LEVEL") or "INFO").upper()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level_name, logging.INFO))

    for handler in list(package_logger.handlers):
        if getattr(handler, "_headerdetail", False):
            package_logger.removeHandler(handler)
            handler.close()

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._headerdetail = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    return package_logger
