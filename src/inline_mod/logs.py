# src/inline_mod/logs.py

import logging
from typing import cast

from .meta import PROGRAM_PACKAGE
from .utils_logs import CLILogger


class AppLogger(CLILogger):
    """App-specific logger class."""


# --- Logger initialization ---------------------------------------------------

# Must run before any logger named PROGRAM_PACKAGE is created.
AppLogger.extend_logging_module()

_APP_LOGGER = cast("AppLogger", logging.getLogger(PROGRAM_PACKAGE))


# --- Convenience utils -------------------------------------------------------


def get_logger() -> AppLogger:
    """Return the configured app logger."""
    return _APP_LOGGER
