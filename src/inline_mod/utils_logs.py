# src/inline_mod/utils_logs.py
"""CLI logger shared by every inline-mod module.

stdout belongs to the flattened artifact, so every log record, whatever its
level, is written to stderr.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from contextlib import suppress
from typing import Any, TextIO, cast

from .constants import DEFAULT_ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL
from .meta import PROGRAM_ENV
from .utils_types import cast_hint


# --- Constants ---------------------------------------------------------------

RESET = "\033[0m"
CYAN = "\033[36m"
GRAY = "\033[90m"

TRACE_LEVEL = logging.DEBUG - 5
SILENT_LEVEL = logging.CRITICAL + 1

# accepted by --log-level, most verbose first
LEVEL_ORDER = ["trace", "debug", "info", "warning", "error", "critical", "silent"]

# levelname -> (color, prefix); INFO is untagged
TAG_STYLES = {
    "TRACE": (GRAY, "[TRACE]"),
    "DEBUG": (CYAN, "[DEBUG]"),
    "WARNING": ("", "⚠️ "),
    "ERROR": ("", "❌ "),
    "CRITICAL": ("", "💥 "),
}


# --- Logging that bypasses streams -------------------------------------------


def safe_log(msg: str) -> None:
    """Emergency logger that never fails."""
    stream = cast("TextIO", sys.__stderr__)
    try:
        print(msg, file=stream)
    except Exception:  # noqa: BLE001
        with suppress(Exception):
            stream.write(f"[INTERNAL] {msg}\n")


# --- CLI logger --------------------------------------------------------------


class CLILogger(logging.Logger):
    """Logger with TRACE/SILENT levels and tagged stderr output."""

    enable_color: bool = False

    _logging_module_extended: bool = False

    # the stderr object the current handler was built for (pytest swaps it)
    _bound_stderr: TextIO | None = None

    def __init__(
        self,
        name: str,
        level: int = logging.NOTSET,
        *,
        enable_color: bool | None = None,
    ) -> None:
        super().__init__(name, level)
        if self.level == logging.NOTSET:
            self.setLevel(self.determine_log_level())
        if enable_color is None:
            enable_color = type(self).determine_color_enabled()
        self.enable_color = enable_color
        self.propagate = False

    def ensure_handlers(self) -> None:
        if self.handlers and self._bound_stderr is sys.stderr:
            return
        self.handlers.clear()
        handler = StderrHandler()
        handler.setFormatter(TagFormatter("%(message)s"))
        handler.enable_color = self.enable_color
        self.addHandler(handler)
        self._bound_stderr = sys.stderr

    def _log(  # type: ignore[override]
        self, level: int, msg: str, args: tuple[Any, ...], **kwargs: Any
    ) -> None:
        self.ensure_handlers()
        super()._log(level, msg, args, **kwargs)

    def setLevel(self, level: int | str) -> None:  # noqa: N802
        """Accept level names in any case."""
        if isinstance(level, str):
            level = level.upper()
        super().setLevel(level)

    @classmethod
    def determine_color_enabled(cls) -> bool:
        """NO_COLOR wins, then FORCE_COLOR, then whether stderr is a tty."""
        if "NO_COLOR" in os.environ:
            return False
        if os.getenv("FORCE_COLOR", "").lower() in {"1", "true", "yes"}:
            return True
        return sys.stderr.isatty()

    @classmethod
    def extend_logging_module(cls) -> bool:
        """Register TRACE/SILENT and this logger class once.

        Returns False when it already ran.
        """
        if cls._logging_module_extended:
            return False
        cls._logging_module_extended = True

        logging.setLoggerClass(cls)
        logging.addLevelName(TRACE_LEVEL, "TRACE")
        logging.addLevelName(SILENT_LEVEL, "SILENT")
        logging.TRACE = TRACE_LEVEL  # type: ignore[attr-defined]
        logging.SILENT = SILENT_LEVEL  # type: ignore[attr-defined]
        return True

    def determine_log_level(
        self,
        *,
        args: argparse.Namespace | None = None,
    ) -> str:
        """Pick the level from --log-level/-q/-v, then the env vars, then info."""
        args_level = getattr(args, "log_level", None)
        if args_level is not None:
            return cast_hint(str, args_level).upper()

        for var in (f"{PROGRAM_ENV}_{DEFAULT_ENV_LOG_LEVEL}", DEFAULT_ENV_LOG_LEVEL):
            value = os.getenv(var)
            if value:
                return value.upper()
        return DEFAULT_LOG_LEVEL.upper()

    @property
    def level_name(self) -> str:
        return logging.getLevelName(self.getEffectiveLevel())

    def _report(self, level: int, msg: str, *args: Any) -> None:
        # tracebacks only when debugging
        if self.isEnabledFor(logging.DEBUG):
            self.exception(msg, *args, stacklevel=3)
        else:
            self.log(level, msg, *args)

    def error_if_not_debug(self, msg: str, *args: Any) -> None:
        self._report(logging.ERROR, msg, *args)

    def critical_if_not_debug(self, msg: str, *args: Any) -> None:
        self._report(logging.CRITICAL, msg, *args)

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, **kwargs)


# --- Formatting and output ---------------------------------------------------


class TagFormatter(logging.Formatter):
    """Prefix each message with its level tag, colored when enabled."""

    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        color, tag = TAG_STYLES.get(record.levelname, ("", ""))
        if not tag:
            return msg
        if color and getattr(record, "enable_color", False):
            tag = f"{color}{tag}{RESET}"
        return f"{tag} {msg}"


class StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Write every record to whatever sys.stderr is at emit time."""

    enable_color: bool = False

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stderr
        record.enable_color = self.enable_color
        super().emit(record)
