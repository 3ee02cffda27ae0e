# tests/conftest.py
"""Shared test setup for project."""

import os
from collections.abc import Generator

import pytest

import inline_mod.inline as mod_inline
import inline_mod.logs as mod_logs
from tests.utils import DEFAULT_TEST_LOG_LEVEL
from tests.utils.log_fixtures import (
    direct_logger,
    module_logger,
)


# re-exported so pytest can discover them
__all__ = [
    "direct_logger",
    "module_logger",
]


# ----------------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_logger_level() -> Generator[None, None, None]:
    """Reset the app logger to DEFAULT_TEST_LOG_LEVEL around each test.

    cli.main() sets the level from its arguments, and the logger is a
    module-level singleton, so it would otherwise leak between tests.
    """
    logger = mod_logs.get_logger()
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)
    yield
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)


@pytest.fixture(autouse=True)
def no_rustfmt(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep rendering deterministic whether or not rustfmt is installed.

    Tests that exercise the formatter patch find_tool_executable again.
    """
    monkeypatch.setattr(mod_inline, "find_tool_executable", lambda *_a, **_k: None)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop environment variables that change program output."""
    for var in list(os.environ):
        if var.startswith("INLINE_MOD_") or var in {"LOG_LEVEL", "RUSTFMT"}:
            monkeypatch.delenv(var, raising=False)
