# src/inline_mod/meta.py
"""Program identity shared by the CLI, the logger, and packaging."""

from typing import NamedTuple


PROGRAM_PACKAGE = "inline_mod"
PROGRAM_SCRIPT = "inline-mod"
PROGRAM_DISPLAY = "inline-mod"
PROGRAM_ENV = "INLINE_MOD"
DESCRIPTION = "Inline Rust modules into a single file with optional syntax highlighting."


class Metadata(NamedTuple):
    """Version and commit of the running tool."""

    version: str
    commit: str

    def __str__(self) -> str:
        return f"{self.version} ({self.commit})"
