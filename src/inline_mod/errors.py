# src/inline_mod/errors.py
"""Controlled failures raised by the pipeline.

Each class derives from one of the builtin exception families that
``cli.main`` treats as a controlled termination, so every one of them ends
the run with a single logged line and exit status 1.
"""

from pathlib import Path


class UsageError(ValueError):
    """Missing input or an invalid combination of options."""


class ResolutionError(ValueError):
    """The entry point for a crate directory could not be determined."""


class NoManifestFoundError(ResolutionError):
    def __init__(self, directory: Path) -> None:
        self.directory = directory
        super().__init__(f"No Cargo.toml found in directory: {directory}")


class NoEntryPointError(ResolutionError):
    def __init__(self, manifest_path: Path) -> None:
        self.manifest_path = manifest_path
        super().__init__(
            f"Could not determine an entry point from {manifest_path} "
            "(no [[bin]]/[bin]/[lib] path and no src/main.rs or src/lib.rs)"
        )


class ManifestError(ValueError):
    """A manifest file is unreadable or is not valid TOML."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to read manifest {path}: {reason}")


class ConsolidationError(RuntimeError):
    """Module inlining failed; the message is surfaced unchanged."""


class ThemeError(ValueError):
    """The requested highlight theme is not in the catalog."""


class WriteError(RuntimeError):
    """The output destination could not be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")
