# src/inline_mod/__init__.py

"""inline-mod: flatten a Rust crate into one file.

Full developer API
==================
This package re-exports the public pieces of the pipeline so it can be
driven programmatically. Anything prefixed with "_" is internal.

Highlights:
    - main()              → CLI entrypoint
    - resolve_entry()     → Pick the entry file for a file or crate directory
    - find_manifest()     → Upward search for Cargo.toml
    - consolidate()       → Inline file modules and format the result
    - build_script()      → Wrap code in a cargo -Zscript envelope
"""

from .actions import get_metadata, print_themes
from .build import assemble_artifact, run_build, write_artifact
from .cli import main
from .config_resolve import resolve_config, resolve_manifest_selection, validate_options
from .config_types import InputSpec, ManifestSelection, RunConfigResolved
from .constants import DEFAULT_SHEBANG, MANIFEST_FILENAME
from .entry import resolve_entry
from .errors import (
    ConsolidationError,
    ManifestError,
    NoEntryPointError,
    NoManifestFoundError,
    ResolutionError,
    ThemeError,
    UsageError,
    WriteError,
)
from .highlight import highlight_code, list_themes, resolve_theme
from .inline import consolidate, inline_modules, render_code
from .logs import get_logger
from .manifest import find_manifest, load_manifest, read_manifest_text
from .meta import PROGRAM_DISPLAY, PROGRAM_ENV, PROGRAM_PACKAGE, PROGRAM_SCRIPT, Metadata
from .script import build_script, resolve_shebang


__all__ = [  # noqa: RUF022
    # actions
    "get_metadata",
    "print_themes",
    # build
    "assemble_artifact",
    "run_build",
    "write_artifact",
    # cli
    "main",
    # config
    "resolve_config",
    "resolve_manifest_selection",
    "validate_options",
    "InputSpec",
    "ManifestSelection",
    "RunConfigResolved",
    # constants
    "DEFAULT_SHEBANG",
    "MANIFEST_FILENAME",
    # entry
    "resolve_entry",
    # errors
    "ConsolidationError",
    "ManifestError",
    "NoEntryPointError",
    "NoManifestFoundError",
    "ResolutionError",
    "ThemeError",
    "UsageError",
    "WriteError",
    # highlight
    "highlight_code",
    "list_themes",
    "resolve_theme",
    # inline
    "consolidate",
    "inline_modules",
    "render_code",
    # logs
    "get_logger",
    # manifest
    "find_manifest",
    "load_manifest",
    "read_manifest_text",
    # meta
    "Metadata",
    "PROGRAM_DISPLAY",
    "PROGRAM_ENV",
    "PROGRAM_PACKAGE",
    "PROGRAM_SCRIPT",
    # script
    "build_script",
    "resolve_shebang",
]
