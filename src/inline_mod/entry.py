# src/inline_mod/entry.py
"""Pick the source file to flatten for a given input path."""

from pathlib import Path
from typing import Any

from .constants import DEFAULT_BIN_ENTRY, DEFAULT_LIB_ENTRY, MANIFEST_FILENAME
from .errors import NoEntryPointError, NoManifestFoundError
from .logs import get_logger
from .manifest import load_manifest


def _declared_path(target: Any, label: str) -> str | None:
    """Return the ``path`` key of a target table, if it is a usable string."""
    logger = get_logger()
    if not isinstance(target, dict):
        return None
    raw = target.get("path")  # pyright: ignore[reportUnknownMemberType]
    if raw is None:
        return None
    if not isinstance(raw, str) or not raw:
        logger.debug("Ignoring non-string path for %s target: %r", label, raw)
        return None
    return raw


def _first_bin_path(bin_decl: Any) -> str | None:
    # [[bin]] parses to a list of tables, [bin] to a single table
    if isinstance(bin_decl, list):
        for target in bin_decl:  # pyright: ignore[reportUnknownVariableType]
            path = _declared_path(target, "[[bin]]")
            if path is not None:
                return path
        return None
    return _declared_path(bin_decl, "[bin]")


def _entry_from_manifest(crate_dir: Path, manifest: dict[str, Any]) -> Path | None:
    logger = get_logger()

    # 1 + 2: declared binary target
    bin_path = _first_bin_path(manifest.get("bin"))
    if bin_path is not None:
        logger.trace("[ENTRY] using declared bin path %s", bin_path)
        return crate_dir / bin_path

    # 3: declared library target
    if "lib" in manifest:
        lib_path = _declared_path(manifest["lib"], "[lib]")
        if lib_path is not None:
            logger.trace("[ENTRY] using declared lib path %s", lib_path)
            return crate_dir / lib_path
        default_lib = crate_dir / DEFAULT_LIB_ENTRY
        if default_lib.is_file():
            logger.trace("[ENTRY] [lib] without path, using %s", default_lib)
            return default_lib

    # 4 + 5: conventional locations
    for default in (DEFAULT_BIN_ENTRY, DEFAULT_LIB_ENTRY):
        candidate = crate_dir / default
        if candidate.is_file():
            logger.trace("[ENTRY] using conventional entry %s", candidate)
            return candidate

    return None


def resolve_entry(input_path: Path) -> Path:
    """Return the concrete source file for ``input_path``.

    Files are returned unchanged. For a crate directory the manifest inside
    it decides, most explicit declaration first:

    1. the first ``path`` of an array-style ``[[bin]]`` target
    2. the ``path`` of a single-table ``[bin]`` target
    3. the ``[lib]`` path, or ``src/lib.rs`` when ``[lib]`` has none
       (only if that file exists)
    4. ``src/main.rs`` if it exists
    5. ``src/lib.rs`` if it exists

    Raises:
        NoManifestFoundError: The directory has no Cargo.toml
        NoEntryPointError: None of the rules above matched
        ManifestError: The manifest could not be read or parsed
    """
    logger = get_logger()
    if not input_path.is_dir():
        return input_path

    manifest_path = input_path / MANIFEST_FILENAME
    if not manifest_path.is_file():
        raise NoManifestFoundError(input_path)

    manifest = load_manifest(manifest_path)
    entry = _entry_from_manifest(input_path, manifest)
    if entry is None:
        raise NoEntryPointError(manifest_path)

    logger.debug("Resolved entry point for %s: %s", input_path, entry)
    return entry
