# src/inline_mod/manifest.py
"""Locating, reading and parsing Cargo manifests."""

from pathlib import Path
from typing import Any

from .constants import MANIFEST_FILENAME
from .errors import ManifestError
from .logs import get_logger
from .utils import load_toml


def _canonical(path: Path) -> Path | None:
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        return None


def find_manifest(start_dir: Path, stop_at: Path | None = None) -> Path | None:
    """Search ``start_dir`` and its ancestors for a Cargo manifest.

    The search checks each directory before testing the boundary, so a
    manifest sitting exactly in ``stop_at`` is still found. Both sides of the
    boundary comparison are canonicalized here; a ``stop_at`` that cannot be
    canonicalized never matches, leaving the walk to end at the filesystem
    root.

    Args:
        start_dir: Directory to begin the search in
        stop_at: Optional last directory to inspect

    Returns:
        Path to the first manifest found, or None
    """
    logger = get_logger()
    current = _canonical(start_dir)
    if current is None:
        logger.debug("Manifest search start does not exist: %s", start_dir)
        return None

    boundary = _canonical(stop_at) if stop_at is not None else None

    while True:
        candidate = current / MANIFEST_FILENAME
        logger.trace("[MANIFEST] checking %s", candidate)
        if candidate.is_file():
            return candidate
        if boundary is not None and current == boundary:
            logger.trace("[MANIFEST] reached stop boundary %s", boundary)
            return None
        if current.parent == current:
            return None
        current = current.parent


def read_manifest_text(path: Path) -> str:
    """Return the raw manifest text, as it should be embedded."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(path, getattr(e, "strerror", None) or str(e)) from e


def load_manifest(path: Path) -> dict[str, Any]:
    """Parse a manifest, converting read and syntax errors to ManifestError."""
    try:
        return load_toml(path)
    except (OSError, ValueError) as e:
        raise ManifestError(path, getattr(e, "strerror", None) or str(e)) from e
