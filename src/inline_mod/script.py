# src/inline_mod/script.py
"""Wrap flattened code in a ``cargo -Zscript`` envelope.

Layout when a manifest is embedded::

    <shebang>
    ---cargo
    <manifest text, newline-terminated>
    ---

    <code>
"""

from collections.abc import Mapping
from pathlib import Path

from typing_extensions import assert_never

from .config_types import ManifestSelection
from .constants import (
    DEFAULT_ENV_SHEBANG,
    DEFAULT_SHEBANG,
    EMPTY_MANIFEST_BODY,
    SCRIPT_FRONTMATTER_CLOSE,
    SCRIPT_FRONTMATTER_OPEN,
)
from .logs import get_logger
from .manifest import read_manifest_text
from .meta import PROGRAM_ENV


def resolve_shebang(environ: Mapping[str, str]) -> str:
    """Return the shebang override from ``environ``, or the default."""
    return environ.get(f"{PROGRAM_ENV}_{DEFAULT_ENV_SHEBANG}") or DEFAULT_SHEBANG


def wrap_script(code: str, manifest_text: str, shebang: str) -> str:
    if not manifest_text.endswith("\n"):
        manifest_text += "\n"
    return (
        f"{shebang}\n"
        f"{SCRIPT_FRONTMATTER_OPEN}"
        f"{manifest_text}"
        f"{SCRIPT_FRONTMATTER_CLOSE}"
        "\n"
        f"{code}"
    )


def build_script(code: str, selection: ManifestSelection, shebang: str) -> str:
    """Return the final artifact text for ``code``.

    ``absent`` leaves the code untouched, ``empty`` embeds a manifest with
    no dependencies, and ``explicit``/``discovered`` embed the raw text of
    the selected manifest file.

    Raises:
        ManifestError: The selected manifest could not be read
    """
    logger = get_logger()
    if selection.kind == "absent":
        return code
    if selection.kind == "empty":
        logger.debug("Embedding empty manifest")
        return wrap_script(code, EMPTY_MANIFEST_BODY, shebang)
    if selection.kind in ("explicit", "discovered"):
        manifest_path = Path(str(selection.path))
        logger.debug("Embedding %s manifest %s", selection.kind, manifest_path)
        return wrap_script(code, read_manifest_text(manifest_path), shebang)
    assert_never(selection.kind)
