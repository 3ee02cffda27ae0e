# src/inline_mod/build.py


import sys
from pathlib import Path

from .config_types import RunConfigResolved
from .entry import resolve_entry
from .errors import WriteError
from .highlight import highlight_code
from .inline import consolidate
from .logs import get_logger
from .script import build_script


def assemble_artifact(resolved: RunConfigResolved) -> str:
    """Run the pipeline and return the complete output text.

    Nothing is written here, so a failure at any stage leaves no
    partial output behind.
    """
    logger = get_logger()

    entry = resolve_entry(resolved.input.path)
    logger.debug("Entry point: %s", entry)

    code = consolidate(entry)
    logger.trace("[BUILD] consolidated %d characters", len(code))

    if resolved.theme is not None:
        logger.debug("Highlighting with theme %s", resolved.theme)
        code = highlight_code(code, resolved.theme)

    return build_script(code, resolved.manifest, resolved.shebang)


def write_artifact(text: str, out_path: Path | None) -> None:
    """Write ``text`` to ``out_path``, or to stdout when it is None."""
    if out_path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return

    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise WriteError(out_path, e.strerror or str(e)) from e


def run_build(resolved: RunConfigResolved) -> None:
    """Flatten the configured input and send it to its destination."""
    logger = get_logger()
    text = assemble_artifact(resolved)
    write_artifact(text, resolved.out_path)

    if not resolved.to_stdout:
        kind = "script" if resolved.manifest.wraps_script else "source"
        logger.info("✅ Wrote %s to %s", kind, resolved.out_path)
