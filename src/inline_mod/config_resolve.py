# src/inline_mod/config_resolve.py
"""Turn parsed CLI arguments into a validated RunConfigResolved."""

import argparse
from collections.abc import Mapping
from pathlib import Path

from .config_types import InputSpec, ManifestSelection, RunConfigResolved
from .errors import UsageError
from .highlight import resolve_theme
from .logs import get_logger
from .manifest import find_manifest
from .script import resolve_shebang


def validate_options(args: argparse.Namespace) -> None:
    """Reject option combinations that cannot be honored.

    Only looks at the arguments themselves; nothing on disk is touched.

    Raises:
        UsageError: Missing input or conflicting options
    """
    if not getattr(args, "input", None):
        xmsg = "<INPUT> is required"
        raise UsageError(xmsg)

    if getattr(args, "theme", None) is not None and getattr(args, "output", None):
        xmsg = (
            "--theme cannot be combined with --output "
            "(highlighted text contains terminal escape codes)"
        )
        raise UsageError(xmsg)

    if getattr(args, "empty_manifest", False):
        if getattr(args, "manifest", None):
            xmsg = "--empty-manifest cannot be combined with --manifest"
            raise UsageError(xmsg)
        if getattr(args, "zscript", False):
            xmsg = "--empty-manifest cannot be combined with --zscript"
            raise UsageError(xmsg)

    if getattr(args, "stop_at_cwd", False) and not getattr(args, "zscript", False):
        xmsg = "--stop-at-cwd requires --zscript"
        raise UsageError(xmsg)


def _discovery_start(input_spec: InputSpec) -> Path:
    if input_spec.is_dir:
        return input_spec.path
    # Path("main.rs").parent is Path(".")
    return input_spec.path.parent


def resolve_manifest_selection(
    args: argparse.Namespace,
    input_spec: InputSpec,
    cwd: Path,
) -> ManifestSelection:
    """Pick the manifest to embed: explicit path, then discovery, then empty."""
    logger = get_logger()

    manifest_arg = getattr(args, "manifest", None)
    if manifest_arg:
        if getattr(args, "zscript", False):
            logger.debug("--manifest given; skipping --zscript discovery")
        manifest_path = Path(manifest_arg)
        if not manifest_path.is_absolute():
            manifest_path = cwd / manifest_path
        return ManifestSelection.explicit(manifest_path)

    if getattr(args, "zscript", False):
        start = _discovery_start(input_spec)
        if not start.is_absolute():
            start = cwd / start
        stop_at = cwd if getattr(args, "stop_at_cwd", False) else None
        found = find_manifest(start, stop_at)
        if found is None:
            bound = f" (stopped at {cwd})" if stop_at is not None else ""
            logger.warning(
                "No Cargo.toml found above %s%s; writing code without a script "
                "envelope.",
                start,
                bound,
            )
            return ManifestSelection.absent()
        logger.debug("Discovered manifest %s", found)
        return ManifestSelection.discovered(found)

    if getattr(args, "empty_manifest", False):
        return ManifestSelection.empty()

    return ManifestSelection.absent()


def resolve_config(
    args: argparse.Namespace,
    cwd: Path,
    environ: Mapping[str, str],
) -> RunConfigResolved:
    """Validate ``args`` and fold them into one immutable run config.

    Option conflicts and unknown themes are reported before any
    filesystem access; manifest discovery runs last.

    Raises:
        UsageError: Missing input or conflicting options
        ThemeError: The requested theme is not in the catalog
    """
    validate_options(args)

    theme_arg = getattr(args, "theme", None)
    theme = resolve_theme(theme_arg) if theme_arg is not None else None

    input_path = Path(args.input)
    if not input_path.is_absolute():
        input_path = cwd / input_path
    input_spec = InputSpec.from_path(input_path)

    output_arg = getattr(args, "output", None)
    out_path = Path(output_arg) if output_arg else None
    if out_path is not None and not out_path.is_absolute():
        out_path = cwd / out_path

    return RunConfigResolved(
        input=input_spec,
        out_path=out_path,
        theme=theme,
        manifest=resolve_manifest_selection(args, input_spec, cwd),
        shebang=resolve_shebang(environ),
    )
