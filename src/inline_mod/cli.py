# src/inline_mod/cli.py

import argparse
import os
import platform
import sys
from difflib import get_close_matches
from pathlib import Path

from .actions import get_metadata, print_themes
from .build import run_build
from .config_resolve import resolve_config
from .errors import UsageError
from .logs import get_logger
from .meta import DESCRIPTION, PROGRAM_DISPLAY, PROGRAM_SCRIPT
from .utils_logs import LEVEL_ORDER, safe_log


# --------------------------------------------------------------------------- #
# Parser
# --------------------------------------------------------------------------- #


def _suggest_options(message: str, known: list[str]) -> list[str]:
    """Hint lines for the unknown flags named in an argparse error."""
    marker = "unrecognized arguments:"
    if marker not in message:
        return []
    tail = message.split(marker, 1)[1]
    unknown = [tok for tok in tail.split() if tok.startswith("-")]
    hints: list[str] = []
    for flag in unknown:
        close = get_close_matches(flag, known, n=1, cutoff=0.6)
        if close:
            hints.append(f"Hint: did you mean {close[0]}?")
    return hints


class HintingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that suggests near-miss flags and exits with status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        known = [opt for action in self._actions for opt in action.option_strings]
        lines = [f"{self.prog}: error: {message}", *_suggest_options(message, known)]
        self.print_usage(sys.stderr)
        self.exit(1, "\n".join(lines) + "\n")


def _setup_parser() -> argparse.ArgumentParser:
    """Define and return the CLI argument parser."""
    parser = HintingArgumentParser(prog=PROGRAM_SCRIPT, description=DESCRIPTION)

    # --- Positionals ---
    parser.add_argument(
        "input",
        nargs="?",
        metavar="INPUT",
        help="Rust entry file, or a crate directory containing Cargo.toml.",
    )
    parser.add_argument(
        "positional_out",
        nargs="?",
        metavar="OUT",
        help="Positional output file (shorthand for --output).",
    )

    # --- Output ---
    parser.add_argument(
        "-o",
        "--output",
        help="Write the result to this file instead of stdout.",
    )
    parser.add_argument(
        "-t",
        "--theme",
        help=(
            "Highlight the code for the terminal using this theme "
            "(case-insensitive; not allowed with --output)."
        ),
    )
    parser.add_argument(
        "--list-themes",
        action="store_true",
        help="List available highlight themes and exit.",
    )

    # --- Script envelope ---
    parser.add_argument(
        "-m",
        "--manifest",
        metavar="PATH",
        help="Embed this Cargo.toml and emit a cargo -Zscript file.",
    )
    parser.add_argument(
        "--zscript",
        action="store_true",
        help="Find the nearest Cargo.toml above the input and embed it.",
    )
    parser.add_argument(
        "--stop-at-cwd",
        action="store_true",
        help="Do not search above the current directory (requires --zscript).",
    )
    parser.add_argument(
        "--empty-manifest",
        action="store_true",
        help="Embed a manifest with an empty [dependencies] table.",
    )

    # --- Version and verbosity ---
    parser.add_argument("--version", action="store_true", help="Show version info.")

    verbosity = parser.add_mutually_exclusive_group()
    for flags, const, help_text in (
        (("-q", "--quiet"), "warning", "Only log warnings and errors."),
        (("-v", "--verbose"), "debug", "Log debug details."),
    ):
        verbosity.add_argument(
            *flags,
            action="store_const",
            const=const,
            dest="log_level",
            help=f"{help_text} (same as --log-level {const})",
        )
    verbosity.add_argument(
        "--log-level",
        choices=LEVEL_ORDER,
        dest="log_level",
        help="Set log verbosity level.",
    )
    return parser


def _normalize_positional_args(args: argparse.Namespace) -> None:
    """Fold the positional OUT into --output."""
    out_pos: str | None = args.positional_out
    if not out_pos:
        return
    if args.output and args.output != out_pos:
        xmsg = "Cannot combine a positional OUT with a different --output"
        raise UsageError(xmsg)
    get_logger().trace("Interpreting positional %r as --output.", out_pos)
    args.output = out_pos
    args.positional_out = None


# --------------------------------------------------------------------------- #
# Main entry
# --------------------------------------------------------------------------- #


def main(argv: list[str] | None = None) -> int:
    logger = get_logger()

    try:
        args = _setup_parser().parse_args(argv)
        logger.setLevel(logger.determine_log_level(args=args))
        logger.debug(
            "%s on Python %s (%s)",
            PROGRAM_DISPLAY,
            platform.python_version(),
            platform.python_implementation(),
        )

        # both ignore every other option, conflicting ones included
        if args.version:
            print(f"{PROGRAM_DISPLAY} {get_metadata()}")
            return 0
        if args.list_themes:
            print_themes()
            return 0

        _normalize_positional_args(args)
        resolved = resolve_config(args, Path.cwd().resolve(), os.environ)
        logger.debug(
            "Input: %s | manifest: %s | output: %s",
            resolved.input.path,
            resolved.manifest.kind,
            resolved.out_path or "<stdout>",
        )
        run_build(resolved)

    except (FileNotFoundError, ValueError, TypeError, RuntimeError) as e:
        try:
            logger.error_if_not_debug(str(e))
        except Exception:  # noqa: BLE001
            safe_log(f"[FATAL] Logging failed while reporting: {e}")
        return 1

    except Exception as e:  # noqa: BLE001
        try:
            logger.critical_if_not_debug("Unexpected internal error: %s", e)
        except Exception:  # noqa: BLE001
            safe_log(f"[FATAL] Logging failed while reporting: {e}")
        return 1

    return 0


def main_entry() -> None:
    """Console-script entry point."""
    sys.exit(main())
