# src/inline_mod/highlight.py
"""ANSI syntax highlighting backed by Pygments styles."""

from difflib import get_close_matches

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import get_lexer_by_name
from pygments.styles import get_all_styles

from .constants import HIGHLIGHT_LANGUAGE
from .errors import ThemeError
from .logs import get_logger


def list_themes() -> list[str]:
    """Return the names of all available themes, sorted."""
    return sorted(get_all_styles())


def resolve_theme(name: str) -> str:
    """Return the catalog spelling of ``name``, matched case-insensitively.

    Raises:
        ThemeError: No theme by that name exists
    """
    catalog = list_themes()
    by_lower = {theme.lower(): theme for theme in catalog}
    found = by_lower.get(name.strip().lower())
    if found is not None:
        return found

    xmsg = f"Unknown theme: {name}"
    close = get_close_matches(name.lower(), list(by_lower), n=1, cutoff=0.6)
    if close:
        xmsg += f" (did you mean {by_lower[close[0]]}?)"
    raise ThemeError(xmsg)


def highlight_code(text: str, theme: str) -> str:
    """Colorize Rust source for a terminal.

    Falls back to the original text if the highlighter fails; the theme
    itself must already have been checked with resolve_theme().
    """
    logger = get_logger()
    try:
        lexer = get_lexer_by_name(HIGHLIGHT_LANGUAGE, stripnl=False, ensurenl=False)
        formatter = Terminal256Formatter(style=theme)
        return highlight(text, lexer, formatter)
    except Exception as e:  # noqa: BLE001
        logger.warning("Highlighting failed (%s); writing plain text.", e)
        return text
