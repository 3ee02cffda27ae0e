# src/inline_mod/inline.py
"""Merge a Rust crate's file modules into one source text.

Every ``mod name;`` reachable from the entry file is replaced with an inline
``mod name { ... }`` block holding that module's (recursively inlined)
contents. Files are located the way rustc locates them:

- the entry file, ``main.rs``, ``lib.rs``, ``mod.rs`` and files loaded via
  ``#[path]`` own their directory: children live next to them
- any other ``foo.rs`` keeps its children in ``foo/``
- for each child, ``name.rs`` is tried before ``name/mod.rs``
- inline ``mod a { ... }`` blocks add ``a/`` to the lookup directory

Source is parsed with tree-sitter, so declarations inside comments, string
literals and macro bodies are never touched.
"""

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

import tree_sitter_rust
from tree_sitter import Language, Node, Parser

from .constants import FORMATTER_ARGS, FORMATTER_TOOL, MOD_RS_NAMES
from .errors import ConsolidationError
from .logs import get_logger
from .utils import find_tool_executable


RUST_LANGUAGE = Language(tree_sitter_rust.language())

_COMMENT_NODES = frozenset({"line_comment", "block_comment"})
_ESCAPES = {"\\\\": "\\", '\\"': '"', "\\'": "'", "\\n": "\n", "\\t": "\t"}


# --------------------------------------------------------------------------- #
# Syntax tree helpers
# --------------------------------------------------------------------------- #


def _node_text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8")


def _string_value(node: Node, source: bytes) -> str | None:
    """Contents of a (raw) string literal node, or None for other expressions."""
    if node.type not in ("string_literal", "raw_string_literal"):
        return None
    parts: list[str] = []
    for child in node.named_children:
        text = _node_text(child, source)
        if child.type == "escape_sequence":
            text = _ESCAPES.get(text, text)
        parts.append(text)
    return "".join(parts)


def _path_value(attribute_item: Node, source: bytes) -> str | None:
    """The value of a ``#[path = "..."]`` attribute item."""
    attr = next(
        (c for c in attribute_item.named_children if c.type == "attribute"), None
    )
    if attr is None or not attr.named_children:
        return None
    value = attr.child_by_field_name("value")
    if value is None or _node_text(attr.named_children[0], source) != "path":
        return None
    return _string_value(value, source)


def _path_attribute(mod_item: Node, source: bytes) -> tuple[Node, str] | None:
    """Find the ``#[path]`` among the outer attributes of ``mod_item``."""
    sibling = mod_item.prev_named_sibling
    while sibling is not None:
        if sibling.type == "attribute_item":
            value = _path_value(sibling, source)
            if value is not None:
                return sibling, value
        elif sibling.type not in _COMMENT_NODES:
            return None
        sibling = sibling.prev_named_sibling
    return None


# --------------------------------------------------------------------------- #
# Inliner
# --------------------------------------------------------------------------- #


# (start_byte, end_byte, replacement)
_Edit = tuple[int, int, bytes]


@dataclass
class _Inliner:
    parser: Parser = field(default_factory=lambda: Parser(RUST_LANGUAGE))
    # files currently being inlined, for cycle detection
    active: list[Path] = field(default_factory=list)
    # (declaring file, module name) pairs that could not be inlined
    unresolved: list[tuple[Path, str]] = field(default_factory=list)

    def inline_file(self, path: Path, mod_dir: Path) -> str:
        logger = get_logger()
        resolved = path.resolve()
        if resolved in self.active:
            chain = " -> ".join(str(p) for p in [*self.active, resolved])
            xmsg = f"Module cycle detected: {chain}"
            raise ConsolidationError(xmsg)

        source = path.read_text(encoding="utf-8").encode("utf-8")
        logger.trace("[INLINE] %s (children in %s)", path, mod_dir)

        self.active.append(resolved)
        try:
            edits: list[_Edit] = []
            root = self.parser.parse(source).root_node
            self._visit(root, source, path, mod_dir, nested=False, edits=edits)
        finally:
            self.active.pop()

        for start, end, replacement in sorted(edits, reverse=True):
            source = source[:start] + replacement + source[end:]
        return source.decode("utf-8")

    def _locate(
        self,
        name: str,
        lookup_dir: Path,
        path_attr: str | None,
    ) -> tuple[Path, Path] | None:
        """Return ``(file, child_mod_dir)`` for a module, if its file exists."""
        if path_attr is not None:
            candidate = lookup_dir / path_attr
            if candidate.is_file():
                return candidate, candidate.parent
            return None

        for candidate in (lookup_dir / f"{name}.rs", lookup_dir / name / "mod.rs"):
            if candidate.is_file():
                if candidate.name in MOD_RS_NAMES:
                    return candidate, candidate.parent
                return candidate, candidate.parent / candidate.stem
        return None

    def _visit(  # noqa: PLR0913
        self,
        node: Node,
        source: bytes,
        path: Path,
        current_dir: Path,
        *,
        nested: bool,
        edits: list[_Edit],
    ) -> None:
        for child in node.named_children:
            name_node = child.child_by_field_name("name")
            if child.type != "mod_item" or name_node is None:
                self._visit(
                    child, source, path, current_dir, nested=nested, edits=edits
                )
                continue

            name = _node_text(name_node, source).removeprefix("r#")
            attr = _path_attribute(child, source)
            body = child.child_by_field_name("body")
            if body is not None:
                block_dir = current_dir / (attr[1] if attr else name)
                self._visit(body, source, path, block_dir, nested=True, edits=edits)
                continue

            # #[path] is relative to the declaring file outside inline blocks
            lookup_dir = path.parent if attr and not nested else current_dir
            inlined = self._inline_child(
                name, path, self._locate(name, lookup_dir, attr[1] if attr else None)
            )
            if inlined is None:
                continue

            keyword = next(c for c in child.children if c.type == "mod")
            block = f"mod {_node_text(name_node, source)} {{\n{inlined.rstrip()}\n}}"
            edits.append((keyword.start_byte, child.end_byte, block.encode("utf-8")))
            if attr:
                edits.append((attr[0].start_byte, attr[0].end_byte, b""))

    def _inline_child(
        self,
        name: str,
        declared_in: Path,
        located: tuple[Path, Path] | None,
    ) -> str | None:
        logger = get_logger()
        if located is None:
            logger.warning(
                "Module %r declared in %s not found; leaving it as-is.",
                name,
                declared_in,
            )
            self.unresolved.append((declared_in, name))
            return None

        child_path, child_dir = located
        try:
            return self.inline_file(child_path, child_dir)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read module %r at %s: %s", name, child_path, e)
            self.unresolved.append((declared_in, name))
            return None


# --------------------------------------------------------------------------- #
# Public API
# --------------------------------------------------------------------------- #


def inline_modules(source_path: Path) -> str:
    """Return the source of ``source_path`` with all file modules inlined.

    Modules that cannot be found are left as declarations and logged as
    warnings; only a failure to read the entry file itself (or a module
    cycle) is fatal.

    Raises:
        ConsolidationError: The entry file is unreadable or modules form a cycle
    """
    logger = get_logger()
    inliner = _Inliner()
    try:
        text = inliner.inline_file(source_path, source_path.parent)
    except (OSError, UnicodeDecodeError) as e:
        reason = getattr(e, "strerror", None) or str(e)
        xmsg = f"Failed to read {source_path}: {reason}"
        raise ConsolidationError(xmsg) from e

    if inliner.unresolved:
        logger.debug("%d module(s) left unresolved", len(inliner.unresolved))
    return text


def _ensure_trailing_newline(text: str) -> str:
    return text.rstrip() + "\n"


def render_code(text: str) -> str:
    """Format merged source with rustfmt when it is available.

    The ``RUSTFMT`` environment variable may point at a specific binary.
    When no formatter can be run, or it rejects the input, the text is
    returned as-is.
    """
    logger = get_logger()
    executable = find_tool_executable(FORMATTER_TOOL, os.getenv("RUSTFMT"))
    if executable is None:
        logger.debug("%s not found on PATH, skipping formatting", FORMATTER_TOOL)
        return _ensure_trailing_newline(text)

    command = [executable, *FORMATTER_ARGS]
    logger.trace("[RENDER] running %s", " ".join(command))
    try:
        result = subprocess.run(  # noqa: S603
            command,
            input=text,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
        )
    except OSError as e:
        logger.debug("Error running %s: %s", FORMATTER_TOOL, e)
        return _ensure_trailing_newline(text)

    if result.returncode != 0:
        logger.debug(
            "%s exited with code %d: %s",
            FORMATTER_TOOL,
            result.returncode,
            result.stderr or result.stdout,
        )
        return _ensure_trailing_newline(text)

    return _ensure_trailing_newline(result.stdout)


def consolidate(source_path: Path) -> str:
    """Inline and format ``source_path`` into a single source text."""
    return render_code(inline_modules(source_path))
