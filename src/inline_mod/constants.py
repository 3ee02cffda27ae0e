# src/inline_mod/constants.py
"""Central constants used across the project."""

# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"
DEFAULT_ENV_SHEBANG: str = "SHEBANG"  # prefixed with PROGRAM_ENV

# --- program defaults ---
DEFAULT_LOG_LEVEL: str = "info"
DEFAULT_SHEBANG: str = "#!/usr/bin/env -S cargo run -qZscript --release --manifest-path"

# --- cargo layout ---
MANIFEST_FILENAME: str = "Cargo.toml"
DEFAULT_BIN_ENTRY: str = "src/main.rs"
DEFAULT_LIB_ENTRY: str = "src/lib.rs"
MOD_RS_NAMES: frozenset[str] = frozenset({"main.rs", "lib.rs", "mod.rs"})

# --- script envelope ---
SCRIPT_FRONTMATTER_OPEN: str = "---cargo\n"
SCRIPT_FRONTMATTER_CLOSE: str = "---\n"
EMPTY_MANIFEST_BODY: str = "[dependencies]\n"

# --- collaborators ---
HIGHLIGHT_LANGUAGE: str = "rust"
FORMATTER_TOOL: str = "rustfmt"
FORMATTER_ARGS: list[str] = ["--emit", "stdout", "--edition", "2021"]
