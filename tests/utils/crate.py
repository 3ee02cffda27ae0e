# tests/utils/crate.py

from pathlib import Path


def write_files(root: Path, files: dict[str, str]) -> None:
    """Write ``{relative_path: content}`` under ``root``, creating parents."""
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")


def make_crate(
    root: Path,
    manifest: str | None = None,
    files: dict[str, str] | None = None,
) -> Path:
    """Create a crate directory with an optional Cargo.toml and source files."""
    root.mkdir(parents=True, exist_ok=True)
    if manifest is not None:
        (root / "Cargo.toml").write_text(manifest, encoding="utf-8")
    write_files(root, files or {})
    return root
