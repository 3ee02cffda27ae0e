# tests/5_core/test_render_code.py

import subprocess
from pathlib import Path
from typing import Any

import pytest

import inline_mod.inline as mod_inline
from tests.utils import write_files


def _fake_rustfmt(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        mod_inline, "find_tool_executable", lambda *_a, **_k: "/usr/bin/rustfmt"
    )


def test_render_without_rustfmt_normalizes_trailing_newline() -> None:
    # --- execute and verify ---
    assert mod_inline.render_code("fn main() {}\n\n\n") == "fn main() {}\n"
    assert mod_inline.render_code("fn main() {}") == "fn main() {}\n"


def test_render_uses_rustfmt_output(monkeypatch: pytest.MonkeyPatch) -> None:
    # --- setup ---
    calls: list[dict[str, Any]] = []

    # --- stubs ---
    def fake_run(command: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        calls.append({"command": command, **kwargs})
        return subprocess.CompletedProcess(command, 0, stdout="fn main() {}\n")

    # --- patch and execute ---
    _fake_rustfmt(monkeypatch)
    monkeypatch.setattr(mod_inline.subprocess, "run", fake_run)
    result = mod_inline.render_code("fn   main(){}")

    # --- verify ---
    assert result == "fn main() {}\n"
    assert calls[0]["command"] == [
        "/usr/bin/rustfmt",
        "--emit",
        "stdout",
        "--edition",
        "2021",
    ]
    assert calls[0]["input"] == "fn   main(){}"


def test_render_falls_back_when_rustfmt_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    # --- stubs ---
    def fake_run(command: list[str], **_kwargs: Any) -> subprocess.CompletedProcess[str]:
        return subprocess.CompletedProcess(command, 1, stdout="", stderr="error[E0001]")

    # --- patch and execute ---
    _fake_rustfmt(monkeypatch)
    monkeypatch.setattr(mod_inline.subprocess, "run", fake_run)
    result = mod_inline.render_code("fn broken(")

    # --- verify ---
    assert result == "fn broken(\n"


def test_render_falls_back_when_rustfmt_cannot_start(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # --- stubs ---
    def fake_run(*_args: Any, **_kwargs: Any) -> subprocess.CompletedProcess[str]:
        xmsg = "exec format error"
        raise OSError(xmsg)

    # --- patch and execute ---
    _fake_rustfmt(monkeypatch)
    monkeypatch.setattr(mod_inline.subprocess, "run", fake_run)

    # --- verify ---
    assert mod_inline.render_code("fn main() {}") == "fn main() {}\n"


def test_rustfmt_env_var_is_passed_as_custom_path(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # --- setup ---
    seen: dict[str, Any] = {}

    # --- stubs ---
    def fake_find(tool: str, custom_path: str | None = None) -> None:
        seen["tool"] = tool
        seen["custom_path"] = custom_path

    # --- patch and execute ---
    monkeypatch.setenv("RUSTFMT", "/opt/rust/bin/rustfmt")
    monkeypatch.setattr(mod_inline, "find_tool_executable", fake_find)
    mod_inline.render_code("fn main() {}")

    # --- verify ---
    assert seen == {"tool": "rustfmt", "custom_path": "/opt/rust/bin/rustfmt"}


def test_consolidate_inlines_then_renders(tmp_path: Path) -> None:
    # --- setup ---
    write_files(tmp_path, {"main.rs": "mod a;\n\n\n", "a.rs": "fn a() {}\n"})

    # --- execute and verify ---
    assert mod_inline.consolidate(tmp_path / "main.rs") == "mod a {\nfn a() {}\n}\n"
