# tests/9_integration/test_version.py

import sys

import pytest

import inline_mod.actions as mod_actions
import inline_mod.cli as mod_cli
import inline_mod.meta as mod_meta
from tests.utils import PROJ_ROOT


if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


def test_version_flag_prints_version(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- patch ---
    monkeypatch.setattr(
        mod_cli, "get_metadata", lambda: mod_meta.Metadata("1.2.3", "abc123")
    )

    # --- execute ---
    code = mod_cli.main(["--version", "--theme", "whatever"])

    # --- verify ---
    assert code == 0
    assert f"{mod_meta.PROGRAM_DISPLAY} 1.2.3 (abc123)" in capsys.readouterr().out


def test_get_metadata_matches_pyproject() -> None:
    # --- setup ---
    with (PROJ_ROOT / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]

    # --- execute ---
    meta = mod_actions.get_metadata()

    # --- verify ---
    assert meta.version == expected
    assert isinstance(meta.commit, str)
