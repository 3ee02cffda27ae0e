# tests/utils/patch_everywhere.py

import sys
from collections.abc import Callable
from types import ModuleType
from typing import Any

import pytest

import inline_mod.meta as mod_meta

from .trace import TEST_TRACE


def patch_everywhere(
    mp: pytest.MonkeyPatch,
    mod_env: ModuleType | Any,
    func_name: str,
    replacement_func: Callable[..., object],
) -> None:
    """Replace a function in its defining module and every app module
    that imported it by name.
    """
    func = getattr(mod_env, func_name, None)
    if func is None:
        xmsg = f"Could not find {func_name!r} on {mod_env!r}"
        raise TypeError(xmsg)

    mod_name = getattr(mod_env, "__name__", type(mod_env).__name__)
    mp.setattr(mod_env, func_name, replacement_func)
    TEST_TRACE(f"Patched {mod_name}.{func_name}")

    for m in list(sys.modules.values()):
        if m is mod_env or not isinstance(m, ModuleType):
            continue
        name = getattr(m, "__name__", "")
        if not name.startswith(mod_meta.PROGRAM_PACKAGE):
            continue
        for k, v in list(m.__dict__.items()):
            if v is func:
                mp.setattr(m, k, replacement_func)
                TEST_TRACE(f"  also patched {name}.{k}")
