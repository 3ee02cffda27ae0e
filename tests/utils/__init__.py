# tests/utils/__init__.py

from .constants import DEFAULT_TEST_LOG_LEVEL, PROJ_ROOT
from .crate import make_crate, write_files
from .patch_everywhere import patch_everywhere
from .trace import TEST_TRACE


__all__ = [  # noqa: RUF022
    # constants
    "DEFAULT_TEST_LOG_LEVEL",
    "PROJ_ROOT",
    # crate
    "make_crate",
    "write_files",
    # patch_everywhere
    "patch_everywhere",
    # trace
    "TEST_TRACE",
]
