# src/inline_mod/config_types.py

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


ManifestKind = Literal["explicit", "discovered", "empty", "absent"]


@dataclass(frozen=True)
class InputSpec:
    path: Path
    is_dir: bool

    @classmethod
    def from_path(cls, path: Path) -> "InputSpec":
        return cls(path=path, is_dir=path.is_dir())


@dataclass(frozen=True)
class ManifestSelection:
    """Which manifest (if any) gets embedded in the output.

    Exactly one kind is active; ``path`` is set only for the
    ``explicit`` and ``discovered`` kinds.
    """

    kind: ManifestKind
    path: Path | None = None

    def __post_init__(self) -> None:
        has_path = self.kind in ("explicit", "discovered")
        if has_path != (self.path is not None):
            xmsg = f"ManifestSelection kind {self.kind!r} with path={self.path!r}"
            raise TypeError(xmsg)

    @classmethod
    def explicit(cls, path: Path) -> "ManifestSelection":
        return cls("explicit", path)

    @classmethod
    def discovered(cls, path: Path) -> "ManifestSelection":
        return cls("discovered", path)

    @classmethod
    def empty(cls) -> "ManifestSelection":
        return cls("empty")

    @classmethod
    def absent(cls) -> "ManifestSelection":
        return cls("absent")

    @property
    def wraps_script(self) -> bool:
        return self.kind != "absent"


@dataclass(frozen=True)
class RunConfigResolved:
    """Validated option set for one invocation."""

    input: InputSpec
    # None means stdout
    out_path: Path | None
    # canonical theme name; None disables highlighting
    theme: str | None
    manifest: ManifestSelection
    shebang: str

    @property
    def to_stdout(self) -> bool:
        return self.out_path is None
