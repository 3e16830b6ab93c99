from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NavEntry:
    """One node of the navigation tree.

    An empty ``name`` marks a grouping (or placeholder) node whose ``path`` is
    used as a subdirectory for its ``files``.
    """

    path: str = ""
    name: str = ""
    files: tuple[NavEntry, ...] = ()

    @property
    def is_grouping(self) -> bool:
        return self.name == ""

    def to_json_obj(self) -> dict[str, Any]:
        obj: dict[str, Any] = {}
        if self.name:
            obj["name"] = self.name
        obj["path"] = self.path
        if self.files:
            obj["files"] = [f.to_json_obj() for f in self.files]
        return obj


@dataclass(frozen=True)
class NavDocument:
    root: str
    asset_root: str
    files: tuple[NavEntry, ...]
    skip_menu_ordering: bool = False
    # None when the key is absent; {} when present but empty. Only used by monorepos.
    packages: dict[str, str] | None = None

    def to_json_obj(self) -> dict[str, Any]:
        obj: dict[str, Any] = {
            "root": self.root,
            "assetRoot": self.asset_root,
        }
        if self.skip_menu_ordering:
            obj["skipMenuOrdering"] = True
        if self.packages is not None:
            obj["packages"] = dict(self.packages)
        obj["files"] = [f.to_json_obj() for f in self.files]
        return obj
