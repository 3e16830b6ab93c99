from __future__ import annotations

from importlib import metadata

__version__ = "0.1.0"


def get_version() -> str:
    try:
        return metadata.version("nav-json-validator")
    except metadata.PackageNotFoundError:
        return __version__
