from __future__ import annotations

from .errors import (
    DirectoryNotFoundError,
    FileCheckError,
    MissingFieldError,
    NavFileNotFoundError,
    NavIsADirectoryError,
    NavJSONError,
    NavSyntaxError,
    TypeMismatchError,
)
from .files import iter_file_paths, validate_files
from .model import NavDocument, NavEntry
from .api import is_valid, load, parse, validate
from .version import __version__

__all__ = [
    "DirectoryNotFoundError",
    "FileCheckError",
    "MissingFieldError",
    "NavDocument",
    "NavEntry",
    "NavFileNotFoundError",
    "NavIsADirectoryError",
    "NavJSONError",
    "NavSyntaxError",
    "TypeMismatchError",
    "__version__",
    "is_valid",
    "iter_file_paths",
    "load",
    "parse",
    "validate",
    "validate_files",
]
