from __future__ import annotations

from pathlib import Path


class NavJSONError(ValueError):
    """Base class for nav.json parse and validation failures (exit=2)."""


class NavSyntaxError(NavJSONError):
    """The document is not well-formed JSON or does not have the nav.json shape."""

    def __init__(self, message: str, *, lineno: int | None = None, colno: int | None = None) -> None:
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno


class TypeMismatchError(NavSyntaxError):
    """A field is present with the wrong JSON type."""

    def __init__(self, pointer: str, reason: str) -> None:
        super().__init__(f"{pointer}: {reason}")
        self.pointer = pointer
        self.reason = reason


class MissingFieldError(NavJSONError):
    _MESSAGES = {
        "root": "Missing `root` key",
        "assetRoot": "Missing `assetRoot` key",
        "files": "Missing or empty `files` array",
    }

    def __init__(self, field: str) -> None:
        super().__init__(self._MESSAGES.get(field, f"Missing `{field}` key"))
        self.field = field


class FileCheckError(NavJSONError):
    """A path referenced by the document does not resolve on disk."""

    reason = "Path check failed"

    def __init__(self, path: Path) -> None:
        super().__init__(f"{self.reason} ({path.as_posix()})")
        self.path = path


class DirectoryNotFoundError(FileCheckError):
    reason = "Directory does not exist"


class NavFileNotFoundError(FileCheckError):
    reason = "File does not exist"


class NavIsADirectoryError(FileCheckError):
    reason = "Referenced file is a directory"
