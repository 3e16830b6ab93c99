from __future__ import annotations

from pathlib import Path

from nav_json.errors import NavJSONError
from nav_json.files import validate_files
from nav_json.model import NavDocument
from nav_json.parser import parse

__all__ = ["is_valid", "load", "parse", "validate"]


def load(path: Path | str) -> NavDocument:
    """Read and parse a nav.json file (UTF-8)."""
    return parse(Path(path).read_text(encoding="utf-8"))


def validate(document: NavDocument, base_dir: Path | str) -> None:
    """Ensure every file referenced by ``document`` exists under ``base_dir``."""
    validate_files(base_dir, document.files)


def is_valid(text: str) -> bool:
    try:
        parse(text)
    except NavJSONError:
        return False
    return True
