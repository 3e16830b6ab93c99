from __future__ import annotations

import logging
import os
import posixpath
import stat
from pathlib import Path
from typing import Iterable, Iterator

from nav_json.errors import DirectoryNotFoundError, NavFileNotFoundError, NavIsADirectoryError
from nav_json.model import NavEntry

logger = logging.getLogger(__name__)


def _join(base: Path, segment: str) -> Path:
    # Segments are slash-separated document paths: a leading "/" never makes them absolute.
    return Path(os.path.normpath(os.path.join(base, segment.lstrip("/"))))


def iter_file_paths(base_dir: Path | str, entries: Iterable[NavEntry]) -> Iterator[Path]:
    """Yield the on-disk path of every named entry, depth-first in document order.

    Unnamed entries without children are placeholders and yield nothing.
    Unnamed entries with children nest them under ``path``. Children of a named
    entry resolve relative to the directory containing ``name``.
    """
    base = Path(base_dir)
    for e in entries:
        if e.is_grouping:
            if not e.files:
                continue
            subdir = _join(base, e.path)
            logger.debug("descending into grouping path %s", subdir)
            yield from iter_file_paths(subdir, e.files)
            continue

        yield _join(base, e.name)

        if e.files:
            subdir = _join(base, posixpath.dirname(e.name))
            logger.debug("descending into %s (children of %s)", subdir, e.name)
            yield from iter_file_paths(subdir, e.files)


def _ensure_directory(base: Path) -> None:
    try:
        st = base.stat()
    except (FileNotFoundError, NotADirectoryError) as e:
        raise DirectoryNotFoundError(base) from e
    if not stat.S_ISDIR(st.st_mode):
        raise DirectoryNotFoundError(base)


def _ensure_file(fp: Path) -> None:
    try:
        st = fp.stat()
    except (FileNotFoundError, NotADirectoryError) as e:
        raise NavFileNotFoundError(fp) from e
    if stat.S_ISDIR(st.st_mode):
        raise NavIsADirectoryError(fp)


def validate_files(base_dir: Path | str, entries: Iterable[NavEntry]) -> None:
    """Ensure every file referenced by ``entries`` exists under ``base_dir``.

    The base directory itself is checked once, before any entry. Stops at the
    first failure. OSErrors other than "not found" propagate unchanged.
    """
    base = Path(base_dir)
    _ensure_directory(base)

    checked = 0
    for fp in iter_file_paths(base, entries):
        logger.debug("stat %s", fp)
        _ensure_file(fp)
        checked += 1
    logger.info("all referenced files exist (checked=%d, base=%s)", checked, base.as_posix())
