from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_FILE = "docs/nav.json"


def default_file() -> Path:
    return Path(str(os.getenv("NAVJSON_FILE", DEFAULT_FILE)).strip() or DEFAULT_FILE)


def check_files_enabled() -> bool:
    # Default OFF: the file existence pass is opt-in.
    v = str(os.getenv("NAVJSON_CHECK_FILES", "off")).strip().lower()
    return v in ("1", "on", "true", "yes")


def default_log_level() -> str:
    return str(os.getenv("NAVJSON_LOG_LEVEL", "WARNING")).strip().upper() or "WARNING"


@dataclass(frozen=True)
class CheckConfig:
    file: Path
    silent: bool = False
    check_files: bool = False

    @property
    def base_dir(self) -> Path:
        """Referenced files resolve relative to the directory holding nav.json."""
        return self.file.parent

    @classmethod
    def from_env(cls) -> CheckConfig:
        return cls(file=default_file(), check_files=check_files_enabled())
