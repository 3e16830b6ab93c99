from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from nav_json.api import load, validate
from nav_json.config import CheckConfig, default_log_level
from nav_json.errors import NavJSONError
from nav_json.version import get_version

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE_OR_ERROR = 1
EXIT_INVALID = 2


def check(config: CheckConfig) -> tuple[int, str]:
    """Run one full validation for ``config``. Returns (exit_code, message)."""
    label = config.file.as_posix()
    try:
        doc = load(config.file)
        if config.check_files:
            validate(doc, config.base_dir)
        else:
            logger.debug("file existence pass skipped for %s", label)
        code, msg = EXIT_OK, f"OK: File `{label}` is valid"
    except NavJSONError as e:
        code, msg = EXIT_INVALID, f"INVALID: {label}: {e}"
    except (OSError, UnicodeDecodeError) as e:
        code, msg = EXIT_USAGE_OR_ERROR, f"ERROR: {e}"

    if config.silent and code != EXIT_OK:
        return EXIT_USAGE_OR_ERROR, msg
    return code, msg


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="nav-json-validate", description="Validate a nav.json document.")
    parser.add_argument(
        "--file",
        default=None,
        help="Path to nav.json file (default: env NAVJSON_FILE or docs/nav.json).",
    )
    parser.add_argument("--silent", action="store_true", help="Silence output; exit 1 on any failure.")
    files_group = parser.add_mutually_exclusive_group()
    files_group.add_argument(
        "--check-files",
        dest="check_files",
        action="store_true",
        default=None,
        help="Ensure every referenced file exists (default: env NAVJSON_CHECK_FILES or off).",
    )
    files_group.add_argument(
        "--skip-file-check",
        dest="check_files",
        action="store_false",
        default=None,
        help="Skip the file existence pass.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        default=default_log_level(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    env = CheckConfig.from_env()
    config = CheckConfig(
        file=Path(args.file) if args.file else env.file,
        silent=bool(args.silent),
        check_files=env.check_files if args.check_files is None else bool(args.check_files),
    )

    code, msg = check(config)
    if not config.silent:
        print(msg, file=sys.stdout if code == EXIT_OK else sys.stderr)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
