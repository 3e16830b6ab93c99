from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from nav_json.errors import MissingFieldError, NavSyntaxError, TypeMismatchError
from nav_json.model import NavDocument, NavEntry

logger = logging.getLogger(__name__)

SCHEMA_FILENAME = "nav_json_schema_v1.json"


def schema_path() -> Path:
    return Path(__file__).resolve().with_name(SCHEMA_FILENAME)


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:
    schema = json.loads(schema_path().read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def _type_error(err: ValidationError) -> TypeMismatchError:
    # JSON pointer (RFC 6901) of the offending value; the document root prints as "/".
    tokens = [str(p).replace("~", "~0").replace("/", "~1") for p in err.path]
    pointer = "/" + "/".join(tokens)
    reason = err.message
    if err.instance is None or isinstance(err.instance, (str, int, float, bool)):
        reason += f" (got={err.instance!r})"
    return TypeMismatchError(pointer, reason)


def _check_types(payload: Any) -> None:
    errors = sorted(_validator().iter_errors(payload), key=lambda e: (list(e.path), e.message))
    if errors:
        raise _type_error(errors[0])


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON.
    raise NavSyntaxError(f"invalid JSON: unexpected literal {name}")


def _str(obj: dict[str, Any], key: str) -> str:
    # null means "not set", same as an absent key.
    v = obj.get(key)
    return v if v is not None else ""


def _entries(items: list[dict[str, Any]] | None) -> tuple[NavEntry, ...]:
    if not items:
        return ()
    return tuple(
        NavEntry(path=_str(it, "path"), name=_str(it, "name"), files=_entries(it.get("files")))
        for it in items
    )


def _packages(raw: dict[str, Any] | None) -> dict[str, str] | None:
    if raw is None:
        return None
    return {str(k): (v if v is not None else "") for k, v in raw.items()}


def parse(text: str) -> NavDocument:
    """Parse a nav.json document.

    Raises NavSyntaxError for malformed JSON, TypeMismatchError when a field
    has the wrong JSON type, and MissingFieldError for the first of
    ``root``, ``assetRoot``, ``files`` that is missing or empty.
    """
    try:
        payload = json.loads(text, parse_constant=_reject_constant)
        _check_types(payload)
    except json.JSONDecodeError as e:
        raise NavSyntaxError(f"invalid JSON: {e}", lineno=e.lineno, colno=e.colno) from e
    except RecursionError as e:
        raise NavSyntaxError("document nested too deeply") from e

    root = _str(payload, "root")
    if root == "":
        raise MissingFieldError("root")

    asset_root = _str(payload, "assetRoot")
    if asset_root == "":
        raise MissingFieldError("assetRoot")

    files = _entries(payload.get("files"))
    if not files:
        raise MissingFieldError("files")

    doc = NavDocument(
        root=root,
        asset_root=asset_root,
        files=files,
        skip_menu_ordering=bool(payload.get("skipMenuOrdering") or False),
        packages=_packages(payload.get("packages")),
    )
    logger.debug("parsed nav.json root=%s top_level_entries=%d", doc.root, len(doc.files))
    return doc
