from __future__ import annotations

import json
from pathlib import Path

import pytest

from nav_json.api import is_valid
from nav_json.errors import MissingFieldError, NavJSONError, NavSyntaxError, TypeMismatchError
from nav_json.model import NavEntry
from nav_json.parser import parse


def _examples_dir() -> Path:
    return Path(__file__).resolve().parents[1] / "examples"


def _doc(**overrides: object) -> str:
    doc: dict[str, object] = {
        "root": "guide/attest/2.7-experiment/",
        "assetRoot": "assets/images/attest/2.7-experiment/",
        "files": [{"name": "index.html", "path": "index"}],
    }
    for k, v in overrides.items():
        if v is None:
            doc.pop(k, None)
        else:
            doc[k] = v
    return json.dumps(doc)


def test_examples_ok_pass() -> None:
    ok_files = sorted(_examples_dir().glob("*_ok.json"))
    assert ok_files, "no *_ok.json examples found"

    for p in ok_files:
        text = p.read_text(encoding="utf-8")
        parse(text)
        assert is_valid(text), p.name


def test_examples_bad_fail() -> None:
    bad_files = sorted(_examples_dir().glob("*_bad.json"))
    assert bad_files, "no *_bad.json examples found"

    for p in bad_files:
        text = p.read_text(encoding="utf-8")
        with pytest.raises(NavJSONError):
            parse(text)
        assert not is_valid(text), p.name


def test_full_valid_doc() -> None:
    doc = parse((_examples_dir() / "simple_ok.json").read_text(encoding="utf-8"))
    assert doc.root == "guide/attest/2.7-experiment/"
    assert doc.asset_root == "assets/images/attest/2.7-experiment/"
    assert doc.skip_menu_ordering is True
    assert len(doc.files) == 3

    grouping = doc.files[1]
    assert grouping.is_grouping
    assert grouping.path == "api"
    assert [f.name for f in grouping.files] == ["overview.html", "reference/methods.html"]

    placeholder = doc.files[2]
    assert placeholder == NavEntry(path="modx-placeholder")


def test_packages_absent_is_none() -> None:
    doc = parse((_examples_dir() / "no_packages_ok.json").read_text(encoding="utf-8"))
    assert doc.packages is None
    assert doc.skip_menu_ordering is False


def test_packages_present() -> None:
    doc = parse((_examples_dir() / "with_packages_ok.json").read_text(encoding="utf-8"))
    assert doc.packages is not None
    assert doc.packages["attest-js"] == "path"


def test_packages_present_but_empty_is_distinguishable() -> None:
    doc = parse(_doc(packages={}))
    assert doc.packages == {}
    assert doc.packages is not None


def test_files_with_name() -> None:
    doc = parse((_examples_dir() / "files_with_names_ok.json").read_text(encoding="utf-8"))
    assert len(doc.files) == 1
    f = doc.files[0]
    assert f.name == "hello"
    assert f.files == (NavEntry(path="world", name="world"),)


def test_invalid_json() -> None:
    with pytest.raises(NavSyntaxError) as ei:
        parse("|)(*(&DF(*FUDF)))}")
    assert ei.value.lineno == 1


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"root": None}, "root"),
        ({"root": ""}, "root"),
        ({"assetRoot": None}, "assetRoot"),
        ({"assetRoot": ""}, "assetRoot"),
        ({"files": None}, "files"),
        ({"files": []}, "files"),
    ],
)
def test_missing_required_field(overrides: dict[str, object], field: str) -> None:
    with pytest.raises(MissingFieldError) as ei:
        parse(_doc(**overrides))
    assert ei.value.field == field
    assert f"`{field}`" in str(ei.value)


def test_required_fields_checked_in_order() -> None:
    with pytest.raises(MissingFieldError) as ei:
        parse("{}")
    assert ei.value.field == "root"

    with pytest.raises(MissingFieldError) as ei:
        parse(json.dumps({"root": "guide/"}))
    assert ei.value.field == "assetRoot"


def test_null_fields_count_as_missing() -> None:
    with pytest.raises(MissingFieldError) as ei:
        parse('{"root": null, "assetRoot": "assets/", "files": [{"name": "a.html", "path": "a"}]}')
    assert ei.value.field == "root"


def test_skip_menu_ordering_as_string_is_rejected() -> None:
    with pytest.raises(TypeMismatchError) as ei:
        parse(_doc(skipMenuOrdering="true"))
    assert isinstance(ei.value, NavSyntaxError)
    assert ei.value.pointer == "/skipMenuOrdering"
    assert "got='true'" in str(ei.value)


def test_nested_type_error_reports_json_pointer() -> None:
    text = (_examples_dir() / "nested_entry_type_bad.json").read_text(encoding="utf-8")
    with pytest.raises(TypeMismatchError) as ei:
        parse(text)
    assert ei.value.pointer == "/files/0/files/0/name"


def test_top_level_must_be_object() -> None:
    with pytest.raises(TypeMismatchError) as ei:
        parse("[]")
    assert ei.value.pointer == "/"


def test_package_values_must_be_strings() -> None:
    with pytest.raises(TypeMismatchError) as ei:
        parse(_doc(packages={"attest-js": 1}))
    assert ei.value.pointer == "/packages/attest-js"


def test_entry_without_path_defaults_to_empty() -> None:
    doc = parse(_doc(files=[{"name": "index.html"}]))
    assert doc.files[0].path == ""


def test_roundtrip_through_json_obj() -> None:
    for p in sorted(_examples_dir().glob("*_ok.json")):
        doc = parse(p.read_text(encoding="utf-8"))
        assert parse(json.dumps(doc.to_json_obj())) == doc, p.name


def test_is_valid_matches_parse() -> None:
    for text in ["", "null", "{}", "[]", _doc(), _doc(files=[]), _doc(skipMenuOrdering=False)]:
        try:
            parse(text)
            ok = True
        except NavJSONError:
            ok = False
        assert is_valid(text) is ok


def _nested_groups(depth: int) -> str:
    entry: dict[str, object] = {"name": "leaf.html", "path": "leaf"}
    for i in range(depth):
        entry = {"path": f"level{i}", "files": [entry]}
    return _doc(files=[entry])


def test_pathologically_nested_text_is_invalid() -> None:
    with pytest.raises(NavSyntaxError):
        parse("[" * 100000)
    assert is_valid("[" * 100000) is False
    assert is_valid('{"files": ' * 100000) is False


@pytest.mark.parametrize("depth", [50, 150, 300])
def test_deep_entry_trees_parse_or_fail_cleanly(depth: int) -> None:
    text = _nested_groups(depth)
    try:
        doc = parse(text)
    except NavSyntaxError:
        assert is_valid(text) is False
        return
    assert is_valid(text) is True
    assert doc.files[0].path == f"level{depth - 1}"


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_non_json_constants_are_rejected(literal: str) -> None:
    text = _doc().replace('"root"', f'"extra": {literal}, "root"', 1)
    with pytest.raises(NavSyntaxError) as ei:
        parse(text)
    assert literal.lstrip("-") in str(ei.value)
    assert is_valid(text) is False
