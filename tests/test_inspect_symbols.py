"""Tests for the inspect_symbols command line."""

import json
from pathlib import Path

import pytest
import yaml

from src.inspect_symbols import EXIT_LOAD_ERROR, EXIT_NOT_FOUND, find_all, main

SYMBOLS = [
    {
        "name": "Widget",
        "longname": "Widget",
        "kind": "class",
        "meta": {"code": {"name": "Widget", "type": "ClassDeclaration"}},
        "$members": [
            {
                "name": "render",
                "longname": "Widget#render",
                "kind": "function",
                "scope": "instance",
                "comments": "/** Render. */",
                "meta": {"code": {"name": "Widget#render", "type": "MethodDefinition"}},
            },
        ],
    },
    {"name": "render", "longname": "render", "kind": "function", "scope": "global"},
]


@pytest.fixture
def dump(tmp_path: Path) -> Path:
    """Write the sample symbols as a jsdoc JSON dump."""
    path = tmp_path / "docs.json"
    path.write_text(json.dumps(SYMBOLS), encoding="utf-8")
    return path


def test_find(dump: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that --find prints the first depth-first match."""
    assert main([str(dump), "--find", "render"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["longname"] == "Widget#render"
    assert out["labels"] == ["instance-member", "method", "instance-method"]


def test_find_missing(dump: Path) -> None:
    """Verify the exit status for an unknown name."""
    assert main([str(dump), "--find", "nope"]) == EXIT_NOT_FOUND


def test_find_all(dump: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that --find-all lists every match in lookup order."""
    assert main([str(dump), "--find-all", "render"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Widget#render", "render"]


def test_find_all_respects_limit(dump: Path, tmp_path: Path) -> None:
    """Verify that lookup.max_results bounds the matches."""
    assert len(find_all(SYMBOLS, "render", 1)) == 1
    assert find_all(SYMBOLS, "render", 0) == []
    assert find_all(SYMBOLS, "render", -1) == []
    cfg = tmp_path / "cfg.yml"
    cfg.write_text(yaml.dump({"lookup": {"max_results": 1}}), encoding="utf-8")
    assert main([str(dump), "--find-all", "render", "--config", str(cfg)]) == 0


def test_report(dump: Path, tmp_path: Path) -> None:
    """Verify that --report writes a JSON report covering nested symbols."""
    out = tmp_path / "report.json"
    assert main([str(dump), "--report", str(out)]) == 0
    content = json.loads(out.read_text(encoding="utf-8"))
    assert content["meta"]["total_symbols"] == 3  # noqa: PLR2004


def test_default_listing(dump: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the one-line-per-symbol classification listing."""
    assert main([str(dump)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Widget: class, undocumented"
    assert lines[1] == "Widget#render: instance-member, method, instance-method"


def test_default_listing_unqualified_symbol(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that symbols without a code name are listed by longname."""
    path = tmp_path / "docs.json"
    path.write_text(
        json.dumps([{"name": "A", "longname": "A", "scope": "global"}]),
        encoding="utf-8",
    )
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["A: global, undocumented"]


def test_load_error(tmp_path: Path) -> None:
    """Verify the exit status for a missing or malformed dump."""
    assert main([str(tmp_path / "missing.json")]) == EXIT_LOAD_ERROR
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert main([str(bad)]) == EXIT_LOAD_ERROR
