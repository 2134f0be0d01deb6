"""Unit tests for canonical document rendering."""

from __future__ import annotations

import json
from datetime import date

import pytest
import yaml

from taskbind.artifacts.canonical_json import canonical_dumps, render_document, write_document


def test_canonical_dumps_is_compact_and_sorted() -> None:
    assert canonical_dumps({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'


def test_yaml_dates_render_as_strings_in_json() -> None:
    payload = {"volumes": [{"name": "v", "hostPath": {"path": date(2024, 1, 1)}}]}

    rendered = json.loads(render_document(payload, "json"))

    assert rendered["volumes"][0]["hostPath"]["path"] == "2024-01-01"


def test_yaml_rendering_keeps_dates() -> None:
    payload = {"stamp": date(2024, 1, 1)}
    assert yaml.safe_load(render_document(payload, "yaml")) == payload


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(ValueError, match="output format"):
        render_document({}, "xml")


def test_write_document_creates_parents(tmp_path) -> None:
    path = tmp_path / "nested" / "task.json"
    write_document(path, {"steps": []})
    assert json.loads(path.read_text(encoding="utf-8")) == {"steps": []}
