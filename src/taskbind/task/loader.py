"""Load task and task modifier documents from YAML or JSON files."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import yaml  # type: ignore[import-untyped]

from taskbind.schemas.validator import TASK_MODIFIER_SCHEMA, TASK_SCHEMA, validate_data
from taskbind.task.modifier import InternalTaskModifier
from taskbind.task.types import Step, TaskSpec, Volume

if TYPE_CHECKING:
    from pathlib import Path

DOCUMENT_REASON_MISSING = "DOCUMENT_MISSING"
DOCUMENT_REASON_PARSE_ERROR = "DOCUMENT_PARSE_ERROR"
DOCUMENT_REASON_SCHEMA_INVALID = "DOCUMENT_SCHEMA_INVALID"


class DocumentError(ValueError):
    """A task or modifier document cannot be loaded."""

    reason_code: str

    def __init__(self, message: str, reason_code: str = DOCUMENT_REASON_SCHEMA_INVALID) -> None:
        super().__init__(message)
        self.reason_code = reason_code


def read_document(path: Path) -> dict[str, Any]:
    """Parse a JSON (``.json``) or YAML (anything else) mapping from path."""
    if not path.exists():
        raise DocumentError(f"Missing document at {path}", DOCUMENT_REASON_MISSING)

    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            raw = json.loads(text)
        else:
            raw = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DocumentError(f"{path.name} parse error: {exc}", DOCUMENT_REASON_PARSE_ERROR) from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise DocumentError(
            f"{path.name} parse error: expected mapping at top level",
            DOCUMENT_REASON_PARSE_ERROR,
        )
    return raw


def _validated(raw: dict[str, Any], schema_name: str, path: Path) -> dict[str, Any]:
    try:
        validate_data(raw, schema_name)
    except ValueError as exc:
        raise DocumentError(f"{path}: {exc}") from exc
    return raw


def task_spec_from_dict(data: dict[str, Any]) -> TaskSpec:
    """Build a TaskSpec from an already validated task document."""
    return TaskSpec.from_dict(data)


def task_modifier_from_dict(data: dict[str, Any]) -> InternalTaskModifier:
    """Build a fixed-list modifier from an already validated modifier document."""
    return InternalTaskModifier(
        steps_to_prepend=[Step.from_dict(s) for s in data.get("stepsToPrepend") or []],
        steps_to_append=[Step.from_dict(s) for s in data.get("stepsToAppend") or []],
        volumes=[Volume.from_dict(v) for v in data.get("volumes") or []],
    )


def load_task_spec(path: Path) -> TaskSpec:
    """Load, schema-check and convert a task document."""
    raw = _validated(read_document(path), TASK_SCHEMA, path)
    try:
        return task_spec_from_dict(raw)
    except (KeyError, TypeError, ValueError) as exc:
        raise DocumentError(f"{path}: invalid task document: {exc}") from exc


def load_task_modifier(path: Path) -> InternalTaskModifier:
    """Load, schema-check and convert a task modifier document."""
    raw = _validated(read_document(path), TASK_MODIFIER_SCHEMA, path)
    try:
        return task_modifier_from_dict(raw)
    except (KeyError, TypeError, ValueError) as exc:
        raise DocumentError(f"{path}: invalid task modifier document: {exc}") from exc
