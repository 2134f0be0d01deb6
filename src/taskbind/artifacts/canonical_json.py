"""Canonical JSON and YAML rendering for deterministic task documents."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import yaml  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from pathlib import Path

OUTPUT_FORMATS: tuple[str, ...] = ("json", "yaml")


def canonical_dumps(obj: Any) -> str:
    """Serialize with stable canonical formatting.

    Values JSON has no type for (YAML dates, timestamps) are written as strings.
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )


def render_document(obj: Any, output_format: str = "json") -> str:
    """Render obj as canonical JSON or as block-style YAML."""
    if output_format == "json":
        return canonical_dumps(obj)
    if output_format == "yaml":
        return yaml.safe_dump(obj, sort_keys=True, default_flow_style=False)
    raise ValueError(f"output format must be one of {OUTPUT_FORMATS}, got `{output_format}`")


def write_document(path: Path, obj: Any, output_format: str = "json") -> None:
    """Write a rendered document as UTF-8."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_document(obj, output_format), encoding="utf-8")
