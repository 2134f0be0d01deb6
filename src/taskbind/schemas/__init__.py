"""Packaged JSON schemas and validation helpers."""

from taskbind.schemas.registry import SchemaRegistry, get_registry, get_schema_json
from taskbind.schemas.validator import TASK_MODIFIER_SCHEMA, TASK_SCHEMA, validate_data

__all__ = [
    "SchemaRegistry",
    "TASK_MODIFIER_SCHEMA",
    "TASK_SCHEMA",
    "get_registry",
    "get_schema_json",
    "validate_data",
]
