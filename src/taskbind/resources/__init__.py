"""Pipeline resource declarations and the resource type registry."""

from taskbind.resources.declaration import (
    DEFAULT_WORKSPACE_ROOT,
    ResourceDeclaration,
    TaskResources,
)
from taskbind.resources.types import (
    ALL_RESOURCE_TYPES,
    ALLOWED_OUTPUT_RESOURCES,
    ResourceType,
    is_valid_output_type,
    is_valid_type,
    parse_resource_type,
)
from taskbind.resources.validation import (
    ResourceValidationError,
    collect_resource_errors,
    validate_task_resources,
)

__all__ = [
    "ALL_RESOURCE_TYPES",
    "ALLOWED_OUTPUT_RESOURCES",
    "DEFAULT_WORKSPACE_ROOT",
    "ResourceDeclaration",
    "ResourceType",
    "ResourceValidationError",
    "TaskResources",
    "collect_resource_errors",
    "is_valid_output_type",
    "is_valid_type",
    "parse_resource_type",
    "validate_task_resources",
]
