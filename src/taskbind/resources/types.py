"""Pipeline resource type registry."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ResourceType(str, Enum):
    """Kind of endpoint a pipeline resource represents."""

    GIT = "git"  # git repository
    STORAGE = "storage"  # storage blob
    IMAGE = "image"  # container image
    CLUSTER = "cluster"  # kubernetes cluster
    PULL_REQUEST = "pullRequest"  # SCM pull request
    CLOUD_EVENT = "cloudEvent"  # cloud event sink URI

    def __str__(self) -> str:
        return self.value


ALL_RESOURCE_TYPES: tuple[ResourceType, ...] = (
    ResourceType.GIT,
    ResourceType.STORAGE,
    ResourceType.IMAGE,
    ResourceType.CLUSTER,
    ResourceType.PULL_REQUEST,
    ResourceType.CLOUD_EVENT,
)

ALLOWED_OUTPUT_RESOURCES: frozenset[ResourceType] = frozenset(
    {ResourceType.STORAGE, ResourceType.GIT}
)

_TYPES_BY_VALUE: dict[str, ResourceType] = {t.value: t for t in ALL_RESOURCE_TYPES}


def _lookup(value: Any) -> ResourceType | None:
    if isinstance(value, ResourceType):
        return value
    if isinstance(value, str):
        return _TYPES_BY_VALUE.get(value)
    return None


def is_valid_type(value: Any) -> bool:
    """Return True if value names one of the known resource types."""
    return _lookup(value) is not None


def is_valid_output_type(value: Any) -> bool:
    """Return True if value names a resource type usable as a task output."""
    return _lookup(value) in ALLOWED_OUTPUT_RESOURCES


def parse_resource_type(value: Any) -> ResourceType:
    """Convert a raw value into a ResourceType.

    Raises:
        ValueError: If value is not a known resource type.
    """
    resource_type = _lookup(value)
    if resource_type is None:
        allowed = ", ".join(t.value for t in ALL_RESOURCE_TYPES)
        raise ValueError(f"unknown resource type `{value}` (expected one of: {allowed})")
    return resource_type
