"""Resource declarations bound to a task as inputs and outputs."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import Any

from taskbind.resources.types import ResourceType, parse_resource_type

DEFAULT_WORKSPACE_ROOT = "/workspace"


@dataclass(frozen=True)
class ResourceDeclaration:
    """One named input or output binding on a task.

    The name is how steps refer to the resource. When the resource is an
    input, its contents are made available at ``effective_target_path()``;
    an input named ``source`` lands in ``/workspace/source`` unless
    ``target_path`` says otherwise.
    """

    name: str
    type: ResourceType
    target_path: str | None = None

    def effective_target_path(self, workspace_root: str = DEFAULT_WORKSPACE_ROOT) -> str:
        """Return the path the resource is copied to inside the workspace."""
        if not self.target_path:
            return posixpath.join(workspace_root, self.name)
        if posixpath.isabs(self.target_path):
            return self.target_path
        return posixpath.join(workspace_root, self.target_path)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResourceDeclaration:
        target_path = data.get("targetPath")
        return cls(
            name=str(data.get("name", "")),
            type=parse_resource_type(data.get("type")),
            target_path=str(target_path) if target_path else None,
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name, "type": self.type.value}
        if self.target_path:
            payload["targetPath"] = self.target_path
        return payload


@dataclass(frozen=True)
class TaskResources:
    """Input and output resources required by a task."""

    inputs: tuple[ResourceDeclaration, ...] = field(default_factory=tuple)
    outputs: tuple[ResourceDeclaration, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> TaskResources:
        data = data or {}
        return cls(
            inputs=tuple(ResourceDeclaration.from_dict(d) for d in data.get("inputs") or []),
            outputs=tuple(ResourceDeclaration.from_dict(d) for d in data.get("outputs") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.inputs:
            payload["inputs"] = [d.to_dict() for d in self.inputs]
        if self.outputs:
            payload["outputs"] = [d.to_dict() for d in self.outputs]
        return payload

    def is_empty(self) -> bool:
        return not self.inputs and not self.outputs
