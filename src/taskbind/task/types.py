"""Type definitions for task specifications."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from taskbind.resources.declaration import TaskResources

_STEP_KEYS = ("name", "image", "command", "args", "workingDir", "env", "volumeMounts")


@dataclass
class VolumeMount:
    """A volume made visible to a step."""

    name: str
    mount_path: str
    read_only: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VolumeMount:
        return cls(
            name=str(data["name"]),
            mount_path=str(data["mountPath"]),
            read_only=bool(data.get("readOnly", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name, "mountPath": self.mount_path}
        if self.read_only:
            payload["readOnly"] = True
        return payload


@dataclass
class Step:
    """One execution unit of a task, identified by name.

    ``env`` keeps the authored list of entries (``value`` or ``valueFrom``)
    in order. ``extra`` holds document keys with no field of their own.
    """

    name: str
    image: str = ""
    command: list[str] = field(default_factory=list)
    args: list[str] = field(default_factory=list)
    working_dir: str | None = None
    env: list[dict[str, Any]] = field(default_factory=list)
    volume_mounts: list[VolumeMount] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Step:
        return cls(
            name=str(data["name"]),
            image=str(data.get("image", "")),
            command=[str(c) for c in data.get("command") or []],
            args=[str(a) for a in data.get("args") or []],
            working_dir=data.get("workingDir"),
            env=copy.deepcopy(list(data.get("env") or [])),
            volume_mounts=[VolumeMount.from_dict(m) for m in data.get("volumeMounts") or []],
            extra={k: copy.deepcopy(v) for k, v in data.items() if k not in _STEP_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name}
        if self.image:
            payload["image"] = self.image
        if self.command:
            payload["command"] = list(self.command)
        if self.args:
            payload["args"] = list(self.args)
        if self.working_dir:
            payload["workingDir"] = self.working_dir
        if self.env:
            payload["env"] = copy.deepcopy(self.env)
        if self.volume_mounts:
            payload["volumeMounts"] = [m.to_dict() for m in self.volume_mounts]
        payload.update(copy.deepcopy(self.extra))
        return payload


@dataclass
class Volume:
    """A named volume attached to the task pod.

    ``source`` is the volume payload (``{"configMap": {...}}``,
    ``{"secret": {...}}``, ``{"emptyDir": {}}``...). It is compared
    structurally and never interpreted.
    """

    name: str
    source: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Volume:
        return cls(
            name=str(data["name"]),
            source={k: copy.deepcopy(v) for k, v in data.items() if k != "name"},
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name}
        payload.update(copy.deepcopy(self.source))
        return payload


@dataclass
class TaskSpec:
    """A task being amended: ordered steps, named volumes and declared resources."""

    steps: list[Step] = field(default_factory=list)
    volumes: list[Volume] = field(default_factory=list)
    resources: TaskResources = field(default_factory=TaskResources)

    def step_names(self) -> list[str]:
        return [step.name for step in self.steps]

    def volume_names(self) -> list[str]:
        return [volume.name for volume in self.volumes]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TaskSpec:
        return cls(
            steps=[Step.from_dict(s) for s in data.get("steps") or []],
            volumes=[Volume.from_dict(v) for v in data.get("volumes") or []],
            resources=TaskResources.from_dict(data.get("resources")),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"steps": [s.to_dict() for s in self.steps]}
        if self.volumes:
            payload["volumes"] = [v.to_dict() for v in self.volumes]
        if not self.resources.is_empty():
            payload["resources"] = self.resources.to_dict()
        return payload
