"""Unit tests for resource declarations and task resource sets."""

from __future__ import annotations

import dataclasses

import pytest

from taskbind.resources.declaration import ResourceDeclaration, TaskResources
from taskbind.resources.types import ResourceType


def test_default_target_path_uses_name() -> None:
    declaration = ResourceDeclaration(name="source", type=ResourceType.GIT)
    assert declaration.effective_target_path() == "/workspace/source"


def test_relative_target_path_is_under_workspace() -> None:
    declaration = ResourceDeclaration(name="source", type=ResourceType.GIT, target_path="src/app")
    assert declaration.effective_target_path() == "/workspace/src/app"
    assert declaration.effective_target_path("/ws") == "/ws/src/app"


def test_absolute_target_path_is_kept() -> None:
    declaration = ResourceDeclaration(name="out", type=ResourceType.STORAGE, target_path="/data/out")
    assert declaration.effective_target_path() == "/data/out"


def test_declaration_is_immutable() -> None:
    declaration = ResourceDeclaration(name="source", type=ResourceType.GIT)
    with pytest.raises(dataclasses.FrozenInstanceError):
        declaration.name = "other"  # type: ignore[misc]


def test_declaration_from_dict_and_to_dict() -> None:
    declaration = ResourceDeclaration.from_dict(
        {"name": "builder", "type": "image", "targetPath": "img"}
    )
    assert declaration == ResourceDeclaration("builder", ResourceType.IMAGE, "img")
    assert declaration.to_dict() == {"name": "builder", "type": "image", "targetPath": "img"}

    bare = ResourceDeclaration.from_dict({"name": "repo", "type": "git"})
    assert bare.target_path is None
    assert bare.to_dict() == {"name": "repo", "type": "git"}


def test_declaration_from_dict_rejects_unknown_type() -> None:
    with pytest.raises(ValueError, match="unknown resource type"):
        ResourceDeclaration.from_dict({"name": "x", "type": "ftp"})


def test_task_resources_from_dict_preserves_order() -> None:
    resources = TaskResources.from_dict(
        {
            "inputs": [{"name": "b", "type": "git"}, {"name": "a", "type": "storage"}],
            "outputs": [{"name": "report", "type": "storage"}],
        }
    )
    assert [d.name for d in resources.inputs] == ["b", "a"]
    assert [d.name for d in resources.outputs] == ["report"]
    assert not resources.is_empty()


def test_task_resources_empty() -> None:
    assert TaskResources.from_dict(None).is_empty()
    assert TaskResources.from_dict({"inputs": []}).to_dict() == {}
