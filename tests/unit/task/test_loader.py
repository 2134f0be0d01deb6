"""Unit tests for task and task modifier document loading."""

from __future__ import annotations

import pytest

from taskbind.task.loader import (
    DOCUMENT_REASON_MISSING,
    DOCUMENT_REASON_PARSE_ERROR,
    DOCUMENT_REASON_SCHEMA_INVALID,
    DocumentError,
    load_task_modifier,
    load_task_spec,
)
from taskbind.task.types import Volume


def test_load_task_spec_from_yaml(write_doc) -> None:
    path = write_doc(
        "task.yaml",
        """
        steps:
          - name: build
            image: golang
        volumes:
          - name: ws
            emptyDir: {}
        resources:
          inputs:
            - name: source
              type: git
          outputs:
            - name: bucket
              type: storage
              targetPath: out
        """,
    )

    spec = load_task_spec(path)

    assert spec.step_names() == ["build"]
    assert spec.volumes == [Volume("ws", {"emptyDir": {}})]
    assert [d.name for d in spec.resources.outputs] == ["bucket"]


def test_load_task_spec_from_json(write_doc) -> None:
    path = write_doc("task.json", '{"steps": [{"name": "a"}]}')
    assert load_task_spec(path).step_names() == ["a"]


def test_missing_document(tmp_path) -> None:
    with pytest.raises(DocumentError) as excinfo:
        load_task_spec(tmp_path / "nope.yaml")
    assert excinfo.value.reason_code == DOCUMENT_REASON_MISSING


def test_unparseable_document(write_doc) -> None:
    path = write_doc("task.yaml", "steps: [unclosed\n")
    with pytest.raises(DocumentError) as excinfo:
        load_task_spec(path)
    assert excinfo.value.reason_code == DOCUMENT_REASON_PARSE_ERROR


def test_non_mapping_document(write_doc) -> None:
    path = write_doc("task.yaml", "- just\n- a list\n")
    with pytest.raises(DocumentError) as excinfo:
        load_task_spec(path)
    assert excinfo.value.reason_code == DOCUMENT_REASON_PARSE_ERROR


def test_schema_rejects_unknown_resource_type(write_doc) -> None:
    path = write_doc(
        "task.yaml",
        """
        steps: []
        resources:
          inputs:
            - name: site
              type: ftp
        """,
    )
    with pytest.raises(DocumentError) as excinfo:
        load_task_spec(path)
    assert excinfo.value.reason_code == DOCUMENT_REASON_SCHEMA_INVALID
    assert "resources.inputs.0.type" in str(excinfo.value)


def test_schema_rejects_step_without_name(write_doc) -> None:
    path = write_doc("task.yaml", "steps:\n  - image: busybox\n")
    with pytest.raises(DocumentError) as excinfo:
        load_task_spec(path)
    assert excinfo.value.reason_code == DOCUMENT_REASON_SCHEMA_INVALID


def test_load_task_modifier(write_doc) -> None:
    path = write_doc(
        "git.yaml",
        """
        stepsToPrepend:
          - name: git-source
            image: git-init
            args: ["-url", "https://example.com/repo.git"]
        stepsToAppend: []
        volumes:
          - name: creds
            secret:
              secretName: git-creds
        """,
    )

    modifier = load_task_modifier(path)

    assert [s.name for s in modifier.get_steps_to_prepend()] == ["git-source"]
    assert modifier.get_steps_to_append() == []
    assert modifier.get_volumes() == [Volume("creds", {"secret": {"secretName": "git-creds"}})]


def test_empty_modifier_document(write_doc) -> None:
    modifier = load_task_modifier(write_doc("empty.yaml", ""))
    assert modifier.get_steps_to_prepend() == []
    assert modifier.get_volumes() == []


def test_modifier_schema_rejects_unknown_keys(write_doc) -> None:
    path = write_doc("bad.yaml", "stepsToInsert: []\n")
    with pytest.raises(DocumentError) as excinfo:
        load_task_modifier(path)
    assert excinfo.value.reason_code == DOCUMENT_REASON_SCHEMA_INVALID


def test_modifier_schema_rejects_string_command(write_doc) -> None:
    path = write_doc(
        "fetch.yaml",
        """
        stepsToPrepend:
          - name: fetch
            command: git clone
        """,
    )
    with pytest.raises(DocumentError) as excinfo:
        load_task_modifier(path)
    assert excinfo.value.reason_code == DOCUMENT_REASON_SCHEMA_INVALID
    assert "stepsToPrepend.0.command" in str(excinfo.value)


def test_task_schema_rejects_env_mapping(write_doc) -> None:
    path = write_doc("task.yaml", "steps:\n  - name: s\n    env:\n      A: '1'\n")
    with pytest.raises(DocumentError) as excinfo:
        load_task_spec(path)
    assert excinfo.value.reason_code == DOCUMENT_REASON_SCHEMA_INVALID


def test_modifier_step_env_keeps_value_from(write_doc) -> None:
    path = write_doc(
        "storage.yaml",
        """
        stepsToAppend:
          - name: upload
            env:
              - name: KEY
                valueFrom:
                  secretKeyRef: {name: sa, key: json}
        """,
    )
    step = load_task_modifier(path).get_steps_to_append()[0]
    assert step.to_dict()["env"] == [
        {"name": "KEY", "valueFrom": {"secretKeyRef": {"name": "sa", "key": "json"}}}
    ]
