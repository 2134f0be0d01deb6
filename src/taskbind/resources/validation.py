"""Validation of a task's declared input and output resources."""

from __future__ import annotations

from typing import TYPE_CHECKING

from taskbind.resources.types import is_valid_output_type, is_valid_type

if TYPE_CHECKING:
    from collections.abc import Iterable

    from taskbind.resources.declaration import ResourceDeclaration, TaskResources

REASON_MISSING_NAME = "MISSING_RESOURCE_NAME"
REASON_DUPLICATE_NAME = "DUPLICATE_RESOURCE_NAME"
REASON_INVALID_TYPE = "INVALID_RESOURCE_TYPE"
REASON_INVALID_OUTPUT_TYPE = "INVALID_OUTPUT_TYPE"


class ResourceValidationError(ValueError):
    """A task's resource declarations are not usable."""

    reason_code: str

    def __init__(self, message: str, reason_code: str) -> None:
        super().__init__(message)
        self.reason_code = reason_code


def _check_group(
    declarations: Iterable[ResourceDeclaration], group: str
) -> list[ResourceValidationError]:
    errors: list[ResourceValidationError] = []
    seen: set[str] = set()
    for index, declaration in enumerate(declarations):
        if not declaration.name:
            errors.append(
                ResourceValidationError(
                    f"resources.{group}[{index}]: name must be provided",
                    REASON_MISSING_NAME,
                )
            )
        elif declaration.name in seen:
            errors.append(
                ResourceValidationError(
                    f"resources.{group}: resource `{declaration.name}` declared more than once",
                    REASON_DUPLICATE_NAME,
                )
            )
        seen.add(declaration.name)

        if not is_valid_type(declaration.type):
            errors.append(
                ResourceValidationError(
                    f"resources.{group}.{declaration.name}: unknown type `{declaration.type}`",
                    REASON_INVALID_TYPE,
                )
            )
        elif group == "outputs" and not is_valid_output_type(declaration.type):
            errors.append(
                ResourceValidationError(
                    f"resources.outputs.{declaration.name}: type `{declaration.type}` "
                    "cannot be used as an output",
                    REASON_INVALID_OUTPUT_TYPE,
                )
            )
    return errors


def collect_resource_errors(resources: TaskResources) -> list[ResourceValidationError]:
    """Return every problem with the declared resources, inputs first."""
    return _check_group(resources.inputs, "inputs") + _check_group(resources.outputs, "outputs")


def validate_task_resources(resources: TaskResources) -> None:
    """Raise the first ResourceValidationError found, if any."""
    errors = collect_resource_errors(resources)
    if errors:
        raise errors[0]
