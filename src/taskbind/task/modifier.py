"""Task modifiers and the engine that merges them into a task specification."""

from __future__ import annotations

import difflib
import logging
import pprint
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from taskbind.task.errors import ConflictingVolumeError, DuplicateStepNameError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from taskbind.task.types import Step, TaskSpec, Volume

logger = logging.getLogger(__name__)


@runtime_checkable
class TaskModifier(Protocol):
    """Steps and volumes a bound resource contributes to a task."""

    def get_steps_to_prepend(self) -> Sequence[Step]:
        ...

    def get_steps_to_append(self) -> Sequence[Step]:
        ...

    def get_volumes(self) -> Sequence[Volume]:
        ...


@dataclass
class InternalTaskModifier:
    """TaskModifier over fixed lists supplied up front."""

    steps_to_prepend: list[Step] = field(default_factory=list)
    steps_to_append: list[Step] = field(default_factory=list)
    volumes: list[Volume] = field(default_factory=list)

    def get_steps_to_prepend(self) -> list[Step]:
        """Return the steps to prepend to the task."""
        return self.steps_to_prepend

    def get_steps_to_append(self) -> list[Step]:
        """Return the steps to append to the task."""
        return self.steps_to_append

    def get_volumes(self) -> list[Volume]:
        """Return the volumes to add to the task pod."""
        return self.volumes


def apply_task_modifier(spec: TaskSpec, modifier: TaskModifier) -> None:
    """Prepend, append and add the modifier's steps and volumes to spec in place.

    A step whose name is already used in ``spec`` raises
    DuplicateStepNameError. A volume identical to one already present is
    skipped; a volume reusing a name with different contents raises
    ConflictingVolumeError.

    Nothing is rolled back on error: when an appended step or a volume is
    rejected, the prepended steps (and any volumes accepted before it) stay
    in ``spec``.
    """
    steps = list(modifier.get_steps_to_prepend())
    for step in steps:
        _check_step_not_already_added(step, spec.steps)
    spec.steps = steps + spec.steps

    steps = list(modifier.get_steps_to_append())
    for step in steps:
        _check_step_not_already_added(step, spec.steps)
    spec.steps = spec.steps + steps

    for volume in modifier.get_volumes():
        already_added = False
        for existing in spec.volumes:
            if volume.name != existing.name:
                continue
            if volume != existing:
                raise ConflictingVolumeError(volume.name, _volume_diff(existing, volume))
            already_added = True
        if not already_added:
            spec.volumes.append(volume)

    logger.debug(
        "applied task modifier: steps=%s volumes=%s",
        spec.step_names(),
        spec.volume_names(),
    )


def apply_task_modifiers(spec: TaskSpec, modifiers: Iterable[TaskModifier]) -> None:
    """Apply modifiers to spec in order, stopping at the first error."""
    for index, modifier in enumerate(modifiers):
        logger.debug("applying task modifier #%d (%s)", index, type(modifier).__name__)
        apply_task_modifier(spec, modifier)


def _check_step_not_already_added(step: Step, steps: Iterable[Step]) -> None:
    for existing in steps:
        if step.name == existing.name:
            raise DuplicateStepNameError(existing.name)


def _volume_diff(existing: Volume, incoming: Volume) -> str:
    diff = difflib.unified_diff(
        pprint.pformat(existing.to_dict(), width=1).splitlines(),
        pprint.pformat(incoming.to_dict(), width=1).splitlines(),
        fromfile=f"volumes/{existing.name} (existing)",
        tofile=f"volumes/{incoming.name} (incoming)",
        lineterm="",
    )
    return "\n".join(diff)
