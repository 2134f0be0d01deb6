"""Task specifications and the task modifier merge engine."""

from taskbind.task.errors import (
    ConflictingVolumeError,
    DuplicateStepNameError,
    TaskModifierError,
)
from taskbind.task.modifier import (
    InternalTaskModifier,
    TaskModifier,
    apply_task_modifier,
    apply_task_modifiers,
)
from taskbind.task.types import Step, TaskSpec, Volume, VolumeMount

__all__ = [
    "ConflictingVolumeError",
    "DuplicateStepNameError",
    "InternalTaskModifier",
    "Step",
    "TaskModifier",
    "TaskModifierError",
    "TaskSpec",
    "Volume",
    "VolumeMount",
    "apply_task_modifier",
    "apply_task_modifiers",
]
