"""Errors raised while amending a task specification."""

from __future__ import annotations

DUPLICATE_STEP_NAME = "DUPLICATE_STEP_NAME"
CONFLICTING_VOLUME = "CONFLICTING_VOLUME"


class TaskModifierError(ValueError):
    """A task modifier cannot be applied to a task specification."""

    reason_code: str

    def __init__(self, message: str, reason_code: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.reason_code = reason_code
        self.detail = detail


class DuplicateStepNameError(TaskModifierError):
    """A contributed step has the same name as a step already in the task."""

    def __init__(self, step_name: str) -> None:
        super().__init__(f"Step {step_name} cannot be added again", DUPLICATE_STEP_NAME)
        self.step_name = step_name


class ConflictingVolumeError(TaskModifierError):
    """A contributed volume reuses a volume name with different contents."""

    def __init__(self, volume_name: str, detail: str | None = None) -> None:
        super().__init__(
            f"tried to add volume {volume_name} already added but with different contents",
            CONFLICTING_VOLUME,
            detail,
        )
        self.volume_name = volume_name
