"""Exceptions raised by the training tracker."""

from __future__ import annotations


class TrainingTrackerError(Exception):
    """Base class for all training tracker failures."""


class InvalidTrainingInputError(TrainingTrackerError, ValueError):
    """Raised when a workout input cannot be used by a calorie formula."""


class UnknownTrainingTypeError(TrainingTrackerError, ValueError):
    """Raised when a training label does not name a supported activity."""

    def __init__(self, label: object) -> None:
        super().__init__(f"Unknown training type: {label!r}")
        self.label = label


class FitFileError(TrainingTrackerError):
    """Raised when a FIT file lacks the messages needed for a summary."""
