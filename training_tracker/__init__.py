"""Utilities for summarizing running, walking and swimming sessions.

The package exposes the distance, speed and calorie formulas, the training
summary built from them, and a reader that turns a Garmin FIT activity into
summary inputs.
"""

from .errors import (
    FitFileError,
    InvalidTrainingInputError,
    TrainingTrackerError,
    UnknownTrainingTypeError,
)
from .training_metrics import (
    compute_distance,
    compute_mean_speed,
    compute_running_calories,
    compute_swimming_calories,
    compute_swimming_mean_speed,
    compute_walking_calories,
)
from .training_info import (
    UNKNOWN_TRAINING_TYPE,
    TrainingInfo,
    TrainingInputs,
    TrainingType,
    compute_training_info,
    show_training_info,
    show_training_info_from_inputs,
)
from .fit_parser import read_training_inputs

__all__ = [
    "FitFileError",
    "InvalidTrainingInputError",
    "TrainingInfo",
    "TrainingInputs",
    "TrainingTrackerError",
    "TrainingType",
    "UNKNOWN_TRAINING_TYPE",
    "UnknownTrainingTypeError",
    "compute_distance",
    "compute_mean_speed",
    "compute_running_calories",
    "compute_swimming_calories",
    "compute_swimming_mean_speed",
    "compute_training_info",
    "compute_walking_calories",
    "read_training_inputs",
    "show_training_info",
    "show_training_info_from_inputs",
]
