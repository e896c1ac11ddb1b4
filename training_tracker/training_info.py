"""Training summaries built on top of :mod:`training_tracker.training_metrics`.

:func:`compute_training_info` dispatches on the activity type, evaluates the
matching speed and calorie formulas and returns a structured
:class:`TrainingInfo`. :func:`show_training_info` wraps it for callers that
only want the printable report and returns :data:`UNKNOWN_TRAINING_TYPE`
instead of raising when the label is not recognized.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .errors import UnknownTrainingTypeError
from .training_metrics import (
    compute_distance,
    compute_mean_speed,
    compute_running_calories,
    compute_swimming_calories,
    compute_swimming_mean_speed,
    compute_walking_calories,
)

logger = logging.getLogger(__name__)

UNKNOWN_TRAINING_TYPE = "unknown training type"


class TrainingType(Enum):
    RUNNING = "Running"
    WALKING = "Walking"
    SWIMMING = "Swimming"

    @classmethod
    def from_label(cls, label: Union[str, "TrainingType"]) -> Optional["TrainingType"]:
        """Return the member for ``label`` or ``None`` when it is not recognized.

        Matching is exact: ``"running"`` or ``" Running"`` are not accepted.
        """

        if isinstance(label, cls):
            return label
        try:
            return cls(label)
        except ValueError:
            return None


@dataclass(frozen=True)
class TrainingInputs:
    """Raw workout inputs for a single session."""

    action_count: int
    training_type: str
    duration_h: float
    weight_kg: float
    height_cm: float
    # Swimming only.
    pool_length_m: int = 0
    pool_count: int = 0


@dataclass(frozen=True)
class TrainingInfo:
    """Derived metrics for one session."""

    training_type: TrainingType
    duration_h: float
    distance_km: float
    speed_kmh: float
    calories: float

    def message(self) -> str:
        return (
            f"Training type: {self.training_type.value}\n"
            f"Duration: {self.duration_h:.2f} h.\n"
            f"Distance: {self.distance_km:.2f} km.\n"
            f"Speed: {self.speed_kmh:.2f} km/h\n"
            f"Calories burned: {self.calories:.2f}\n"
        )


def compute_training_info(
    action_count: int,
    training_type: Union[str, TrainingType],
    duration_h: float,
    weight_kg: float,
    height_cm: float,
    pool_length_m: int = 0,
    pool_count: int = 0,
) -> TrainingInfo:
    """Compute distance, speed and calories for one session.

    Distance always comes from the action count. Running and walking derive
    speed from that distance; swimming uses the pool length and lap count
    instead.

    Raises
    ------
    UnknownTrainingTypeError
        If ``training_type`` is not one of the :class:`TrainingType` labels.
    InvalidTrainingInputError
        If a walking session is given a non-positive height.
    """

    kind = TrainingType.from_label(training_type)
    if kind is None:
        raise UnknownTrainingTypeError(training_type)

    distance = compute_distance(action_count)
    if kind is TrainingType.RUNNING:
        speed = compute_mean_speed(action_count, distance, duration_h)
        calories = compute_running_calories(speed, duration_h, weight_kg)
    elif kind is TrainingType.WALKING:
        speed = compute_mean_speed(action_count, distance, duration_h)
        calories = compute_walking_calories(speed, duration_h, weight_kg, height_cm)
    else:
        speed = compute_swimming_mean_speed(pool_length_m, pool_count, duration_h)
        calories = compute_swimming_calories(speed, duration_h, weight_kg)

    logger.debug(
        "%s: distance=%.3f km speed=%.3f km/h calories=%.3f",
        kind.value,
        distance,
        speed,
        calories,
    )
    return TrainingInfo(
        training_type=kind,
        duration_h=float(duration_h),
        distance_km=distance,
        speed_kmh=speed,
        calories=calories,
    )


def show_training_info(
    action_count: int,
    training_type: Union[str, TrainingType],
    duration_h: float,
    weight_kg: float,
    height_cm: float,
    pool_length_m: int = 0,
    pool_count: int = 0,
) -> str:
    """Return the printable training report.

    Unrecognized training types produce :data:`UNKNOWN_TRAINING_TYPE` rather
    than an exception, whatever the other inputs are.
    """

    try:
        info = compute_training_info(
            action_count,
            training_type,
            duration_h,
            weight_kg,
            height_cm,
            pool_length_m,
            pool_count,
        )
    except UnknownTrainingTypeError as exc:
        logger.warning("%s", exc)
        return UNKNOWN_TRAINING_TYPE
    return info.message()


def show_training_info_from_inputs(inputs: TrainingInputs) -> str:
    """Return the printable training report for a :class:`TrainingInputs`."""

    return show_training_info(
        inputs.action_count,
        inputs.training_type,
        inputs.duration_h,
        inputs.weight_kg,
        inputs.height_cm,
        inputs.pool_length_m,
        inputs.pool_count,
    )
