"""FIT file parsing utilities for running, walking and swimming activities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fitparse import FitFile

from .errors import FitFileError, InvalidTrainingInputError, UnknownTrainingTypeError
from .training_info import TrainingInputs, TrainingType
from .training_metrics import CM_IN_M

logger = logging.getLogger(__name__)

SECONDS_IN_H = 3600
# FIT running/walking strides count one foot, so each stride is two steps.
STEPS_PER_STRIDE = 2

_SPORT_TO_TRAINING_TYPE = {
    "running": TrainingType.RUNNING,
    "walking": TrainingType.WALKING,
    "swimming": TrainingType.SWIMMING,
}


def _safe_get(record, key):
    field = record.get(key)
    if field:
        return field.value
    return None


def _first_message_fields(fit: FitFile, name: str) -> Optional[dict]:
    for message in fit.get_messages(name):
        return {field.name: field for field in message}
    return None


def _first_present(fields: dict, *keys: str):
    for key in keys:
        value = _safe_get(fields, key)
        if value is not None:
            return value
    return None


def _training_type_for_sport(sport) -> TrainingType:
    training_type = _SPORT_TO_TRAINING_TYPE.get(str(sport).lower()) if sport else None
    if training_type is None:
        raise UnknownTrainingTypeError(sport)
    return training_type


def read_training_inputs(
    path: Path | str,
    *,
    weight_kg: float | None = None,
    height_cm: float | None = None,
) -> TrainingInputs:
    """Read the first session of a FIT activity into :class:`TrainingInputs`.

    Parameters
    ----------
    path:
        Path to a ``.fit`` activity file.
    weight_kg, height_cm:
        Optional overrides for the athlete's body metrics. When omitted the
        ``user_profile`` message is used; its height is stored in meters and
        converted to centimeters here.

    Returns
    -------
    TrainingInputs
        Steps (running, walking; twice the FIT stride count) or strokes
        (swimming) as the action count, timer duration in hours and, for
        swimming, pool length and the number of active lengths.

    Raises
    ------
    FitFileError
        If the file has no ``session`` message.
    UnknownTrainingTypeError
        If the session sport is not running, walking or swimming.
    InvalidTrainingInputError
        If body weight or height is neither supplied nor stored in the file.
    """

    fit_file = FitFile(str(path))
    fit_file.parse()

    session = _first_message_fields(fit_file, "session")
    if session is None:
        raise FitFileError(f"No session message found in {path}")
    profile = _first_message_fields(fit_file, "user_profile") or {}

    training_type = _training_type_for_sport(_safe_get(session, "sport"))

    timer_time = _safe_get(session, "total_timer_time")
    if timer_time is None:
        logger.warning("Session in %s has no timer time; assuming zero duration", path)
        timer_time = 0.0
    duration_h = float(timer_time) / SECONDS_IN_H

    pool_length_m = 0
    pool_count = 0
    if training_type is TrainingType.SWIMMING:
        action_count = _first_present(session, "total_strokes", "total_cycles")
        pool_length = _safe_get(session, "pool_length")
        lengths = _first_present(session, "num_active_lengths", "num_lengths")
        if pool_length is None or lengths is None:
            logger.warning("Swimming session in %s lacks pool data", path)
        pool_length_m = int(round(float(pool_length))) if pool_length is not None else 0
        pool_count = int(lengths) if lengths is not None else 0
    else:
        strides = _first_present(session, "total_strides", "total_cycles")
        action_count = strides * STEPS_PER_STRIDE if strides is not None else None

    if action_count is None:
        logger.warning("Session in %s has no step or stroke count", path)
        action_count = 0

    if weight_kg is None:
        weight_kg = _safe_get(profile, "weight")
    if height_cm is None:
        height_m = _safe_get(profile, "height")
        height_cm = float(height_m) * CM_IN_M if height_m is not None else None
    if weight_kg is None or height_cm is None:
        raise InvalidTrainingInputError(
            "weight and height are required when the FIT file has no user profile"
        )

    return TrainingInputs(
        action_count=int(action_count),
        training_type=training_type.value,
        duration_h=duration_h,
        weight_kg=float(weight_kg),
        height_cm=float(height_cm),
        pool_length_m=pool_length_m,
        pool_count=pool_count,
    )
