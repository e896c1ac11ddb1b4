"""Derived training metrics computed from raw workout inputs.

Every helper here is a closed-form expression over the constants below and
accepts either plain Python numbers or NumPy arrays. Arrays are broadcast
element-wise, which lets callers evaluate a whole session timeline in one
call (see ``show_training.py``); scalar inputs always come back as ``float``.

* ``compute_distance`` – distance in kilometers from a step or stroke count.
* ``compute_mean_speed`` / ``compute_swimming_mean_speed`` – average speed in
  km/h over the whole session, ``0`` when the duration is zero.
* ``compute_running_calories``, ``compute_walking_calories`` and
  ``compute_swimming_calories`` – activity specific calorie estimates.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from .errors import InvalidTrainingInputError

# Average step length in meters.
STEP_LENGTH_M = 0.65
M_IN_KM = 1000
MIN_IN_H = 60
# Multiplier converting km/h into m/s.
KMH_IN_MSEC = 0.278
CM_IN_M = 100

RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER = 18
# Average calories burned while running.
RUNNING_CALORIES_MEAN_SPEED_SHIFT = 1.79

WALKING_CALORIES_WEIGHT_MULTIPLIER = 0.035
WALKING_SPEED_HEIGHT_MULTIPLIER = 0.029

# Average calories burned while swimming relative to speed.
SWIMMING_CALORIES_MEAN_SPEED_SHIFT = 1.1
SWIMMING_CALORIES_WEIGHT_MULTIPLIER = 2

Numeric = Union[float, int, np.ndarray]


def _as_result(value: np.ndarray) -> Numeric:
    """Return plain floats for scalar results and arrays otherwise."""

    if np.ndim(value) == 0:
        return float(value)
    return value


def _guarded_divide(numerator: Numeric, denominator: Numeric) -> Numeric:
    """Divide element-wise, yielding ``0`` wherever ``denominator`` is zero."""

    numerator, denominator = np.broadcast_arrays(
        np.asarray(numerator, dtype=float), np.asarray(denominator, dtype=float)
    )
    result = np.zeros_like(numerator)
    np.divide(numerator, denominator, out=result, where=denominator != 0)
    return _as_result(result)


def compute_distance(action_count: Numeric) -> Numeric:
    """Return the distance in kilometers covered by ``action_count`` actions.

    One action is a step when running or walking and a stroke when swimming.
    """

    distance = np.asarray(action_count, dtype=float) * STEP_LENGTH_M / M_IN_KM
    return _as_result(distance)


def compute_mean_speed(
    action_count: Numeric, distance_km: Numeric, duration_h: Numeric
) -> Numeric:
    """Return the mean speed in km/h over a land session.

    Parameters
    ----------
    action_count:
        Number of steps taken. Kept so every speed helper shares the same
        call shape; the speed only depends on distance and duration.
    distance_km:
        Distance covered, typically from :func:`compute_distance`.
    duration_h:
        Session length in hours. A zero duration yields a speed of ``0``
        instead of a division error.
    """

    return _guarded_divide(distance_km, duration_h)


def compute_swimming_mean_speed(
    pool_length_m: Numeric, pool_count: Numeric, duration_h: Numeric
) -> Numeric:
    """Return the mean swimming speed in km/h from pool length and lap count.

    ``0`` is returned when ``duration_h`` is zero.
    """

    distance_km = (
        np.asarray(pool_length_m, dtype=float)
        * np.asarray(pool_count, dtype=float)
        / M_IN_KM
    )
    return _guarded_divide(distance_km, duration_h)


def compute_running_calories(
    speed_kmh: Numeric, duration_h: Numeric, weight_kg: Numeric
) -> Numeric:
    """Return the calories burned while running.

    Inputs are not validated; zero or negative values propagate through the
    formula unchanged.
    """

    speed = np.asarray(speed_kmh, dtype=float)
    calories = (
        (RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER * speed * RUNNING_CALORIES_MEAN_SPEED_SHIFT)
        * np.asarray(weight_kg, dtype=float)
        / M_IN_KM
        * np.asarray(duration_h, dtype=float)
        * MIN_IN_H
    )
    return _as_result(calories)


def compute_walking_calories(
    speed_kmh: Numeric, duration_h: Numeric, weight_kg: Numeric, height_cm: Numeric
) -> Numeric:
    """Return the calories burned while walking.

    The formula combines a weight term with the squared speed in m/s scaled
    by body height::

        (0.035 * weight + ((speed / 0.278) ** 2 / height) * 0.029) * duration * 60

    Raises
    ------
    InvalidTrainingInputError
        If any ``height_cm`` value is not positive.
    """

    height = np.asarray(height_cm, dtype=float)
    if np.any(height <= 0):
        raise InvalidTrainingInputError("height_cm must be positive")

    speed_ms = np.asarray(speed_kmh, dtype=float) / KMH_IN_MSEC
    calories = (
        WALKING_CALORIES_WEIGHT_MULTIPLIER * np.asarray(weight_kg, dtype=float)
        + (np.power(speed_ms, 2) / height) * WALKING_SPEED_HEIGHT_MULTIPLIER
    ) * np.asarray(duration_h, dtype=float) * MIN_IN_H
    return _as_result(calories)


def compute_swimming_calories(
    speed_kmh: Numeric, duration_h: Numeric, weight_kg: Numeric
) -> Numeric:
    """Return the calories burned while swimming."""

    calories = (
        (np.asarray(speed_kmh, dtype=float) + SWIMMING_CALORIES_MEAN_SPEED_SHIFT)
        * SWIMMING_CALORIES_WEIGHT_MULTIPLIER
        * np.asarray(weight_kg, dtype=float)
        * np.asarray(duration_h, dtype=float)
    )
    return _as_result(calories)
