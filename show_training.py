"""Command line utility for summarizing running, walking and swimming sessions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from training_tracker.arguments import build_argument_parser
from training_tracker.errors import UnknownTrainingTypeError
from training_tracker.fit_parser import read_training_inputs
from training_tracker.logging_config import setup_logging
from training_tracker.training_info import (
    UNKNOWN_TRAINING_TYPE,
    TrainingInfo,
    TrainingInputs,
    TrainingType,
    compute_training_info,
    show_training_info_from_inputs,
)
from training_tracker.training_metrics import (
    compute_running_calories,
    compute_swimming_calories,
    compute_walking_calories,
)

logger = logging.getLogger(__name__)

TIMELINE_SAMPLES = 100


def session_timeline(
    info: TrainingInfo, weight_kg: float, height_cm: float, samples: int = TIMELINE_SAMPLES
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return elapsed hours with cumulative distance and calories at each point.

    The session is assumed to be covered at a constant pace, so the calorie
    formulas are evaluated on the whole elapsed-time grid at once. Distance
    grows linearly up to the reported ``distance_km``.
    """

    elapsed = np.linspace(0.0, info.duration_h, samples)
    if info.duration_h > 0:
        distance = info.distance_km * elapsed / info.duration_h
    else:
        distance = np.zeros_like(elapsed)
    if info.training_type is TrainingType.RUNNING:
        calories = compute_running_calories(info.speed_kmh, elapsed, weight_kg)
    elif info.training_type is TrainingType.WALKING:
        calories = compute_walking_calories(info.speed_kmh, elapsed, weight_kg, height_cm)
    else:
        calories = compute_swimming_calories(info.speed_kmh, elapsed, weight_kg)
    return elapsed, distance, np.asarray(calories, dtype=float)


def _plot_session(inputs: TrainingInputs, info: TrainingInfo):
    elapsed, distance, calories = session_timeline(
        info, weight_kg=inputs.weight_kg, height_cm=inputs.height_cm
    )

    fig, (distance_ax, calories_ax) = plt.subplots(2, 1, figsize=(10, 6), sharex=True)
    fig.suptitle(f"{info.training_type.value} session", fontsize=14)

    distance_ax.plot(elapsed, distance, color="tab:blue", linewidth=2)
    distance_ax.set_ylabel("Distance (km)")
    distance_ax.grid(True)

    calories_ax.plot(elapsed, calories, color="tab:red", linewidth=2)
    calories_ax.set_ylabel("Calories burned")
    calories_ax.set_xlabel("Elapsed time (h)")
    calories_ax.grid(True)

    fig.tight_layout(rect=[0, 0.03, 1, 0.95])
    return fig


def _inputs_from_args(args) -> TrainingInputs:
    if args.fit_file is not None:
        if not args.fit_file.exists():
            raise FileNotFoundError(f"FIT file not found: {args.fit_file}")
        return read_training_inputs(
            args.fit_file, weight_kg=args.weight, height_cm=args.height
        )

    if args.training_type is None:
        raise ValueError("--training_type is required without --fit_file")
    if args.weight is None or args.height is None:
        raise ValueError("--weight and --height are required without --fit_file")

    return TrainingInputs(
        action_count=args.action,
        training_type=args.training_type,
        duration_h=args.duration,
        weight_kg=args.weight,
        height_cm=args.height,
        pool_length_m=args.pool_length,
        pool_count=args.pool_count,
    )


def _validate_inputs(inputs: TrainingInputs) -> None:
    if inputs.action_count < 0:
        raise ValueError("--action must be non-negative")
    if inputs.duration_h < 0:
        raise ValueError("--duration must be non-negative")
    if inputs.weight_kg <= 0:
        raise ValueError("--weight must be positive (in kilograms)")
    if inputs.height_cm <= 0:
        raise ValueError("--height must be positive (in centimeters)")
    if inputs.pool_length_m < 0 or inputs.pool_count < 0:
        raise ValueError("--pool_length and --pool_count must be non-negative")


def run(args) -> str:
    """Print the training report for parsed arguments and optionally plot it."""

    try:
        inputs = _inputs_from_args(args)
    except UnknownTrainingTypeError as exc:
        logger.warning("%s", exc)
        print(UNKNOWN_TRAINING_TYPE, end="")
        return UNKNOWN_TRAINING_TYPE
    _validate_inputs(inputs)

    report = show_training_info_from_inputs(inputs)
    print(report, end="")

    if not args.plot:
        return report

    try:
        info = compute_training_info(
            inputs.action_count,
            inputs.training_type,
            inputs.duration_h,
            inputs.weight_kg,
            inputs.height_cm,
            inputs.pool_length_m,
            inputs.pool_count,
        )
    except UnknownTrainingTypeError:
        logger.warning("Skipping plot for unrecognized training type")
        return report

    fig = _plot_session(inputs, info)
    output: Optional[Path] = args.output
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output, dpi=150)
        print(f"Saved session visualization to {output}")

    if not args.no_show and output is None:
        plt.show()
    else:
        plt.close(fig)
    return report


def main(argv=None) -> None:
    parser = build_argument_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    run(args)


if __name__ == "__main__":
    main()
