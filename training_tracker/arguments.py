"""Command-line argument definitions for the training summary script.

The helpers centralize argument construction so flags stay consistent across
scripts and can be documented in one place.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .training_info import TrainingType


def build_argument_parser() -> argparse.ArgumentParser:
    """Construct the argument parser used by ``show_training.py``.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser ready for ``parse_args``.
    """

    parser = argparse.ArgumentParser(
        description=(
            "Print distance, mean speed and calories burned for a running, "
            "walking or swimming session, either from explicit values or from "
            "a Garmin FIT file."
        ),
    )

    parser.add_argument(
        "--fit_file",
        type=Path,
        help="Path to a .fit activity file to summarize instead of explicit values.",
    )
    parser.add_argument(
        "--training_type",
        type=str,
        help=(
            "Activity label: "
            + ", ".join(member.value for member in TrainingType)
            + ". Other labels print 'unknown training type'."
        ),
    )
    parser.add_argument(
        "--action",
        type=int,
        default=0,
        help="Number of steps (running, walking) or strokes (swimming).",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=0.0,
        help="Session duration in hours.",
    )
    parser.add_argument(
        "--weight",
        type=float,
        help=(
            "Body weight in kilograms. Overrides the FIT user profile when "
            "--fit_file is given."
        ),
    )
    parser.add_argument(
        "--height",
        type=float,
        help=(
            "Body height in centimeters. Overrides the FIT user profile when "
            "--fit_file is given."
        ),
    )
    parser.add_argument(
        "--pool_length",
        type=int,
        default=0,
        help="Pool length in meters (swimming only).",
    )
    parser.add_argument(
        "--pool_count",
        type=int,
        default=0,
        help="Number of pool lengths swum (swimming only).",
    )
    parser.add_argument(
        "--plot",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Plot cumulative distance and calories over the session.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path to save the plot instead of displaying it.",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not open the matplotlib window (useful for headless environments).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: LOG_LEVEL environment variable or INFO).",
    )

    return parser
