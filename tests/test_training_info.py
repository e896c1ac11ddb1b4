"""
Tests for the training summary dispatch and report formatting.
"""
import pytest

from training_tracker.errors import UnknownTrainingTypeError
from training_tracker.training_info import (
    UNKNOWN_TRAINING_TYPE,
    TrainingInfo,
    TrainingInputs,
    TrainingType,
    compute_training_info,
    show_training_info,
    show_training_info_from_inputs,
)
from training_tracker.training_metrics import compute_walking_calories


class TestTrainingType:
    @pytest.mark.parametrize(
        "label, expected",
        [
            ("Running", TrainingType.RUNNING),
            ("Walking", TrainingType.WALKING),
            ("Swimming", TrainingType.SWIMMING),
        ],
    )
    def test_known_labels(self, label, expected):
        assert TrainingType.from_label(label) is expected

    @pytest.mark.parametrize("label", ["Unknown", "running", " Running", "", "Cycling"])
    def test_unrecognized_labels(self, label):
        assert TrainingType.from_label(label) is None

    def test_members_pass_through(self):
        assert TrainingType.from_label(TrainingType.WALKING) is TrainingType.WALKING


class TestComputeTrainingInfo:
    def test_running(self):
        info = compute_training_info(9000, "Running", 1.0, 75.0, 180.0, 0, 0)
        assert info.training_type is TrainingType.RUNNING
        assert info.distance_km == pytest.approx(5.85)
        assert info.speed_kmh == pytest.approx(5.85)
        assert info.calories == pytest.approx(18 * 5.85 * 1.79 * 75.0 / 1000 * 60)

    def test_walking_uses_height(self):
        info = compute_training_info(9000, "Walking", 1.0, 75.0, 180.0)
        assert info.calories == pytest.approx(
            compute_walking_calories(5.85, 1.0, 75.0, 180.0)
        )

    def test_swimming_speed_comes_from_pool(self):
        info = compute_training_info(1000, TrainingType.SWIMMING, 1.0, 70.0, 175.0, 25, 40)
        assert info.distance_km == pytest.approx(0.65)
        assert info.speed_kmh == pytest.approx(1.0)
        assert info.calories == pytest.approx((1.0 + 1.1) * 2 * 70.0 * 1.0)

    def test_zero_duration_has_zero_speed(self):
        info = compute_training_info(9000, "Running", 0.0, 75.0, 180.0)
        assert info.speed_kmh == 0.0
        assert info.calories == 0.0

    def test_unknown_type_raises(self):
        with pytest.raises(UnknownTrainingTypeError) as excinfo:
            compute_training_info(9000, "Yoga", 1.0, 75.0, 180.0)
        assert excinfo.value.label == "Yoga"


class TestShowTrainingInfo:
    def test_running_report_contains_distance(self):
        report = show_training_info(9000, "Running", 1.0, 75.0, 180.0, 0, 0)
        assert "Distance: 5.85 km." in report

    def test_swimming_report_layout(self):
        report = show_training_info(1000, "Swimming", 1.0, 70.0, 175.0, 25, 40)
        assert report == (
            "Training type: Swimming\n"
            "Duration: 1.00 h.\n"
            "Distance: 0.65 km.\n"
            "Speed: 1.00 km/h\n"
            "Calories burned: 294.00\n"
        )

    def test_walking_report_rounds_to_two_places(self):
        report = show_training_info(9000, "Walking", 1.5, 75.0, 180.0)
        lines = report.splitlines()
        assert lines[0] == "Training type: Walking"
        assert lines[1] == "Duration: 1.50 h."
        assert lines[3] == "Speed: 3.90 km/h"

    @pytest.mark.parametrize(
        "args",
        [
            (9000, "Unknown", 1.0, 75.0, 180.0, 0, 0),
            (0, "Unknown", 0.0, 0.0, 0.0, 0, 0),
            (-5, "walking", -1.0, -75.0, -180.0, -1, -1),
        ],
    )
    def test_unknown_type_returns_sentinel(self, args):
        assert show_training_info(*args) == UNKNOWN_TRAINING_TYPE == "unknown training type"

    def test_report_is_deterministic(self):
        args = (7321, "Running", 0.83, 68.4, 172.0, 0, 0)
        assert show_training_info(*args) == show_training_info(*args)

    def test_from_inputs(self):
        inputs = TrainingInputs(
            action_count=1000,
            training_type="Swimming",
            duration_h=1.0,
            weight_kg=70.0,
            height_cm=175.0,
            pool_length_m=25,
            pool_count=40,
        )
        assert show_training_info_from_inputs(inputs) == show_training_info(
            1000, "Swimming", 1.0, 70.0, 175.0, 25, 40
        )


def test_message_template():
    info = TrainingInfo(
        training_type=TrainingType.RUNNING,
        duration_h=0.5,
        distance_km=3.0,
        speed_kmh=6.0,
        calories=123.456,
    )
    assert info.message().endswith("Calories burned: 123.46\n")
