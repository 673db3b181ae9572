"""Tests for BMI calculation and WHO classification."""

from __future__ import annotations

import pytest

from health_engine.math.bmi import classify_bmi, compute_bmi
from health_engine.models.enums import BmiClass


class TestComputeBmi:
    def test_normal_weight_pilot(self) -> None:
        result = compute_bmi(70, 1.75)
        assert result.bmi == 22.86
        assert result.classification == BmiClass.NORMAL
        assert result.classification == "Normal weight"

    def test_missing_weight(self) -> None:
        result = compute_bmi(None, 1.75)
        assert result.bmi is None
        assert result.classification == BmiClass.INSUFFICIENT_DATA
        assert result.classification == "Insufficient data"

    def test_missing_height(self) -> None:
        result = compute_bmi(70, None)
        assert result.bmi is None
        assert result.classification == BmiClass.INSUFFICIENT_DATA

    def test_zero_height_guards_division(self) -> None:
        result = compute_bmi(50, 0)
        assert result.bmi is None
        assert result.classification == BmiClass.INSUFFICIENT_DATA

    def test_negative_height(self) -> None:
        assert compute_bmi(50, -1.7).bmi is None

    def test_zero_weight_counts_as_missing(self) -> None:
        assert compute_bmi(0, 1.75).classification == BmiClass.INSUFFICIENT_DATA

    def test_nan_and_infinity_count_as_missing(self) -> None:
        assert compute_bmi(float("nan"), 1.75).classification == BmiClass.INSUFFICIENT_DATA
        assert compute_bmi(70, float("nan")).bmi is None
        assert compute_bmi(float("inf"), 1.75).classification == BmiClass.INSUFFICIENT_DATA

    def test_rounded_to_two_decimals(self) -> None:
        # 82 / 1.81² = 25.0297...
        result = compute_bmi(82, 1.81)
        assert result.bmi == 25.03
        assert result.classification == BmiClass.OVERWEIGHT

    def test_insufficient_data_pt_br_label(self) -> None:
        assert compute_bmi(None, None).classification.label("pt_BR") == "Dados insuficientes"

    def test_idempotent(self) -> None:
        assert compute_bmi(91.3, 1.82) == compute_bmi(91.3, 1.82)


class TestClassifyBmi:
    @pytest.mark.parametrize(
        "bmi, expected",
        [
            (16.0, BmiClass.UNDERWEIGHT),
            (18.49, BmiClass.UNDERWEIGHT),
            (18.5, BmiClass.NORMAL),
            (24.99, BmiClass.NORMAL),
            (25.0, BmiClass.OVERWEIGHT),
            (30.0, BmiClass.OBESITY_I),
            (35.0, BmiClass.OBESITY_II),
            (39.99, BmiClass.OBESITY_II),
            (40.0, BmiClass.OBESITY_III),
            (52.0, BmiClass.OBESITY_III),
        ],
    )
    def test_band_boundaries(self, bmi: float, expected: BmiClass) -> None:
        assert classify_bmi(bmi) == expected

    def test_lower_bound_inclusive_through_compute(self) -> None:
        assert compute_bmi(18.5, 1.0).classification == BmiClass.NORMAL
        assert compute_bmi(25.0, 1.0).classification == BmiClass.OVERWEIGHT
