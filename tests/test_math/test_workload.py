"""Tests for NASA-TLX workload aggregation."""

from __future__ import annotations

import pytest

from health_engine.math.workload import (
    calculate_overall_score,
    calculate_raw_tlx,
    resolve_overall_score,
)
from health_engine.models.workload import WorkloadAssessment


class TestOverallScore:
    def test_weighted_mean(self, balanced_workload: WorkloadAssessment) -> None:
        assert calculate_overall_score(balanced_workload) == pytest.approx(950 / 15)

    def test_only_weighted_dimensions_count(self) -> None:
        assessment = WorkloadAssessment(
            mental_rating=80, mental_weight=5, physical_rating=20, physical_weight=1,
            temporal_rating=100,
        )
        assert calculate_overall_score(assessment) == pytest.approx(70.0)

    def test_missing_rating_counts_as_zero(self) -> None:
        assessment = WorkloadAssessment(mental_rating=90, mental_weight=3, physical_weight=3)
        assert calculate_overall_score(assessment) == pytest.approx(45.0)

    def test_all_weights_zero_returns_none(self) -> None:
        assessment = WorkloadAssessment(mental_rating=90, physical_rating=40)
        assert calculate_overall_score(assessment) is None

    def test_uniform_ratings(self) -> None:
        assessment = WorkloadAssessment(
            mental_rating=50, physical_rating=50, temporal_rating=50,
            performance_rating=50, effort_rating=50, frustration_rating=50,
            mental_weight=1, physical_weight=2, temporal_weight=3,
            performance_weight=4, effort_weight=5, frustration_weight=0,
        )
        assert calculate_overall_score(assessment) == pytest.approx(50.0)


class TestRawTlx:
    def test_mean_of_answered(self) -> None:
        assessment = WorkloadAssessment(mental_rating=80, physical_rating=20)
        assert calculate_raw_tlx(assessment) == pytest.approx(50.0)

    def test_no_ratings(self) -> None:
        assert calculate_raw_tlx(WorkloadAssessment()) is None


class TestResolveOverallScore:
    def test_stored_score_wins(self) -> None:
        stored = WorkloadAssessment(mental_rating=10, mental_weight=5, overall_score=62.5)
        assert resolve_overall_score(stored) == 62.5

    def test_falls_back_to_weighted(self, balanced_workload: WorkloadAssessment) -> None:
        assert resolve_overall_score(balanced_workload) == pytest.approx(950 / 15)

    def test_none_assessment(self) -> None:
        assert resolve_overall_score(None) is None
