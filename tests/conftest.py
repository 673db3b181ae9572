"""Shared test fixtures: mock pilots, activity reports, workload assessments, raw rows."""

from __future__ import annotations

from typing import Any

import pytest

from health_engine.models.activity import ActivityReport
from health_engine.models.anthropometrics import AnthropometricInput
from health_engine.models.complaint import ComplaintAttributes, ComplaintRecord
from health_engine.models.workload import WorkloadAssessment


@pytest.fixture
def very_active_report() -> ActivityReport:
    """3 vigorous days × 90 min → 2160 MET-min, enough for VERY_ACTIVE."""
    return ActivityReport(
        vigorous_days=3,
        vigorous_minutes=90,
        moderate_days=0,
        moderate_minutes=0,
        walking_days=0,
        walking_minutes=0,
    )


@pytest.fixture
def sedentary_report() -> ActivityReport:
    """Submitted report with a single short walk."""
    return ActivityReport(
        vigorous_days=0,
        vigorous_minutes=0,
        moderate_days=0,
        moderate_minutes=0,
        walking_days=1,
        walking_minutes=20,
        sitting_minutes=600,
    )


@pytest.fixture
def balanced_workload() -> WorkloadAssessment:
    """Full 15-comparison weighting: (80×5 + 20×1 + 60×4 + 40×2 + 70×3 + 30×0) / 15 = 63.33."""
    return WorkloadAssessment(
        mental_rating=80,
        physical_rating=20,
        temporal_rating=60,
        performance_rating=40,
        effort_rating=70,
        frustration_rating=30,
        mental_weight=5,
        physical_weight=1,
        temporal_weight=4,
        performance_weight=2,
        effort_weight=3,
        frustration_weight=0,
    )


@pytest.fixture
def knee_complaint_record(very_active_report: ActivityReport) -> ComplaintRecord:
    """Captain, 70 kg / 1.75 m, knee pain 5/10, stored TLX score 50."""
    return ComplaintRecord(
        complaint_id=101,
        pilot_id=7,
        pilot_name="Cap. Souza",
        complaint=ComplaintAttributes(location="Knee", intensity=5),
        anthropometrics=AnthropometricInput(weight_kg=70.0, height_m=1.75),
        activity=very_active_report,
        workload=WorkloadAssessment(overall_score=50.0),
    )


@pytest.fixture
def bare_complaint_record() -> ComplaintRecord:
    """Complaint filed without profile data or questionnaires."""
    return ComplaintRecord(
        complaint_id=102,
        pilot_id=8,
        complaint=ComplaintAttributes(location="Lumbar Spine", intensity=7),
    )


@pytest.fixture
def complaint_detail_row() -> dict[str, Any]:
    """Raw joined row as returned by the complaint-details query (NUMERIC as str)."""
    return {
        "id": 101,
        "pilot_user_id": 7,
        "pilot_name": "Cap. Souza",
        "location": "Joelho",
        "intensity": "5",
        "weight_kg": "70.00",
        "height_m": "1.75",
        "vigorous_activity_days": 3,
        "vigorous_activity_minutes": 90,
        "moderate_activity_days": 0,
        "moderate_activity_minutes": 0,
        "walking_days": 0,
        "walking_minutes": 0,
        "nasa_tlx_score": "50.00",
        "mental_demand_rating": 50,
        "physical_demand_rating": 50,
        "temporal_demand_rating": 50,
        "performance_rating": 50,
        "effort_rating": 50,
        "frustration_rating": 50,
    }


@pytest.fixture
def bare_row() -> dict[str, Any]:
    """Row where every LEFT JOIN came back empty."""
    return {
        "id": 102,
        "pilot_user_id": 8,
        "pilot_name": "Ten. Lima",
        "location": "Coluna Lombar",
        "intensity": 7,
        "weight_kg": None,
        "height_m": None,
        "vigorous_activity_days": None,
        "vigorous_activity_minutes": None,
        "moderate_activity_days": None,
        "moderate_activity_minutes": None,
        "walking_days": None,
        "walking_minutes": None,
        "nasa_tlx_score": None,
    }
