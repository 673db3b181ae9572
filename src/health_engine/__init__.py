"""Health scoring engine — BMI, IPAQ activity level and Fatigue-Injury Index."""

from health_engine.engine import HealthScoringEngine
from health_engine.exceptions import AccessDeniedError, HealthEngineError
from health_engine.math.bmi import classify_bmi, compute_bmi
from health_engine.math.fatigue_index import compute_fatigue_injury_index, location_weight
from health_engine.math.ipaq import calculate_met_minutes, classify_activity
from health_engine.math.workload import (
    calculate_overall_score,
    calculate_raw_tlx,
    resolve_overall_score,
)

__all__ = [
    "AccessDeniedError",
    "HealthEngineError",
    "HealthScoringEngine",
    "calculate_met_minutes",
    "calculate_overall_score",
    "calculate_raw_tlx",
    "classify_activity",
    "classify_bmi",
    "compute_bmi",
    "compute_fatigue_injury_index",
    "location_weight",
    "resolve_overall_score",
]
