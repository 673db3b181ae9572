"""Scoring outputs — value objects produced by the engine, never persisted here."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from health_engine.models.enums import ActivityLevel, BmiClass


@dataclass(frozen=True)
class BmiResult:
    """BMI value (kg/m², 2 decimals) and its weight-status class."""

    bmi: float | None
    classification: BmiClass


@dataclass(frozen=True)
class ComplaintScores:
    """Full clinical view of a scored complaint."""

    complaint_id: int | None
    pilot_id: int | None
    location: str | None
    intensity: float | None
    bmi: BmiResult
    activity_level: ActivityLevel
    workload_score: float | None
    fatigue_injury_index: float | None

    def to_dict(self, locale: str = "en") -> dict[str, Any]:
        return {
            "complaint_id": self.complaint_id,
            "pilot_id": self.pilot_id,
            "location": self.location,
            "intensity": self.intensity,
            "bmi": self.bmi.bmi,
            "bmi_classification": self.bmi.classification.label(locale),
            "activity_level": self.activity_level.label(locale),
            "workload_score": self.workload_score,
            "fatigue_injury_index": self.fatigue_injury_index,
        }


@dataclass(frozen=True)
class PilotComplaintView:
    """Reduced view returned to the pilot who filed the complaint."""

    complaint_id: int | None
    location: str | None
    intensity: float | None
    activity_level: ActivityLevel
    workload_score: float | None

    def to_dict(self, locale: str = "en") -> dict[str, Any]:
        return {
            "complaint_id": self.complaint_id,
            "location": self.location,
            "intensity": self.intensity,
            "activity_level": self.activity_level.label(locale),
            "workload_score": self.workload_score,
        }
