"""Complaint record — immutable bundle of every input the engine scores."""

from __future__ import annotations

from dataclasses import dataclass, field

from health_engine.models.activity import ActivityReport
from health_engine.models.anthropometrics import AnthropometricInput
from health_engine.models.workload import WorkloadAssessment


@dataclass(frozen=True)
class ComplaintAttributes:
    """Where it hurts and how much (pain intensity 0-10)."""

    location: str | None = None
    intensity: float | None = None


@dataclass(frozen=True)
class ComplaintRecord:
    """One complaint joined with the pilot profile and its assessments.

    This is the sole input to HealthScoringEngine.score(). ``activity`` and
    ``workload`` are None when the pilot never submitted the questionnaire.
    """

    complaint_id: int | None = None
    pilot_id: int | None = None
    pilot_name: str = ""
    complaint: ComplaintAttributes = field(default_factory=ComplaintAttributes)
    anthropometrics: AnthropometricInput = field(default_factory=AnthropometricInput)
    activity: ActivityReport | None = None
    workload: WorkloadAssessment | None = None
