"""Data models for the health scoring engine."""

from health_engine.models.activity import ActivityReport, MetBreakdown
from health_engine.models.anthropometrics import AnthropometricInput
from health_engine.models.complaint import ComplaintAttributes, ComplaintRecord
from health_engine.models.enums import (
    ActivityLevel,
    BmiClass,
    BodyLocation,
    Role,
    WorkloadDimension,
)
from health_engine.models.scores import BmiResult, ComplaintScores, PilotComplaintView
from health_engine.models.workload import WorkloadAssessment

__all__ = [
    "ActivityLevel",
    "ActivityReport",
    "AnthropometricInput",
    "BmiClass",
    "BmiResult",
    "BodyLocation",
    "ComplaintAttributes",
    "ComplaintRecord",
    "ComplaintScores",
    "MetBreakdown",
    "PilotComplaintView",
    "Role",
    "WorkloadAssessment",
    "WorkloadDimension",
]
