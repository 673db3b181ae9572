"""Utility helpers bridging the Streamlit UI and the health scoring engine.

Pure functions for formatting, color maps and record construction from
form input or uploaded exports.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Any

from complaint_records import map_complaint_row, parse_rows
from health_engine.models.activity import ActivityReport
from health_engine.models.anthropometrics import AnthropometricInput
from health_engine.models.complaint import ComplaintAttributes, ComplaintRecord
from health_engine.models.enums import ActivityLevel, BmiClass, BodyLocation
from health_engine.models.workload import WorkloadAssessment

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_optional(value: float | None, decimals: int = 2, suffix: str = "") -> str:
    """Format a possibly-missing number. e.g. 22.857, 1 -> '22.9'; None -> '--'."""
    if value is None:
        return "--"
    return f"{value:.{decimals}f}{suffix}"


# ---------------------------------------------------------------------------
# Color maps
# ---------------------------------------------------------------------------

BMI_COLORS: dict[BmiClass, str] = {
    BmiClass.INSUFFICIENT_DATA: "#D5DBDB",  # grey
    BmiClass.UNDERWEIGHT: "#AED6F1",        # pastel blue
    BmiClass.NORMAL: "#82E0AA",             # green
    BmiClass.OVERWEIGHT: "#F9E79F",         # yellow
    BmiClass.OBESITY_I: "#F5B041",          # orange
    BmiClass.OBESITY_II: "#E74C3C",         # red
    BmiClass.OBESITY_III: "#8E44AD",        # purple
}

ACTIVITY_COLORS: dict[ActivityLevel, str] = {
    ActivityLevel.NOT_INFORMED: "#D5DBDB",
    ActivityLevel.INSUFFICIENTLY_ACTIVE: "#F5B041",
    ActivityLevel.ACTIVE: "#82E0AA",
    ActivityLevel.VERY_ACTIVE: "#2ECC71",
}

LOCATION_OPTIONS: tuple[str, ...] = tuple(loc.value for loc in BodyLocation)


# ---------------------------------------------------------------------------
# Record construction
# ---------------------------------------------------------------------------


def _none_if_zero(value: Any) -> Any:
    return value if value else None


def build_record(form: dict[str, Any]) -> ComplaintRecord:
    """Convert a UI form dict into a frozen ComplaintRecord.

    ``has_ipaq`` / ``has_tlx`` decide whether the questionnaires are
    attached. Weight and height of 0 mean "not filled in".
    """
    activity = None
    if form.get("has_ipaq"):
        activity = ActivityReport(
            vigorous_days=form.get("vigorous_days", 0),
            vigorous_minutes=form.get("vigorous_minutes", 0),
            moderate_days=form.get("moderate_days", 0),
            moderate_minutes=form.get("moderate_minutes", 0),
            walking_days=form.get("walking_days", 0),
            walking_minutes=form.get("walking_minutes", 0),
            sitting_minutes=form.get("sitting_minutes"),
        )

    workload = None
    if form.get("has_tlx"):
        workload = WorkloadAssessment(
            mental_rating=form.get("mental_rating"),
            physical_rating=form.get("physical_rating"),
            temporal_rating=form.get("temporal_rating"),
            performance_rating=form.get("performance_rating"),
            effort_rating=form.get("effort_rating"),
            frustration_rating=form.get("frustration_rating"),
            mental_weight=form.get("mental_weight"),
            physical_weight=form.get("physical_weight"),
            temporal_weight=form.get("temporal_weight"),
            performance_weight=form.get("performance_weight"),
            effort_weight=form.get("effort_weight"),
            frustration_weight=form.get("frustration_weight"),
        )

    return ComplaintRecord(
        pilot_name=form.get("pilot_name", ""),
        complaint=ComplaintAttributes(
            location=form.get("location"),
            intensity=form.get("intensity"),
        ),
        anthropometrics=AnthropometricInput(
            weight_kg=_none_if_zero(form.get("weight_kg")),
            height_m=_none_if_zero(form.get("height_m")),
        ),
        activity=activity,
        workload=workload,
    )


def records_from_upload(content: bytes, filename: str) -> list[ComplaintRecord]:
    """Parse an uploaded JSON or CSV export into ComplaintRecords.

    Raises:
        RecordFileError: for unsupported file types or malformed content.
    """
    rows = parse_rows(content, PurePath(filename).suffix, source=filename)
    return [map_complaint_row(row) for row in rows]
