"""Pure functions mapping raw complaint rows to ComplaintRecord.

No I/O — takes the flat dict produced by the complaint-details join
(complaint + pilot profile + IPAQ + NASA-TLX columns) and returns frozen
engine inputs. Database NUMERIC columns arrive as strings; they are parsed
here. Values that cannot be parsed become None and are logged.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional

from health_engine.models.activity import ActivityReport
from health_engine.models.anthropometrics import AnthropometricInput
from health_engine.models.complaint import ComplaintAttributes, ComplaintRecord
from health_engine.models.workload import WorkloadAssessment

logger = logging.getLogger(__name__)

# Row column -> WorkloadAssessment field
_WORKLOAD_COLUMNS: dict[str, str] = {
    "mental_demand_rating": "mental_rating",
    "physical_demand_rating": "physical_rating",
    "temporal_demand_rating": "temporal_rating",
    "performance_rating": "performance_rating",
    "effort_rating": "effort_rating",
    "frustration_rating": "frustration_rating",
    "mental_demand_weight": "mental_weight",
    "physical_demand_weight": "physical_weight",
    "temporal_demand_weight": "temporal_weight",
    "performance_weight": "performance_weight",
    "effort_weight": "effort_weight",
    "frustration_weight": "frustration_weight",
}

_WEIGHT_FIELDS = frozenset(f for f in _WORKLOAD_COLUMNS.values() if f.endswith("_weight"))


def map_complaint_row(row: Mapping[str, Any]) -> ComplaintRecord:
    """Map one joined complaint row to a ComplaintRecord.

    Recognized keys:
        id, pilot_user_id, pilot_name, location, intensity,
        weight_kg, height_m,
        vigorous_activity_days, vigorous_activity_minutes,
        moderate_activity_days, moderate_activity_minutes,
        walking_days, walking_minutes, sitting_minutes,
        nasa_tlx_score (or overall_score), *_rating, *_weight

    Unknown keys are ignored.
    """
    return ComplaintRecord(
        complaint_id=_to_int(row.get("id"), "id"),
        pilot_id=_to_int(row.get("pilot_user_id"), "pilot_user_id"),
        pilot_name=str(row.get("pilot_name") or ""),
        complaint=ComplaintAttributes(
            location=_to_str(row.get("location")),
            intensity=_to_float(row.get("intensity"), "intensity"),
        ),
        anthropometrics=AnthropometricInput(
            weight_kg=_to_float(row.get("weight_kg"), "weight_kg"),
            height_m=_to_float(row.get("height_m"), "height_m"),
        ),
        activity=_extract_activity(row),
        workload=_extract_workload(row),
    )


# ---------------------------------------------------------------------------
# Internal extractors — each handles missing columns gracefully
# ---------------------------------------------------------------------------


def _extract_activity(row: Mapping[str, Any]) -> Optional[ActivityReport]:
    """Build an ActivityReport when the row carries an IPAQ submission.

    The LEFT JOIN leaves every IPAQ column null when no questionnaire was
    filed; ``moderate_activity_days`` is the column that marks a submission.
    """
    moderate_days = _to_float(row.get("moderate_activity_days"), "moderate_activity_days")
    if moderate_days is None:
        return None

    return ActivityReport(
        vigorous_days=_to_float(row.get("vigorous_activity_days"), "vigorous_activity_days"),
        vigorous_minutes=_to_float(
            row.get("vigorous_activity_minutes"), "vigorous_activity_minutes"
        ),
        moderate_days=moderate_days,
        moderate_minutes=_to_float(
            row.get("moderate_activity_minutes"), "moderate_activity_minutes"
        ),
        walking_days=_to_float(row.get("walking_days"), "walking_days"),
        walking_minutes=_to_float(row.get("walking_minutes"), "walking_minutes"),
        sitting_minutes=_to_float(row.get("sitting_minutes"), "sitting_minutes"),
    )


def _extract_workload(row: Mapping[str, Any]) -> Optional[WorkloadAssessment]:
    """Build a WorkloadAssessment when any NASA-TLX column is populated."""
    raw_score = row.get("nasa_tlx_score", row.get("overall_score"))
    overall = _to_float(raw_score, "nasa_tlx_score")

    fields: dict[str, Any] = {}
    for column, attr in _WORKLOAD_COLUMNS.items():
        if attr in _WEIGHT_FIELDS:
            value: Any = _to_int(row.get(column), column)
        else:
            value = _to_float(row.get(column), column)
        if value is not None:
            fields[attr] = value

    if overall is None and not fields:
        return None
    return WorkloadAssessment(overall_score=overall, **fields)


# ---------------------------------------------------------------------------
# Scalar parsing
# ---------------------------------------------------------------------------


def _to_float(value: Any, column: str) -> Optional[float]:
    """Parse a numeric cell. Accepts numbers and numeric strings (',' or '.').

    NaN and infinities count as unparseable.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and math.isnan(value):
        return None  # pandas blank cell
    if isinstance(value, str):
        text = value.strip().replace(",", ".")
        if not text:
            return None
    else:
        text = value

    try:
        parsed = float(text)  # also Decimal and numpy scalars
    except (TypeError, ValueError, OverflowError):
        logger.warning("Ignoring non-numeric %s value %r", column, value)
        return None
    if not math.isfinite(parsed):
        logger.warning("Ignoring non-finite %s value %r", column, value)
        return None
    return parsed


def _to_int(value: Any, column: str) -> Optional[int]:
    parsed = _to_float(value, column)
    if parsed is None:
        return None
    return int(parsed)


def _to_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    text = str(value).strip()
    return text or None
