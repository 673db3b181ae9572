"""Fatigue-Injury Index (IFL).

IFL = pain intensity × NASA-TLX overall score × body-location weight.

Locations carry a severity weight of 1-3; regions outside the table weigh
0 and leave the index undefined.
"""

from __future__ import annotations

from health_engine.models.enums import LOCATION_WEIGHTS, PT_BR_LABELS, BodyLocation

# Canonical English names and the pt-BR names stored by the legacy front end
_LOCATION_LOOKUP: dict[str, BodyLocation] = {loc.value: loc for loc in BodyLocation}
_LOCATION_LOOKUP.update(
    {PT_BR_LABELS[loc]: loc for loc in BodyLocation if loc in PT_BR_LABELS}
)


def resolve_location(name: str | None) -> BodyLocation | None:
    """Resolve a stored location name (English or pt-BR) to a BodyLocation.

    Matching is exact: case and surrounding whitespace must agree.
    """
    if not name:
        return None
    return _LOCATION_LOOKUP.get(name)


def location_weight(location: str | BodyLocation | None) -> int:
    """Severity weight for a body location; 0 for anything unrecognized."""
    if isinstance(location, BodyLocation):
        return LOCATION_WEIGHTS[location]
    resolved = resolve_location(location)
    if resolved is None:
        return 0
    return LOCATION_WEIGHTS[resolved]


def compute_fatigue_injury_index(
    intensity: float | None,
    overall_workload_score: float | None,
    location: str | BodyLocation | None,
) -> float | None:
    """Calculate the Fatigue-Injury Index for a complaint.

    Args:
        intensity: Pain intensity (0-10). None or 0 counts as missing.
        overall_workload_score: NASA-TLX overall score. None or 0 counts
            as missing.
        location: Body region of the complaint.

    Returns:
        The index rounded to 2 decimals, or None when an input is missing
        or the location weighs 0.
    """
    if not intensity or not overall_workload_score:
        return None

    weight = location_weight(location)
    if weight == 0:
        return None

    return round(float(intensity) * float(overall_workload_score) * weight, 2)
