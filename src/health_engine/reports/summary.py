"""Cohort summary for the health professional reports panel.

Aggregates scored complaints into headline counts and distributions
using pandas. Pure — takes value objects, returns a value object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

import pandas as pd

from health_engine.math.fatigue_index import resolve_location
from health_engine.models.scores import ComplaintScores

_COLUMNS = [
    "complaint_id",
    "pilot_id",
    "location",
    "intensity",
    "bmi",
    "bmi_classification",
    "activity_level",
    "workload_score",
    "fatigue_injury_index",
]


@dataclass(frozen=True)
class CohortSummary:
    """Headline numbers and distributions for a set of complaints."""

    total_complaints: int
    total_pilots: int
    average_intensity: float
    complaints_by_location: dict[str, int] = field(default_factory=dict)
    bmi_distribution: dict[str, int] = field(default_factory=dict)
    activity_distribution: dict[str, int] = field(default_factory=dict)
    mean_fatigue_injury_index: float | None = None
    max_fatigue_injury_index: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_complaints": self.total_complaints,
            "total_pilots": self.total_pilots,
            "average_intensity": self.average_intensity,
            "complaints_by_location": dict(self.complaints_by_location),
            "bmi_distribution": dict(self.bmi_distribution),
            "activity_distribution": dict(self.activity_distribution),
            "mean_fatigue_injury_index": self.mean_fatigue_injury_index,
            "max_fatigue_injury_index": self.max_fatigue_injury_index,
        }


def scores_to_frame(scores: Iterable[ComplaintScores], locale: str = "en") -> pd.DataFrame:
    """Flatten scored complaints into a DataFrame, one row per complaint."""
    rows = [s.to_dict(locale) for s in scores]
    return pd.DataFrame(rows, columns=_COLUMNS)


def _counts(series: pd.Series) -> dict[str, int]:
    counts = series.dropna().value_counts()
    return {str(k): int(v) for k, v in counts.sort_index().items()}


def _location_label(name: Any, locale: str) -> Any:
    resolved = resolve_location(name) if isinstance(name, str) else None
    return resolved.label(locale) if resolved is not None else name


def summarize(scores: Iterable[ComplaintScores], locale: str = "en") -> CohortSummary:
    """Aggregate scored complaints into a CohortSummary.

    Average intensity treats missing intensities as 0 and is rounded to
    1 decimal. Locations stored in either language share one bucket,
    keyed by the label for ``locale``; unknown names are kept as given.
    IFL statistics only cover complaints where the index is
    defined; both are None when none is.
    """
    df = scores_to_frame(scores, locale)
    if df.empty:
        return CohortSummary(total_complaints=0, total_pilots=0, average_intensity=0.0)

    intensity = pd.to_numeric(df["intensity"], errors="coerce").fillna(0.0)
    ifl = pd.to_numeric(df["fatigue_injury_index"], errors="coerce").dropna()

    return CohortSummary(
        total_complaints=len(df),
        total_pilots=int(df["pilot_id"].nunique(dropna=True)),
        average_intensity=round(float(intensity.mean()), 1),
        complaints_by_location=_counts(
            df["location"].map(lambda name: _location_label(name, locale))
        ),
        bmi_distribution=_counts(df["bmi_classification"]),
        activity_distribution=_counts(df["activity_level"]),
        mean_fatigue_injury_index=round(float(ifl.mean()), 2) if not ifl.empty else None,
        max_fatigue_injury_index=float(ifl.max()) if not ifl.empty else None,
    )
