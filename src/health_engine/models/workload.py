"""NASA-TLX workload assessment attached to a complaint."""

from __future__ import annotations

from dataclasses import dataclass

from health_engine.models.enums import WorkloadDimension


@dataclass(frozen=True)
class WorkloadAssessment:
    """Six subscale ratings (0-100) with their pairwise weights (0-5).

    ``overall_score`` is the aggregate stored alongside the ratings when the
    client computed it at submission time.
    """

    mental_rating: float | None = None
    physical_rating: float | None = None
    temporal_rating: float | None = None
    performance_rating: float | None = None
    effort_rating: float | None = None
    frustration_rating: float | None = None

    mental_weight: int | None = None
    physical_weight: int | None = None
    temporal_weight: int | None = None
    performance_weight: int | None = None
    effort_weight: int | None = None
    frustration_weight: int | None = None

    overall_score: float | None = None

    def ratings(self) -> dict[WorkloadDimension, float | None]:
        return {
            WorkloadDimension.MENTAL: self.mental_rating,
            WorkloadDimension.PHYSICAL: self.physical_rating,
            WorkloadDimension.TEMPORAL: self.temporal_rating,
            WorkloadDimension.PERFORMANCE: self.performance_rating,
            WorkloadDimension.EFFORT: self.effort_rating,
            WorkloadDimension.FRUSTRATION: self.frustration_rating,
        }

    def weights(self) -> dict[WorkloadDimension, int | None]:
        return {
            WorkloadDimension.MENTAL: self.mental_weight,
            WorkloadDimension.PHYSICAL: self.physical_weight,
            WorkloadDimension.TEMPORAL: self.temporal_weight,
            WorkloadDimension.PERFORMANCE: self.performance_weight,
            WorkloadDimension.EFFORT: self.effort_weight,
            WorkloadDimension.FRUSTRATION: self.frustration_weight,
        }
