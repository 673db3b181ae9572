"""HealthScoringEngine — composes the calculators into one scored complaint."""

from __future__ import annotations

from typing import Iterable

from health_engine.exceptions import AccessDeniedError
from health_engine.math.bmi import compute_bmi
from health_engine.math.fatigue_index import compute_fatigue_injury_index
from health_engine.math.ipaq import classify_activity
from health_engine.math.workload import resolve_overall_score
from health_engine.models.complaint import ComplaintRecord
from health_engine.models.enums import CLINICAL_ROLES, Role
from health_engine.models.scores import ComplaintScores, PilotComplaintView


class HealthScoringEngine:
    """Scores complaint records: BMI, IPAQ level, workload and IFL.

    Stateless; a single instance can be shared across request handlers.

    Usage:
        engine = HealthScoringEngine()
        scores = engine.score(record)
        payload = engine.view_for(scores, Role.PILOT).to_dict()
    """

    def score(self, record: ComplaintRecord) -> ComplaintScores:
        """Compute every derived index for one complaint.

        Args:
            record: Frozen complaint record with profile and assessments.

        Returns:
            ComplaintScores. Missing inputs surface as sentinel values,
            never as exceptions.
        """
        bmi = compute_bmi(
            record.anthropometrics.weight_kg,
            record.anthropometrics.height_m,
        )
        activity_level = classify_activity(record.activity)
        workload_score = resolve_overall_score(record.workload)
        ifl = compute_fatigue_injury_index(
            record.complaint.intensity,
            workload_score,
            record.complaint.location,
        )

        return ComplaintScores(
            complaint_id=record.complaint_id,
            pilot_id=record.pilot_id,
            location=record.complaint.location,
            intensity=record.complaint.intensity,
            bmi=bmi,
            activity_level=activity_level,
            workload_score=workload_score,
            fatigue_injury_index=ifl,
        )

    def score_many(self, records: Iterable[ComplaintRecord]) -> list[ComplaintScores]:
        """Score a batch of records, preserving input order."""
        return [self.score(record) for record in records]

    @staticmethod
    def view_for(
        scores: ComplaintScores, role: Role
    ) -> ComplaintScores | PilotComplaintView:
        """Restrict a scored complaint to what the given role may see.

        Health professionals and managers get the full record. Pilots get
        their complaint with the activity level and workload score only.

        Raises:
            AccessDeniedError: if ``role`` is not a known application role.
        """
        if role in CLINICAL_ROLES:
            return scores
        if role == Role.PILOT:
            return PilotComplaintView(
                complaint_id=scores.complaint_id,
                location=scores.location,
                intensity=scores.intensity,
                activity_level=scores.activity_level,
                workload_score=scores.workload_score,
            )
        raise AccessDeniedError(f"Role {role!r} may not view complaint scores", role=role)
