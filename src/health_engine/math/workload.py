"""NASA-TLX workload aggregation.

Weighted TLX = Σ(rating × weight) / Σ(weight) over the six subscales.
Raw TLX (RTLX) drops the weighting step and averages the ratings.

Reference:
    Hart & Staveland (1988). Development of NASA-TLX. Advances in
    Psychology 52:139-183.
    Hart (2006). NASA-Task Load Index; 20 years later. Proc HFES 50(9).
"""

from __future__ import annotations

import numpy as np

from health_engine.models.workload import WorkloadAssessment


def calculate_overall_score(assessment: WorkloadAssessment) -> float | None:
    """Calculate the weighted NASA-TLX overall workload score.

    Missing ratings and weights count as 0.

    Args:
        assessment: The six ratings and their weights.

    Returns:
        Weighted mean rating (0-100), or None when all weights are zero.
    """
    ratings = assessment.ratings()
    weights = assessment.weights()
    dims = list(ratings)

    r = np.array([ratings[d] or 0.0 for d in dims], dtype=np.float64)
    w = np.array([weights[d] or 0 for d in dims], dtype=np.float64)

    total_weight = float(w.sum())
    if total_weight <= 0:
        return None
    return float(np.dot(r, w) / total_weight)


def calculate_raw_tlx(assessment: WorkloadAssessment) -> float | None:
    """Calculate Raw TLX: the unweighted mean of the answered ratings.

    Returns None when no subscale was rated.
    """
    answered = [v for v in assessment.ratings().values() if v is not None]
    if not answered:
        return None
    return float(np.mean(np.array(answered, dtype=np.float64)))


def resolve_overall_score(assessment: WorkloadAssessment | None) -> float | None:
    """Return the stored overall score, falling back to the weighted TLX."""
    if assessment is None:
        return None
    if assessment.overall_score is not None:
        return float(assessment.overall_score)
    return calculate_overall_score(assessment)
