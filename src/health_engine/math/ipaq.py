"""IPAQ short-form physical activity classification.

MET-minutes per week are computed per band (vigorous, moderate, walking)
and the categorical level is assigned by day-count and MET thresholds.

Reference:
    IPAQ Research Committee (2005). Guidelines for Data Processing and
    Analysis of the International Physical Activity Questionnaire.
    Craig et al. (2003). Med Sci Sports Exerc 35(8):1381-1395.
"""

from __future__ import annotations

from health_engine.models.activity import ActivityReport, MetBreakdown
from health_engine.models.enums import (
    IPAQ_ACTIVE_MODERATE_DAYS,
    IPAQ_ACTIVE_TOTAL_DAYS,
    IPAQ_ACTIVE_VIG_MOD_MET,
    IPAQ_ACTIVE_VIGOROUS_DAYS,
    IPAQ_VERY_ACTIVE_TOTAL_DAYS,
    IPAQ_VERY_ACTIVE_TOTAL_MET,
    IPAQ_VERY_ACTIVE_VIGOROUS_DAYS,
    IPAQ_VERY_ACTIVE_VIGOROUS_MET,
    MET_MODERATE,
    MET_VIGOROUS,
    MET_WALKING,
    ActivityLevel,
)


def _value(x: float | None) -> float:
    return float(x) if x else 0.0


def calculate_met_minutes(report: ActivityReport) -> MetBreakdown:
    """Calculate weekly MET-minutes for each intensity band.

    MET-min = MET × days × minutes/day, missing fields counted as 0.

    Args:
        report: The pilot's activity report.

    Returns:
        MetBreakdown with per-band MET-minutes and total active days.
    """
    vigorous_days = _value(report.vigorous_days)
    moderate_days = _value(report.moderate_days)
    walking_days = _value(report.walking_days)

    return MetBreakdown(
        vigorous_met=MET_VIGOROUS * vigorous_days * _value(report.vigorous_minutes),
        moderate_met=MET_MODERATE * moderate_days * _value(report.moderate_minutes),
        walking_met=MET_WALKING * walking_days * _value(report.walking_minutes),
        total_days=vigorous_days + moderate_days + walking_days,
    )


def classify_activity(report: ActivityReport | None) -> ActivityLevel:
    """Classify a pilot's physical activity level.

    Rules, first match wins:
        VERY_ACTIVE: (vigorous days >= 3 and total MET >= 1500)
                     or (total days >= 7 and total MET >= 3000)
        ACTIVE: vigorous days >= 3 or moderate days >= 5
                or (total days >= 5 and vigorous+moderate MET >= 600)
        INSUFFICIENTLY_ACTIVE: otherwise

    Args:
        report: The activity report, or None when none was submitted.

    Returns:
        An ActivityLevel. NOT_INFORMED when there is no report or the
        report has no moderate-days answer.
    """
    if report is None or report.moderate_days is None:
        return ActivityLevel.NOT_INFORMED

    mets = calculate_met_minutes(report)
    total_met = mets.total_met
    vigorous_days = _value(report.vigorous_days)
    moderate_days = _value(report.moderate_days)

    if (
        vigorous_days >= IPAQ_VERY_ACTIVE_VIGOROUS_DAYS
        and total_met >= IPAQ_VERY_ACTIVE_VIGOROUS_MET
    ) or (
        mets.total_days >= IPAQ_VERY_ACTIVE_TOTAL_DAYS
        and total_met >= IPAQ_VERY_ACTIVE_TOTAL_MET
    ):
        return ActivityLevel.VERY_ACTIVE

    if (
        vigorous_days >= IPAQ_ACTIVE_VIGOROUS_DAYS
        or moderate_days >= IPAQ_ACTIVE_MODERATE_DAYS
        or (
            mets.total_days >= IPAQ_ACTIVE_TOTAL_DAYS
            and mets.vigorous_met + mets.moderate_met >= IPAQ_ACTIVE_VIG_MOD_MET
        )
    ):
        return ActivityLevel.ACTIVE

    return ActivityLevel.INSUFFICIENTLY_ACTIVE
