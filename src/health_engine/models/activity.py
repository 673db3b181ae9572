"""IPAQ short-form activity report and its MET breakdown."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ActivityReport:
    """Self-reported activity over the last seven days (IPAQ short form).

    Days are 0-7, minutes are per active day. Any field may be None when the
    pilot skipped the question; arithmetic treats None as zero. A report
    with ``moderate_days`` of None is treated as not submitted.
    """

    vigorous_days: float | None = None
    vigorous_minutes: float | None = None
    moderate_days: float | None = None
    moderate_minutes: float | None = None
    walking_days: float | None = None
    walking_minutes: float | None = None
    sitting_minutes: float | None = None


@dataclass(frozen=True)
class MetBreakdown:
    """Weekly MET-minutes per intensity band."""

    vigorous_met: float
    moderate_met: float
    walking_met: float
    total_days: float

    @property
    def total_met(self) -> float:
        return self.vigorous_met + self.moderate_met + self.walking_met
