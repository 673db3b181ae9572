"""Cohort-level reporting over scored complaints."""

from health_engine.reports.summary import CohortSummary, scores_to_frame, summarize

__all__ = ["CohortSummary", "scores_to_frame", "summarize"]
