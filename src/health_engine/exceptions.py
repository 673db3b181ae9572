"""Custom exception hierarchy for the health scoring engine.

Scoring itself never raises on missing data; these cover the callers'
contract violations.
"""

from __future__ import annotations


class HealthEngineError(Exception):
    """Base exception for all health_engine errors."""


class AccessDeniedError(HealthEngineError):
    """The requesting role may not view the requested scores."""

    def __init__(self, message: str, role: object | None = None) -> None:
        super().__init__(message)
        self.role = role
