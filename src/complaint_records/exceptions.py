"""Exception hierarchy for complaint record loading."""

from __future__ import annotations

from pathlib import Path


class RecordError(Exception):
    """Base exception for all complaint_records errors."""


class RecordFileError(RecordError):
    """A record file is missing, unreadable, or not in a supported shape."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = path
