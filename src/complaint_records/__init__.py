"""Complaint record loading and mapping — raw rows in, engine inputs out."""

from complaint_records.exceptions import RecordError, RecordFileError
from complaint_records.loader import load_rows, parse_rows
from complaint_records.mapper import map_complaint_row

__all__ = [
    "RecordError",
    "RecordFileError",
    "load_rows",
    "map_complaint_row",
    "parse_rows",
]
