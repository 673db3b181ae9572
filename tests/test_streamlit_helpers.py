"""Tests for the Streamlit helper functions (no Streamlit runtime needed)."""

from __future__ import annotations

import json

import pytest

from helpers import (
    ACTIVITY_COLORS,
    BMI_COLORS,
    LOCATION_OPTIONS,
    build_record,
    format_optional,
    records_from_upload,
)
from complaint_records import RecordFileError
from health_engine.models.enums import ActivityLevel, BmiClass, BodyLocation


class TestFormatting:
    def test_format_optional(self) -> None:
        assert format_optional(22.857) == "22.86"
        assert format_optional(22.857, 1) == "22.9"
        assert format_optional(None) == "--"

    def test_color_maps_cover_enums(self) -> None:
        assert set(BMI_COLORS) == set(BmiClass)
        assert set(ACTIVITY_COLORS) == set(ActivityLevel)

    def test_location_options(self) -> None:
        assert len(LOCATION_OPTIONS) == len(BodyLocation)
        assert "Knee" in LOCATION_OPTIONS


class TestBuildRecord:
    def test_questionnaires_attached(self) -> None:
        record = build_record(
            {
                "location": "Knee",
                "intensity": 5,
                "weight_kg": 70.0,
                "height_m": 1.75,
                "has_ipaq": True,
                "vigorous_days": 3,
                "vigorous_minutes": 90,
                "has_tlx": True,
                "mental_rating": 50,
                "mental_weight": 5,
            }
        )
        assert record.activity is not None
        assert record.activity.moderate_days == 0
        assert record.workload is not None
        assert record.workload.mental_weight == 5

    def test_unchecked_questionnaires_omitted(self) -> None:
        record = build_record({"location": "Knee", "intensity": 5})
        assert record.activity is None
        assert record.workload is None

    def test_zero_weight_height_are_missing(self) -> None:
        record = build_record({"weight_kg": 0.0, "height_m": 0.0})
        assert record.anthropometrics.weight_kg is None
        assert record.anthropometrics.height_m is None


class TestRecordsFromUpload:
    def test_json(self) -> None:
        content = json.dumps([{"id": 1, "location": "Knee", "intensity": 4}]).encode()
        records = records_from_upload(content, "export.json")
        assert records[0].complaint.location == "Knee"

    def test_csv(self) -> None:
        content = b"id,location,intensity,moderate_activity_days\n1,Thorax,6,2\n"
        records = records_from_upload(content, "export.CSV")
        assert records[0].complaint.intensity == 6.0
        assert records[0].activity is not None

    def test_unsupported(self) -> None:
        with pytest.raises(RecordFileError):
            records_from_upload(b"", "export.xlsx")

    def test_json_object_rejected(self) -> None:
        with pytest.raises(RecordFileError):
            records_from_upload(b'{"id": 1}', "export.json")

    def test_non_object_element_rejected(self) -> None:
        with pytest.raises(RecordFileError, match="array of objects"):
            records_from_upload(b"[1, 2]", "export.json")

    def test_error_names_the_upload(self) -> None:
        with pytest.raises(RecordFileError) as excinfo:
            records_from_upload(b"[{", "export.json")
        assert excinfo.value.path == "export.json"
