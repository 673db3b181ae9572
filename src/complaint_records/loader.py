"""Load raw complaint rows from JSON or CSV exports."""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from complaint_records.exceptions import RecordFileError

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".csv")


def load_rows(path: Path | str) -> list[dict[str, Any]]:
    """Read complaint rows from a ``.json`` array of objects or a ``.csv`` file.

    Raises:
        RecordFileError: if the file is missing, unreadable, or malformed.
    """
    path = Path(path)
    if not path.is_file():
        raise RecordFileError(f"Record file not found: {path}", path=path)

    rows = parse_rows(path.read_bytes(), path.suffix, source=path)
    logger.info("Loaded %d complaint rows from %s", len(rows), path)
    return rows


def parse_rows(
    content: bytes, suffix: str, source: Path | str | None = None
) -> list[dict[str, Any]]:
    """Parse an in-memory JSON or CSV export into row dicts.

    ``suffix`` picks the format (".json" or ".csv", case-insensitive).
    CSV blanks come back as None, not NaN.

    Raises:
        RecordFileError: for unsupported types or malformed content.
    """
    name = source if source is not None else f"<upload{suffix}>"
    suffix = suffix.lower()
    if suffix == ".json":
        return _parse_json(content, name)
    if suffix == ".csv":
        return _parse_csv(content, name)
    raise RecordFileError(
        f"Unsupported record file type {suffix!r}; expected one of {SUPPORTED_SUFFIXES}",
        path=source,
    )


def _parse_json(content: bytes, name: Path | str) -> list[dict[str, Any]]:
    try:
        data = json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise RecordFileError(f"Malformed JSON in {name}: {exc}", path=name) from exc

    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise RecordFileError(f"{name} must contain a JSON array of objects", path=name)
    return data


def _parse_csv(content: bytes, name: Path | str) -> list[dict[str, Any]]:
    try:
        df = pd.read_csv(io.BytesIO(content))
    except pd.errors.EmptyDataError:
        return []
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise RecordFileError(f"Malformed CSV in {name}: {exc}", path=name) from exc

    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")
