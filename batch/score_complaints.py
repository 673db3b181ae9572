"""Batch scorer — scores an exported file of complaint rows.

Usage:
    python -m batch.score_complaints --input rows.json
    python -m batch.score_complaints --input rows.csv --summary --locale pt_BR
    python -m batch.score_complaints --input rows.json --role PILOT
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from complaint_records import RecordFileError, load_rows, map_complaint_row
from health_engine.engine import HealthScoringEngine
from health_engine.models.enums import SUPPORTED_LOCALES, Role
from health_engine.reports import summarize

from batch.config import INPUT_PATH, LOCALE, LOG_LEVEL, OUTPUT_DIR

logger = logging.getLogger(__name__)

OUTPUT_FILENAME = "scored_complaints.json"


def score_file(
    path: Path,
    role: Role = Role.HEALTH_PROFESSIONAL,
    locale: str = "en",
    with_summary: bool = False,
) -> dict[str, Any]:
    """Load, map and score every row in *path*.

    Returns a JSON-ready payload with the per-complaint views and, when
    requested, the cohort summary. The summary is only built for clinical
    roles.
    """
    rows = load_rows(path)
    records = [map_complaint_row(row) for row in rows]

    engine = HealthScoringEngine()
    scores = engine.score_many(records)
    logger.info("Scored %d complaints", len(scores))

    payload: dict[str, Any] = {
        "complaints": [engine.view_for(s, role).to_dict(locale) for s in scores],
    }
    if with_summary and role != Role.PILOT:
        payload["summary"] = summarize(scores, locale).to_dict()
    return payload


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score pilot complaint records")
    parser.add_argument(
        "--input",
        type=Path,
        default=INPUT_PATH,
        help="JSON or CSV file of complaint rows (default: $HEALTH_ENGINE_INPUT)",
    )
    parser.add_argument(
        "--role",
        choices=[r.name for r in Role],
        default=Role.HEALTH_PROFESSIONAL.name,
        help="Role the output is prepared for",
    )
    parser.add_argument("--locale", choices=SUPPORTED_LOCALES, default=LOCALE)
    parser.add_argument("--summary", action="store_true", help="Include cohort summary")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=OUTPUT_DIR,
        help=f"Write {OUTPUT_FILENAME} here instead of stdout",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = _parse_args(argv)

    if args.input is None:
        logger.error("No input file given (use --input or HEALTH_ENGINE_INPUT)")
        return 2

    try:
        payload = score_file(
            args.input,
            role=Role[args.role],
            locale=args.locale,
            with_summary=args.summary,
        )
    except RecordFileError as exc:
        logger.error("Failed to load records: %s", exc)
        return 1

    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output_dir is not None:
        args.output_dir.mkdir(parents=True, exist_ok=True)
        out_path = args.output_dir / OUTPUT_FILENAME
        out_path.write_text(text, encoding="utf-8")
        logger.info("Wrote %s", out_path)
    else:
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
