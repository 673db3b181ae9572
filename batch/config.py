"""Environment-variable-based configuration for the batch scorer."""

from __future__ import annotations

import os
from pathlib import Path

LOG_LEVEL: str = os.environ.get("HEALTH_ENGINE_LOG_LEVEL", "INFO").upper()
LOCALE: str = os.environ.get("HEALTH_ENGINE_LOCALE", "en")
INPUT_PATH: Path | None = (
    Path(os.environ["HEALTH_ENGINE_INPUT"]).expanduser()
    if os.environ.get("HEALTH_ENGINE_INPUT")
    else None
)
OUTPUT_DIR: Path | None = (
    Path(os.environ["HEALTH_ENGINE_OUTPUT_DIR"]).expanduser()
    if os.environ.get("HEALTH_ENGINE_OUTPUT_DIR")
    else None
)
