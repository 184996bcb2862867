"""Write a generated statement to disk as a dated Markdown file."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from policy_questionnaire.constants import REPORT_FILENAME_PREFIX, REPORT_FILENAME_SUFFIX

logger = logging.getLogger(__name__)


def report_filename(day: date | None = None) -> str:
    """Filename for a report exported on *day* (default: today)."""
    day = day or date.today()
    return f"{REPORT_FILENAME_PREFIX}-{day.isoformat()}{REPORT_FILENAME_SUFFIX}"


def export_report(content: str, directory: Path | str, *, day: date | None = None) -> Path:
    """Write *content* to ``<directory>/<report_filename(day)>``.

    Creates *directory* if needed and overwrites an existing report of the
    same day.  Returns the written path.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / report_filename(day)
    path.write_text(content, encoding="utf-8")
    logger.info("Report written to %s", path)
    return path
