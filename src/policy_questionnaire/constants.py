"""Questionnaire constants shared across the SDK.

These values are referenced by the catalog, engine, and report generator.
The export filename prefix can be overridden via an environment variable so
that deployments can brand the exported statement without code changes.
"""

import os
from pathlib import Path

# Packaged catalog and report templates.
PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_CATALOG_PATH = PACKAGE_DIR / "data" / "catalog.yaml"
DEFAULT_TEMPLATE_DIR = PACKAGE_DIR / "report" / "template"

# Template names rendered by the report generator.
STATEMENT_TEMPLATE = "statement.md.jinja2"
EXIT_NOTICE_TEMPLATE = "exit_notice.md.jinja2"

# Exported report filename: "{prefix}-{YYYY-MM-DD}.md".
# Overridable via QUESTIONNAIRE_REPORT_PREFIX env var.
REPORT_FILENAME_PREFIX = os.getenv("QUESTIONNAIRE_REPORT_PREFIX", "project-assessment")
REPORT_FILENAME_SUFFIX = ".md"

# Human-readable completion reasons for the terminal front-end and logging.
COMPLETION_REASON_LABELS: dict[str, str] = {
    "finished": "All questions answered",
    "exited_early": "Assessment ended early",
    "disqualified": "Assessment stopped by a gating answer",
}
