"""Runtime configuration — reads settings from environment variables.

All settings have sensible defaults for local use.  The terminal front-end
overrides individual values from its command-line flags.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class QuestionnaireSettings:
    """Immutable configuration read from environment at startup."""

    # Catalog YAML (None → packaged data/catalog.yaml)
    catalog_path: str | None = None

    # Report templates directory (None → packaged report/template/)
    template_dir: str | None = None

    # Where exported reports are written
    output_dir: str = "."

    # Logging
    log_level: str = "WARNING"


def load_settings() -> QuestionnaireSettings:
    """Build settings from ``QUESTIONNAIRE_*`` environment variables."""
    return QuestionnaireSettings(
        catalog_path=os.getenv("QUESTIONNAIRE_CATALOG") or None,
        template_dir=os.getenv("QUESTIONNAIRE_TEMPLATE_DIR") or None,
        output_dir=os.getenv("QUESTIONNAIRE_OUTPUT_DIR", "."),
        log_level=os.getenv("QUESTIONNAIRE_LOG_LEVEL", "WARNING").upper(),
    )
