"""ReportGenerator — Jinja2-based renderer for the security statement.

Loads templates from the ``template/`` directory and renders recorded
answers into a Markdown document:

  - early exit: a short notice holding only the exit message
  - otherwise: a fixed introduction followed by one section per distinct
    section label, in the order each label first appears in the answers

Answers without a section label are left out of the statement.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import jinja2

from policy_questionnaire.constants import (
    DEFAULT_TEMPLATE_DIR,
    EXIT_NOTICE_TEMPLATE,
    STATEMENT_TEMPLATE,
)
from policy_questionnaire.models.session import Answer

logger = logging.getLogger(__name__)


def group_by_section(answers: Iterable[Answer]) -> dict[str, list[str]]:
    """Group policy text by section label.

    Keys keep the position of their first insertion, so sections come out
    in first-occurrence order; texts keep recording order.  An answer with a
    section but no policy text still claims its section's position.
    """
    groups: dict[str, list[str]] = {}
    for answer in answers:
        if not answer.section:
            continue
        texts = groups.setdefault(answer.section, [])
        if answer.policy_text:
            texts.append(answer.policy_text)
    return groups


class ReportGenerator:
    """Renders answers (or an exit message) into the statement text.

    Args:
        template_dir: optional override for the template directory.
            Defaults to ``template/`` sibling of this module.
    """

    def __init__(self, template_dir: Path | str | None = None) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR
        self._env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            # Templates rely on explicit trim so output is byte-stable
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )

    def generate(self, answers: Iterable[Answer], exit_message: str | None = None) -> str:
        """Render the statement.

        A non-empty *exit_message* short-circuits to the exit notice and the
        answers are ignored.
        """
        if exit_message:
            return self._env.get_template(EXIT_NOTICE_TEMPLATE).render(exit_message=exit_message)

        groups = group_by_section(answers)
        sections = [(title, "\n\n".join(texts)) for title, texts in groups.items()]
        logger.debug("Rendering statement with %d sections", len(sections))
        return self._env.get_template(STATEMENT_TEMPLATE).render(sections=sections)
