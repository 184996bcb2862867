"""ContinuationEvaluator — resolves a question's gating predicates.

After a non-exit answer is recorded, the engine calls :meth:`should_continue`
with the question and the answers so far.  The question's ``continue_when``
predicates are AND-ed together; a question without predicates always
continues.

Predicates compare the chosen option id of the referenced question (the
owning question unless ``qid`` names an earlier one).  A predicate on an
unanswered question evaluates to False.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from policy_questionnaire.models.question import Predicate, Question

logger = logging.getLogger(__name__)


class ContinuationEvaluator:
    """Evaluates continuation predicates against a session's answers."""

    def should_continue(self, question: Question, answers: dict[str, str]) -> bool:
        """Return True if the flow may continue past *question*.

        Args:
            question: the question that was just answered
            answers: chosen option id keyed by qid, including *question*'s
        """
        for pred in question.continue_when:
            if not self._eval_predicate(pred, question.qid, answers):
                logger.debug(
                    "Gate on %s failed: %s %s %r", question.qid, pred.qid or question.qid,
                    pred.op, pred.value,
                )
                return False
        return True

    # ------------------------------------------------------------------
    # Predicate evaluation
    # ------------------------------------------------------------------

    def _eval_predicate(self, pred: Predicate, owner_qid: str, answers: dict[str, str]) -> bool:
        answer = answers.get(pred.qid or owner_qid)
        if answer is None:
            return False
        return self._compare(pred.op, answer, pred.value)

    @staticmethod
    def _compare(op: str, answer: str, value: Any) -> bool:
        """Apply an operator to a chosen option id and an expected value."""
        if op == "eq":
            return answer == value

        if op == "ne":
            return answer != value

        if op == "in":
            return answer in value

        if op == "not_in":
            return answer not in value

        if op == "matches":
            return bool(re.search(str(value), answer))

        logger.warning("Unknown predicate operator: %s", op)
        return False
