"""QuestionnaireEngine — state machine for the linear questionnaire flow.

Stateless engine pattern: the engine holds only read-only collaborators
(catalog, evaluator, report generator).  All per-run state lives in a
:class:`Session` value that the caller owns and passes into every call, so
independent sessions never interfere.

States:
    in_progress(position)  — waiting for an answer to catalog[position]
    completed(reason)      — finished | exited_early | disqualified

Every operation validates fully before it mutates the session, so a raised
error always leaves the session exactly as it was.
"""

from __future__ import annotations

import logging

from policy_questionnaire.catalog import QuestionCatalog
from policy_questionnaire.errors import InvalidOptionError, NotAllowedError
from policy_questionnaire.evaluator import ContinuationEvaluator
from policy_questionnaire.models.enums import CompletionReason, SessionStatus
from policy_questionnaire.models.question import Question
from policy_questionnaire.models.session import (
    Answer,
    CompletionStep,
    QuestionPayload,
    QuestionStep,
    Session,
    SessionInfo,
    StepResult,
)
from policy_questionnaire.report.generator import ReportGenerator

logger = logging.getLogger(__name__)


class QuestionnaireEngine:
    """Drives sessions through the catalog.

    Args:
        catalog: a loaded :class:`QuestionCatalog`
        report_generator: optional renderer; defaults to the packaged templates
    """

    def __init__(
        self,
        catalog: QuestionCatalog,
        report_generator: ReportGenerator | None = None,
    ) -> None:
        self._catalog = catalog
        self._evaluator = ContinuationEvaluator()
        self._reports = report_generator or ReportGenerator()

    @property
    def catalog(self) -> QuestionCatalog:
        return self._catalog

    # ==================================================================
    # Session lifecycle
    # ==================================================================

    def create_session(self) -> Session:
        """Create a new session positioned at the first question."""
        return Session()

    def restart(self, session: Session) -> StepResult:
        """Clear all answers and return to the first question.  Always succeeds."""
        session.answers = []
        session.position = 0
        self._reopen(session)
        logger.debug("Session restarted")
        return self.get_current_step(session)

    # ==================================================================
    # Step API
    # ==================================================================

    def current_question(self, session: Session) -> Question | None:
        """The question awaiting an answer, or None once the session is complete."""
        if session.is_complete:
            return None
        return self._catalog.question_at(session.position)

    def get_current_step(self, session: Session) -> StepResult:
        """Return the current step.  Read-only."""
        if session.is_complete:
            return self._build_completion_step(session)
        question = self._catalog.question_at(session.position)
        return QuestionStep(
            position=session.position,
            total=self._catalog.length(),
            question=self._question_to_payload(question),
        )

    def submit_answer(self, session: Session, option_id: str) -> StepResult:
        """Record *option_id* for the current question and advance.

        Transition policy, first match wins:
          1. exit option          → completed(exited_early) with its message
          2. gate not satisfied   → completed(disqualified)
          3. last question        → completed(finished)
          4. otherwise            → next question

        Raises:
            NotAllowedError: the session is already complete.
            InvalidOptionError: *option_id* is not an option of the current
                question (UI and session are out of sync).
        """
        if session.is_complete:
            logger.warning("submit_answer rejected: session already complete")
            raise NotAllowedError("Cannot submit an answer: session is already complete")

        question = self._catalog.question_at(session.position)
        option = question.get_option(option_id)
        if option is None:
            logger.warning("submit_answer rejected: %r is not an option of %s", option_id, question.qid)
            raise InvalidOptionError(
                f"Option '{option_id}' not found on question '{question.qid}'"
            )

        answer = Answer(
            qid=question.qid,
            option_id=option.id,
            option_label=option.label,
            question=question.question,
            section=question.section_for(option),
            policy_text=option.policy_text,
        )
        reason = self._resolve_completion(session, question, option.id, option.exit_workflow)

        session.answers = [*session.answers, answer]
        session.position += 1
        logger.debug("Recorded %s=%s", question.qid, option.id)

        if reason is not None:
            exit_message = option.exit_message if reason == CompletionReason.EXITED_EARLY else None
            return self._complete(session, reason, exit_message)
        return self.get_current_step(session)

    # ==================================================================
    # Step-back API
    # ==================================================================

    def go_back(self, session: Session) -> StepResult:
        """Discard the most recent answer and return to its question.

        Also reopens a completed session: completion reason and exit
        message are cleared.

        Raises:
            NotAllowedError: nothing has been answered yet.
        """
        if not session.answers:
            logger.warning("go_back rejected: no answers recorded")
            raise NotAllowedError("Cannot go back: already at the first question")

        dropped = session.answers[-1]
        session.answers = session.answers[:-1]
        session.position = max(0, session.position - 1)
        self._reopen(session)
        logger.debug("Stepped back from %s", dropped.qid)
        return self.get_current_step(session)

    # ==================================================================
    # Queries & report
    # ==================================================================

    def session_info(self, session: Session) -> SessionInfo:
        total = self._catalog.length()
        return SessionInfo(
            status=session.status,
            position=session.position,
            answered=len(session.answers),
            total=total,
            progress_fraction=session.position / total,
            completion_reason=session.completion_reason,
            exit_message=session.exit_message,
        )

    def generate_report(self, session: Session) -> str:
        """Render the statement for the answers recorded so far."""
        return self._reports.generate(session.answers, session.exit_message)

    # ==================================================================
    # Internal: helpers
    # ==================================================================

    def _resolve_completion(
        self,
        session: Session,
        question: Question,
        option_id: str,
        exits: bool,
    ) -> CompletionReason | None:
        """Decide whether answering *question* with *option_id* completes the session.

        Runs before the answer is recorded; the gate sees the answers so far
        plus this one.
        """
        if exits:
            return CompletionReason.EXITED_EARLY
        answers = {**session.answer_map(), question.qid: option_id}
        if not self._evaluator.should_continue(question, answers):
            return CompletionReason.DISQUALIFIED
        if session.position + 1 == self._catalog.length():
            return CompletionReason.FINISHED
        return None

    def _complete(
        self,
        session: Session,
        reason: CompletionReason,
        exit_message: str | None = None,
    ) -> CompletionStep:
        session.status = SessionStatus.COMPLETED
        session.completion_reason = reason
        session.exit_message = exit_message
        logger.info("Session completed: %s after %d answers", reason.value, len(session.answers))
        return self._build_completion_step(session)

    @staticmethod
    def _reopen(session: Session) -> None:
        session.status = SessionStatus.IN_PROGRESS
        session.completion_reason = None
        session.exit_message = None

    def _build_completion_step(self, session: Session) -> CompletionStep:
        return CompletionStep(
            reason=session.completion_reason,
            exit_message=session.exit_message,
            answered=len(session.answers),
            total=self._catalog.length(),
        )

    @staticmethod
    def _question_to_payload(question: Question) -> QuestionPayload:
        return QuestionPayload(
            qid=question.qid,
            question=question.question,
            options=[{"id": o.id, "label": o.label} for o in question.options],
            section=question.section,
        )
