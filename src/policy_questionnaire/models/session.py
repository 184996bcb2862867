"""Session and step models — the contract between the engine and callers.

``Session`` is the only mutable state in the SDK.  The engine creates it and
every engine operation takes it explicitly, so any number of independent
sessions can coexist (one per user, one per test).

Step types:
  - QuestionStep: present the next question to the user
  - CompletionStep: session ended (finished, exited early, or disqualified)

The ``StepResult`` union covers both cases so callers can dispatch on ``type``.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from .enums import CompletionReason, SessionStatus


class Answer(BaseModel):
    """Immutable record of one committed choice.

    Carries copies of the option's label, policy text and resolved section
    so the report never has to look back into the catalog.
    """

    model_config = ConfigDict(frozen=True)

    qid: str
    option_id: str
    option_label: str
    question: str
    section: Optional[str] = None
    policy_text: Optional[str] = None


class Session(BaseModel):
    """Per-run state: position, recorded answers, completion status.

    The engine keeps ``len(answers) == position``: completing a session
    also moves the position past the question that completed it.
    """

    position: int = 0
    answers: list[Answer] = []
    status: SessionStatus = SessionStatus.IN_PROGRESS
    completion_reason: Optional[CompletionReason] = None
    exit_message: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return self.status == SessionStatus.COMPLETED

    def answer_map(self) -> dict[str, str]:
        """Chosen option id keyed by qid, in recording order."""
        return {a.qid: a.option_id for a in self.answers}


class QuestionPayload(BaseModel):
    """Flattened question for presentation layers.

    Strips routing details (exit flags, predicates, policy text) and keeps
    only what the UI needs to render the question.
    """

    qid: str
    question: str
    # [{id, label}] in catalog order
    options: list[dict]
    section: str | None = None


class QuestionStep(BaseModel):
    """Engine step: present a question and wait for an option id."""

    type: Literal["question"] = "question"
    position: int
    total: int
    question: QuestionPayload


class CompletionStep(BaseModel):
    """Engine step: session completed.

    ``exit_message`` is only set when ``reason`` is ``exited_early``.
    """

    type: Literal["completed"] = "completed"
    reason: CompletionReason
    exit_message: str | None = None
    answered: int
    total: int


StepResult = QuestionStep | CompletionStep


class SessionInfo(BaseModel):
    """Public view of session state for presentation layers."""

    status: SessionStatus
    position: int
    answered: int
    total: int
    progress_fraction: float
    completion_reason: CompletionReason | None = None
    exit_message: str | None = None

    @property
    def is_complete(self) -> bool:
        return self.status == SessionStatus.COMPLETED
