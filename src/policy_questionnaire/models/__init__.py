"""Public model re-exports for policy_questionnaire.

Consumers should import from ``policy_questionnaire.models`` rather than
reaching into sub-modules directly.
"""

# --- Enums ---
from policy_questionnaire.models.enums import CompletionReason, SessionStatus

# --- Questions ---
from policy_questionnaire.models.question import Option, Predicate, Question

# --- Session / step ---
from policy_questionnaire.models.session import (
    Answer,
    CompletionStep,
    QuestionPayload,
    QuestionStep,
    Session,
    SessionInfo,
    StepResult,
)

__all__ = [
    # Enums
    "CompletionReason",
    "SessionStatus",
    # Questions
    "Option",
    "Predicate",
    "Question",
    # Session
    "Answer",
    "CompletionStep",
    "QuestionPayload",
    "QuestionStep",
    "Session",
    "SessionInfo",
    "StepResult",
]
