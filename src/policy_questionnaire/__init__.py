"""policy_questionnaire — guided questionnaire that compiles a security statement.

Public API:
    QuestionnaireEngine — state machine driving a Session through the catalog
    QuestionCatalog     — loads the catalog YAML into typed models
    ReportGenerator     — renders recorded answers into the Markdown statement
    export_report       — writes a statement to a dated file
    Session             — the per-run mutable state owned by the caller
    StepResult          — union type returned by engine step methods
    QuestionStep        — step: present a question to the user
    CompletionStep      — step: session completed with a reason
    SessionInfo         — public view of session state

Errors:
    QuestionnaireError  — base class (a ValueError)
    OutOfRangeError, InvalidOptionError, NotAllowedError, CatalogError
"""

from policy_questionnaire.catalog import QuestionCatalog
from policy_questionnaire.engine import QuestionnaireEngine
from policy_questionnaire.errors import (
    CatalogError,
    InvalidOptionError,
    NotAllowedError,
    OutOfRangeError,
    QuestionnaireError,
)
from policy_questionnaire.models import (
    Answer,
    CompletionReason,
    CompletionStep,
    Option,
    Predicate,
    Question,
    QuestionPayload,
    QuestionStep,
    Session,
    SessionInfo,
    SessionStatus,
    StepResult,
)
from policy_questionnaire.report import ReportGenerator, export_report

__all__ = [
    # Engine, catalog & report
    "QuestionnaireEngine",
    "QuestionCatalog",
    "ReportGenerator",
    "export_report",
    # Catalog models
    "Option",
    "Predicate",
    "Question",
    # Session / step
    "Answer",
    "CompletionReason",
    "CompletionStep",
    "QuestionPayload",
    "QuestionStep",
    "Session",
    "SessionInfo",
    "SessionStatus",
    "StepResult",
    # Errors
    "CatalogError",
    "InvalidOptionError",
    "NotAllowedError",
    "OutOfRangeError",
    "QuestionnaireError",
]
