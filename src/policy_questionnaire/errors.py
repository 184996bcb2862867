"""Exceptions raised by the questionnaire SDK.

Every error derives from ``QuestionnaireError``, itself a ``ValueError``,
so callers can keep catching ``ValueError`` around engine calls.  All of
them are local and recoverable: the presentation layer is expected to guard
against them through the session state queries, and the session is left
untouched whenever one is raised.
"""


class QuestionnaireError(ValueError):
    """Base class for questionnaire errors."""


class CatalogError(QuestionnaireError):
    """The catalog data is malformed (duplicate ids, bad predicate references)."""


class OutOfRangeError(QuestionnaireError, IndexError):
    """The catalog was queried past its bounds."""


class InvalidOptionError(QuestionnaireError):
    """The submitted option id does not belong to the current question."""


class NotAllowedError(QuestionnaireError):
    """The operation is not valid in the session's current state."""
