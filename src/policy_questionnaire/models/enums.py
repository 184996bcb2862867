"""Enumerations for questionnaire sessions."""

import enum


class SessionStatus(str, enum.Enum):
    """Lifecycle states for a questionnaire session.

    Transitions:
        in_progress -> completed   (last question answered, exit option,
                                    or gating answer)
        completed -> in_progress   (go back, restart)
    """

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class CompletionReason(str, enum.Enum):
    """Why a completed session stopped asking questions."""

    FINISHED = "finished"
    EXITED_EARLY = "exited_early"
    DISQUALIFIED = "disqualified"
