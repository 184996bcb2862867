"""go_back tests — discarding the most recent answer.

  | Current state                    | Goes back to                          |
  |----------------------------------|---------------------------------------|
  | Position 0, no answers           | Error — already at first question     |
  | In progress at position p > 0    | Question p - 1, its answer removed    |
  | Completed (any reason)           | The question that completed it        |

Additionally verifies:
  - After go_back, re-submitting the same option reproduces the same Answer
  - Completion reason and exit message are cleared
  - Multiple consecutive go_back calls walk back to the start
"""

import pytest

from policy_questionnaire.errors import NotAllowedError
from policy_questionnaire.models.enums import SessionStatus
from policy_questionnaire.models.session import QuestionStep

from helpers.catalogs import HAPPY_PATH


def test_go_back_at_start_not_allowed(engine, session):
    before = session.model_dump()
    with pytest.raises(NotAllowedError, match="first question"):
        engine.go_back(session)
    assert session.model_dump() == before


def test_go_back_after_restart_not_allowed(engine, session):
    engine.submit_answer(session, "paid")
    engine.restart(session)
    with pytest.raises(NotAllowedError):
        engine.go_back(session)


def test_go_back_one_step(engine, session):
    engine.submit_answer(session, "paid")
    engine.submit_answer(session, "documented")
    step = engine.go_back(session)
    assert isinstance(step, QuestionStep)
    assert step.position == 1
    assert step.question.qid == "security-practices"
    assert [a.qid for a in session.answers] == ["commercial-support"]


def test_go_back_to_start(engine, session):
    engine.submit_answer(session, "paid")
    step = engine.go_back(session)
    assert step.position == 0
    assert session.answers == []


def test_go_back_from_exit_reopens(engine, session):
    engine.submit_answer(session, "no")
    step = engine.go_back(session)
    assert isinstance(step, QuestionStep)
    assert step.question.qid == "commercial-support"
    assert session.status == SessionStatus.IN_PROGRESS
    assert session.completion_reason is None
    assert session.exit_message is None
    assert session.answers == []
    assert engine.session_info(session).exit_message is None


def test_go_back_from_disqualified(engine, session):
    engine.submit_answer(session, "implicit")
    step = engine.go_back(session)
    assert step.question.qid == "commercial-support"
    assert not session.is_complete


def test_go_back_from_finished(engine, session):
    for option_id in HAPPY_PATH:
        engine.submit_answer(session, option_id)
    step = engine.go_back(session)
    assert isinstance(step, QuestionStep)
    assert step.position == 3
    assert step.question.qid == "security-design"
    assert len(session.answers) == 3
    assert engine.current_question(session).qid == "security-design"


def test_resubmit_reproduces_identical_answer(engine, session):
    for option_id in HAPPY_PATH[:3]:
        engine.submit_answer(session, option_id)
    original = session.answers[-1]

    engine.go_back(session)
    engine.submit_answer(session, HAPPY_PATH[2])
    assert session.answers[-1] == original
    assert len(session.answers) == 3


def test_resubmit_after_finish_reproduces_completion(engine, session):
    for option_id in HAPPY_PATH:
        engine.submit_answer(session, option_id)
    snapshot = session.model_dump()

    engine.go_back(session)
    engine.submit_answer(session, HAPPY_PATH[-1])
    assert session.model_dump() == snapshot


def test_change_answer_after_going_back(engine, session):
    """Going back and choosing differently replaces the answer."""
    engine.submit_answer(session, "paid")
    engine.go_back(session)
    engine.submit_answer(session, "designed")
    assert [a.option_id for a in session.answers] == ["designed"]


def test_consecutive_go_back_walks_to_start(engine, session):
    for option_id in HAPPY_PATH:
        engine.submit_answer(session, option_id)
    for expected_position in (3, 2, 1, 0):
        step = engine.go_back(session)
        assert step.position == expected_position
        assert len(session.answers) == expected_position
    with pytest.raises(NotAllowedError):
        engine.go_back(session)


def test_answers_never_exceed_position(engine, session):
    for option_id in HAPPY_PATH:
        engine.submit_answer(session, option_id)
        assert len(session.answers) <= session.position
    engine.go_back(session)
    assert len(session.answers) <= session.position
