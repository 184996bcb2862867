import pytest

from policy_questionnaire.catalog import QuestionCatalog
from policy_questionnaire.engine import QuestionnaireEngine
from policy_questionnaire.report.generator import ReportGenerator


@pytest.fixture(scope="session")
def catalog():
    """Load the packaged catalog once for the entire test session."""
    c = QuestionCatalog()
    c.load()
    return c


@pytest.fixture(scope="session")
def reports():
    return ReportGenerator()


@pytest.fixture
def engine(catalog):
    """QuestionnaireEngine over the packaged catalog."""
    return QuestionnaireEngine(catalog)


@pytest.fixture
def session(engine):
    """Fresh session at the first question."""
    return engine.create_session()
