"""QuestionCatalog — loads the questionnaire YAML into typed models.

This is the single source of truth for question data at runtime.  The
catalog is loaded once at startup and is read-only afterwards.

Usage::

    catalog = QuestionCatalog()     # defaults to the packaged data/catalog.yaml
    catalog.load()

    q = catalog.question_at(0)
    total = catalog.length()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

import yaml

from policy_questionnaire.constants import DEFAULT_CATALOG_PATH
from policy_questionnaire.errors import CatalogError, OutOfRangeError
from policy_questionnaire.models.question import Question

logger = logging.getLogger(__name__)


def load_yaml(path: Path | str) -> Any:
    """Load a single YAML file and return the parsed contents."""
    if isinstance(path, str):
        path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing YAML file: {path}")
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


class QuestionCatalog:
    """Ordered, immutable list of questions.

    Either point it at a YAML file and call :meth:`load`, or build it from
    already-parsed questions with :meth:`from_questions` (handy in tests).
    """

    def __init__(self, catalog_path: str | Path | None = None) -> None:
        self._path = Path(catalog_path) if catalog_path is not None else DEFAULT_CATALOG_PATH

        # Populated by load()
        self._questions: tuple[Question, ...] = ()
        self._index: dict[str, int] = {}

    @classmethod
    def from_questions(cls, questions: Iterable[Question | dict]) -> "QuestionCatalog":
        """Build a loaded catalog from Question models or raw dicts."""
        catalog = cls()
        catalog._set_questions(
            q if isinstance(q, Question) else Question(**q) for q in questions
        )
        return catalog

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Parse the catalog YAML into typed models.

        Call this once at startup.  Raises ``FileNotFoundError`` if the file
        is missing, ``CatalogError`` for structural defects and pydantic's
        ``ValidationError`` for field-level defects.
        """
        raw_list = load_yaml(self._path)
        if not isinstance(raw_list, list):
            raise CatalogError(f"Catalog {self._path} must be a list of questions")
        self._set_questions(Question(**raw) for raw in raw_list)
        logger.info("QuestionCatalog loaded: %d questions from %s", len(self._questions), self._path)

    def _set_questions(self, questions: Iterable[Question]) -> None:
        parsed = tuple(questions)
        if not parsed:
            raise CatalogError(f"Catalog {self._path} has no questions")
        index: dict[str, int] = {}
        for i, q in enumerate(parsed):
            if q.qid in index:
                raise CatalogError(f"Duplicate question id '{q.qid}'")
            index[q.qid] = i
            # Gates may only look at this question or earlier ones; later
            # questions are never answered when the gate is evaluated.
            for pred in q.continue_when:
                ref = pred.qid or q.qid
                if ref not in index:
                    raise CatalogError(
                        f"Question '{q.qid}' has a predicate on '{ref}', "
                        f"which is not an earlier question"
                    )
        self._questions = parsed
        self._index = index

    # ------------------------------------------------------------------
    # Lookup helpers
    # ------------------------------------------------------------------

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    def length(self) -> int:
        return len(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def question_at(self, index: int) -> Question:
        """Return the question at *index* in catalog order.

        Raises:
            OutOfRangeError: if *index* is outside ``[0, length())``.
                Negative indices are rejected rather than wrapped.
        """
        if not 0 <= index < len(self._questions):
            raise OutOfRangeError(
                f"Question index {index} out of range (catalog has {len(self._questions)})"
            )
        return self._questions[index]

    def get_question(self, qid: str) -> Question:
        """Look up a question by qid.

        Raises:
            KeyError: if the qid is not in the catalog.
        """
        return self._questions[self._index[qid]]

    def index_of(self, qid: str) -> int:
        """Catalog position of *qid* (KeyError if unknown)."""
        return self._index[qid]
