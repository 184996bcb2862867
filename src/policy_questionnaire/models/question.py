"""Question and option models for the questionnaire catalog.

A catalog is an ordered list of single-choice questions.  Each option may:
  - end the workflow early (``exit_workflow`` + ``exit_message``)
  - carry policy text that ends up in the generated statement
  - carry a section label used to group that text in the statement

A question may also carry ``continue_when`` predicates: if they do not all
hold once the question is answered, the session completes as disqualified.
The predicates are data, so new gating questions need no engine changes.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator


class Predicate(BaseModel):
    """A single condition on the option chosen for a question.

    ``qid`` defaults to the question that owns the predicate.  It may name an
    earlier question instead, which lets a gate depend on prior answers.

    Operators:
      - eq, ne: chosen option id equals / differs from ``value``
      - in, not_in: chosen option id is / is not in the list ``value``
      - matches: regex search of ``value`` against the chosen option id
    """

    model_config = ConfigDict(frozen=True)

    qid: Optional[str] = None
    op: Literal["eq", "ne", "in", "not_in", "matches"]
    # Option ids are strings; an unquoted YAML yes/no would load as a bool
    value: Union[str, List[str]]

    @model_validator(mode="after")
    def _chk(self):
        if self.op in ("in", "not_in"):
            if not isinstance(self.value, list):
                raise ValueError(f"'{self.op}' predicate needs a list value")
        elif not isinstance(self.value, str):
            raise ValueError(f"'{self.op}' predicate needs a single string value")
        return self


class Option(BaseModel):
    """A selectable answer to a question."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    exit_workflow: bool = False
    exit_message: Optional[str] = None
    policy_text: Optional[str] = None
    # Falls back to the parent question's section when omitted
    section: Optional[str] = None

    @model_validator(mode="after")
    def _chk(self):
        if self.exit_workflow and not (self.exit_message or "").strip():
            raise ValueError(f"exit option '{self.id}' must carry an exit_message")
        return self


class Question(BaseModel):
    """A single-choice question in catalog order."""

    model_config = ConfigDict(frozen=True)

    qid: str
    question: str
    options: List[Option]
    section: Optional[str] = None
    continue_when: List[Predicate] = []

    @model_validator(mode="after")
    def _chk(self):
        if not self.options:
            raise ValueError(f"question '{self.qid}' has no options")
        seen: set[str] = set()
        for opt in self.options:
            if opt.id in seen:
                raise ValueError(f"duplicate option id '{opt.id}' in question '{self.qid}'")
            seen.add(opt.id)
        return self

    @property
    def is_gating(self) -> bool:
        """True if answering this question can disqualify the session."""
        return bool(self.continue_when)

    def get_option(self, option_id: str) -> Option | None:
        """Return the option with *option_id*, or None if there is none."""
        for opt in self.options:
            if opt.id == option_id:
                return opt
        return None

    def section_for(self, option: Option) -> str | None:
        """Section label an answer with *option* is grouped under."""
        return option.section or self.section
