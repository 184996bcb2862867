"""Terminal front-end for the questionnaire.

Runs the questionnaire interactively, or from a scripted list of answers,
then prints the generated statement and saves it as a dated Markdown file.

Usage::

    # Interactive run (b = back, r = restart, q = quit; Enter accepts the result)
    policy-questionnaire

    # Scripted run: option ids in catalog order, optionally as qid=option
    policy-questionnaire paid documented full-process active-testing
    policy-questionnaire commercial-support=no --no-save

    # Print the catalog and exit
    policy-questionnaire --list-questions
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

from policy_questionnaire.catalog import QuestionCatalog
from policy_questionnaire.config import QuestionnaireSettings, load_settings
from policy_questionnaire.constants import COMPLETION_REASON_LABELS
from policy_questionnaire.engine import QuestionnaireEngine
from policy_questionnaire.errors import QuestionnaireError
from policy_questionnaire.models.session import CompletionStep, QuestionStep, Session
from policy_questionnaire.report.export import export_report
from policy_questionnaire.report.generator import ReportGenerator

logger = logging.getLogger(__name__)

_BACK = "b"
_RESTART = "r"
_QUIT = "q"


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _print_question(step: QuestionStep) -> None:
    q = step.question
    print()
    print(f"[{step.position + 1}/{step.total}] {q.question}")
    for i, opt in enumerate(q.options, 1):
        print(f"  {i}. {opt['label']}  ({opt['id']})")


def _print_completion(step: CompletionStep, report: str) -> None:
    print()
    print(f"{COMPLETION_REASON_LABELS[step.reason.value]} ({step.answered}/{step.total} answered)")
    print("=" * 62)
    print(report, end="")
    print("=" * 62)


def list_questions(catalog: QuestionCatalog) -> None:
    """Print every question with its option ids."""
    for i, q in enumerate(catalog.questions, 1):
        gate = "  [gating]" if q.is_gating else ""
        print(f"{i:2d}. {q.qid}: {q.question}{gate}")
        for opt in q.options:
            flag = "  [exits]" if opt.exit_workflow else ""
            print(f"      - {opt.id}: {opt.label}{flag}")


# ---------------------------------------------------------------------------
# Runners
# ---------------------------------------------------------------------------


def _resolve_choice(step: QuestionStep, raw: str) -> str:
    """Map a typed option number or id to an option id."""
    if raw.isdigit():
        idx = int(raw) - 1
        if 0 <= idx < len(step.question.options):
            return step.question.options[idx]["id"]
    return raw


def run_scripted(engine: QuestionnaireEngine, session: Session, answers: list[str]) -> bool:
    """Feed *answers* to the engine in order.

    Each entry is an option id, or ``qid=option`` to also check which
    question it answers.  Returns True if the session completed with every
    answer consumed.
    """
    for raw in answers:
        step = engine.get_current_step(session)
        if isinstance(step, CompletionStep):
            print(f"error: extra answer {raw!r} after completion", file=sys.stderr)
            return False
        qid, sep, option_id = raw.partition("=")
        if not sep:
            qid, option_id = step.question.qid, raw
        if qid != step.question.qid:
            print(
                f"error: expected an answer for {step.question.qid!r}, got {qid!r}",
                file=sys.stderr,
            )
            return False
        try:
            engine.submit_answer(session, option_id)
        except QuestionnaireError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return False

    if not session.is_complete:
        step = engine.get_current_step(session)
        print(f"error: no answer for {step.question.qid!r}", file=sys.stderr)
        return False
    return True


def run_interactive(
    engine: QuestionnaireEngine,
    session: Session,
    read: Callable[[str], str] = input,
) -> bool:
    """Prompt for answers until the user accepts a completed session.

    The result is shown as soon as the session completes; from there the
    user can still go back or restart.  Pressing Enter (or running out of
    input) accepts it.  Returns False if the user quit, or input ran out
    before the session completed.
    """
    while True:
        step = engine.get_current_step(session)
        if isinstance(step, CompletionStep):
            _print_completion(step, engine.generate_report(session))
            print("Enter = accept, b = back, r = restart, q = quit")
        else:
            _print_question(step)
        try:
            raw = read("> ").strip()
        except EOFError:
            return session.is_complete

        if raw == _QUIT:
            return False
        try:
            if raw == _BACK:
                engine.go_back(session)
            elif raw == _RESTART:
                engine.restart(session)
            elif session.is_complete:
                if not raw:
                    return True
                print(f"  Unknown command {raw!r}")
            else:
                engine.submit_answer(session, _resolve_choice(step, raw))
        except QuestionnaireError as exc:
            print(f"  {exc}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="policy-questionnaire",
        description="Answer a short questionnaire and generate a project security statement.",
    )
    parser.add_argument(
        "answers",
        nargs="*",
        help="Scripted answers in catalog order (option id or qid=option). "
             "Omit to answer interactively.",
    )
    parser.add_argument(
        "--catalog",
        help="Path to a catalog YAML file (default: packaged catalog)",
    )
    parser.add_argument(
        "-o", "--output",
        help="Directory the statement is saved to (default: current directory)",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Print the statement without saving it",
    )
    parser.add_argument(
        "--list-questions",
        action="store_true",
        help="List all questions and option ids and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None, settings: QuestionnaireSettings | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or load_settings()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    catalog = QuestionCatalog(args.catalog or settings.catalog_path)
    catalog.load()

    if args.list_questions:
        list_questions(catalog)
        return 0

    engine = QuestionnaireEngine(catalog, ReportGenerator(settings.template_dir))
    session = engine.create_session()

    if args.answers:
        completed = run_scripted(engine, session, args.answers)
    else:
        completed = run_interactive(engine, session)
    if not completed:
        return 1

    report = engine.generate_report(session)
    if args.answers:
        # The interactive loop has already shown the result
        _print_completion(engine.get_current_step(session), report)

    if not args.no_save:
        path = export_report(report, Path(args.output or settings.output_dir))
        print(f"Saved to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
