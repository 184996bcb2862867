"""ReportGenerator and export tests.

Statement layout:
    # Introduction and Purpose      (fixed boilerplate)
    # <section>                     one per distinct label, first-occurrence order
    <policy text>                   recording order, blank line between texts

Early exit: "# Compliance Information Statement\\n\\n<message>\\n", answers ignored.
"""

from datetime import date

import pytest

from policy_questionnaire.report import (
    ReportGenerator,
    export_report,
    group_by_section,
    report_filename,
)

from helpers.catalogs import answer

INTRO_HEADING = "# Introduction and Purpose\n\n"
INTRO_END = "approaches its security.\n"


# =====================================================================
# Early-exit notice
# =====================================================================


class TestExitNotice:

    def test_exact_output(self, reports):
        assert reports.generate([], "I owe you nothing") == (
            "# Compliance Information Statement\n\nI owe you nothing\n"
        )

    def test_answers_ignored(self, reports):
        answers = [answer("q1", "A", "ignored text")]
        out = reports.generate(answers, "Bye")
        assert out == "# Compliance Information Statement\n\nBye\n"

    def test_message_is_verbatim(self, reports):
        """No escaping: the message is plain text, not HTML."""
        msg = "Use <SECURITY.md> & {{ nothing }}"
        assert reports.generate([], msg).endswith(f"\n\n{msg}\n")

    @pytest.mark.parametrize("exit_message", [None, ""])
    def test_empty_message_renders_statement(self, reports, exit_message):
        out = reports.generate([answer("q1", "A", "text")], exit_message)
        assert out.startswith(INTRO_HEADING)


# =====================================================================
# Statement grouping
# =====================================================================


class TestStatement:

    def test_no_answers_is_intro_only(self, reports):
        out = reports.generate([])
        assert out.startswith(INTRO_HEADING)
        assert out.endswith(INTRO_END)
        assert "\n# " not in out

    def test_intro_is_fixed_text(self, reports):
        out = reports.generate([])
        assert "the central file in the project’s repository" in out

    def test_first_occurrence_order(self, reports):
        """Sections [B, A, B] render B's block (both texts) before A's."""
        answers = [
            answer("q1", "B", "b one"),
            answer("q2", "A", "a one"),
            answer("q3", "B", "b two"),
        ]
        out = reports.generate(answers)
        assert out.startswith(INTRO_HEADING)
        assert out.endswith(
            INTRO_END + "\n# B\n\nb one\n\nb two\n\n# A\n\na one\n"
        )

    def test_not_alphabetical(self, reports):
        answers = [answer("q1", "Zeta", "z"), answer("q2", "Alpha", "a")]
        out = reports.generate(answers)
        assert out.index("# Zeta") < out.index("# Alpha")

    def test_unlabelled_answers_omitted(self, reports):
        answers = [
            answer("q1", None, "orphan text"),
            answer("q2", "A", "kept"),
        ]
        out = reports.generate(answers)
        assert "orphan text" not in out
        assert out.endswith("\n# A\n\nkept\n")

    def test_section_without_text_keeps_position(self, reports):
        answers = [
            answer("q1", "A", None),
            answer("q2", "B", "b text"),
            answer("q3", "A", "a text"),
        ]
        out = reports.generate(answers)
        assert out.endswith(INTRO_END + "\n# A\n\na text\n\n# B\n\nb text\n")

    def test_section_with_no_text_at_all(self, reports):
        out = reports.generate([answer("q1", "Empty", None)])
        assert out.endswith(INTRO_END + "\n# Empty\n")

    def test_deterministic(self, reports):
        answers = [answer("q1", "B", "b"), answer("q2", "A", "a")]
        assert reports.generate(answers) == reports.generate(answers)
        assert reports.generate(answers, "x") == reports.generate(answers, "x")

    def test_independent_instances_agree(self, reports):
        answers = [answer("q1", "B", "b"), answer("q2", "A", "a")]
        assert ReportGenerator().generate(answers) == reports.generate(answers)

    def test_full_packaged_run(self, engine, session):
        for option_id in ["paid", "documented", "full-process", "active-testing"]:
            engine.submit_answer(session, option_id)
        out = engine.generate_report(session)
        headings = [line for line in out.splitlines() if line.startswith("# ")]
        assert headings == [
            "# Introduction and Purpose",
            "# Commercial Use and Support",
            "# Secure Development",
            "# Vulnerability Management",
            "# Security Design and Testing",
        ]
        assert "SECURITY.md" in out


class TestGroupBySection:

    def test_grouping(self):
        answers = [
            answer("q1", "B", "b1"),
            answer("q2", "A", "a1"),
            answer("q3", None, "skip"),
            answer("q4", "B", "b2"),
        ]
        groups = group_by_section(answers)
        assert list(groups) == ["B", "A"]
        assert groups["B"] == ["b1", "b2"]
        assert groups["A"] == ["a1"]

    def test_empty(self):
        assert group_by_section([]) == {}


# =====================================================================
# Custom templates
# =====================================================================


def test_custom_template_dir(tmp_path):
    (tmp_path / "statement.md.jinja2").write_text(
        "{% for title, body in sections %}[{{ title }}] {{ body }}\n{% endfor %}",
        encoding="utf-8",
    )
    (tmp_path / "exit_notice.md.jinja2").write_text("EXIT: {{ exit_message }}\n", encoding="utf-8")
    gen = ReportGenerator(tmp_path)
    assert gen.generate([answer("q1", "A", "x")]) == "[A] x\n"
    assert gen.generate([], "bye") == "EXIT: bye\n"


# =====================================================================
# Export
# =====================================================================


class TestExport:

    def test_filename(self):
        assert report_filename(date(2026, 10, 19)).endswith("-2026-10-19.md")

    def test_filename_defaults_to_today(self):
        before = date.today()
        name = report_filename()
        after = date.today()
        assert name in {report_filename(before), report_filename(after)}

    def test_writes_content(self, tmp_path):
        path = export_report("# Hello\n", tmp_path, day=date(2026, 1, 2))
        assert path == tmp_path / report_filename(date(2026, 1, 2))
        assert path.read_text(encoding="utf-8") == "# Hello\n"

    def test_creates_directory(self, tmp_path):
        target = tmp_path / "nested" / "out"
        path = export_report("x", str(target))
        assert path.parent == target
        assert path.exists()

    def test_overwrites_same_day(self, tmp_path):
        day = date(2026, 1, 2)
        export_report("first", tmp_path, day=day)
        path = export_report("second", tmp_path, day=day)
        assert path.read_text(encoding="utf-8") == "second"
