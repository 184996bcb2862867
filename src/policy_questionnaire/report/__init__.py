"""Statement rendering and export.

Provides ``ReportGenerator``, a Jinja2-based renderer that turns recorded
answers into the Markdown statement, and ``export_report`` for writing it
to a dated file.
"""

from policy_questionnaire.report.export import export_report, report_filename
from policy_questionnaire.report.generator import ReportGenerator, group_by_section

__all__ = ["ReportGenerator", "export_report", "group_by_section", "report_filename"]
