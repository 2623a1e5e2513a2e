"""Report builders: plain-dict program briefs and match reports."""
from core.reports.formatting import format_budget, format_area
from core.reports.program_brief import build_program_brief
from core.reports.match_report import build_match_report, match_result_to_dict

__all__ = ['format_budget', 'format_area', 'build_program_brief', 'build_match_report', 'match_result_to_dict']
