"""Policy checks over the linked roster and rendering of their findings."""

from orgreport.validation.issues import ManagerSalaryIssue, OrgReport, ReportingLineIssue
from orgreport.validation.compensation import check_salary_compliance
from orgreport.validation.reporting_lines import check_reporting_line_length
from orgreport.validation.report import analyze_structure, report_frames
from orgreport.validation.reporters import format_report, save_report
