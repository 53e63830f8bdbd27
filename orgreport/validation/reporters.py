"""Report rendering and formatting.

Converts an OrgReport into human-readable text, rich tables or JSON.
Presentation only: every decision was already made by the policy checks.
"""

import json
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.table import Table

from orgreport.config import PolicyConfig
from orgreport.utils.types import ReportFormat
from orgreport.validation.issues import ManagerSalaryIssue, OrgReport, ReportingLineIssue

BANNER = "=" * 55


def _money(amount: float) -> str:
    return f"${amount:,.2f}"


def _pct(factor: float) -> str:
    return f"{(factor - 1) * 100:.0f}%"


def _salary_lines(issues: list[ManagerSalaryIssue], direction: str, bound: str) -> list[str]:
    if not issues:
        return ["  - None."]
    lines = []
    for issue in issues:
        limit = issue.expected_min if bound == "minimum required" else issue.expected_max
        lines.append(
            f"  - {issue}: Earns {_money(issue.difference)} {direction} than the "
            f"{bound} salary of {_money(limit)}."
        )
    return lines


def _line_lines(issues: list[ReportingLineIssue]) -> list[str]:
    return [
        f"  - {issue}: Has {issue.actual_length} managers in the chain, "
        f"which is {issue.excess} too many."
        for issue in issues
    ]


def _to_text(report: OrgReport, policy: PolicyConfig) -> str:
    low, high = _pct(policy.min_salary_factor), _pct(policy.max_salary_factor)
    max_len = policy.max_reporting_line_length

    lines = [
        "",
        BANNER,
        "     ORGANIZATIONAL STRUCTURE ANALYSIS REPORT",
        BANNER,
        "",
        f"--- 1. SALARY COMPLIANCE VIOLATIONS "
        f"(Min {low}, Max {high} more than average subordinate salary) ---",
        "",
    ]

    if report.salary_compliant:
        lines.append(f"  ✓ All managers comply with the {low} - {high} salary rules.")
    else:
        lines.append("A) MANAGERS EARNING LESS THAN REQUIRED:")
        lines += _salary_lines(report.low_earning_managers, "less", "minimum required")
        lines += ["", "B) MANAGERS EARNING MORE THAN ALLOWED:"]
        lines += _salary_lines(report.high_earning_managers, "more", "maximum allowed")

    lines += ["", f"--- 2. REPORTING LINE LENGTH VIOLATIONS (Max chain length: {max_len}) ---", ""]

    if not report.long_reporting_lines:
        lines.append(
            f"  ✓ All employees have a reporting line of {max_len} managers or less to the CEO."
        )
    else:
        lines.append(f"Employees with more than {max_len} managers between them and the CEO:")
        lines += _line_lines(report.long_reporting_lines)

    lines += ["", BANNER]
    return "\n".join(lines)


def _salary_table(title: str, issues: list[ManagerSalaryIssue]) -> Table:
    table = Table(title=title)
    table.add_column("Manager", style="cyan")
    table.add_column("ID", justify="right")
    table.add_column("Expected Min", justify="right")
    table.add_column("Expected Max", justify="right")
    table.add_column("Difference", justify="right", style="bold")

    for issue in issues:
        table.add_row(
            issue.manager_name,
            str(issue.manager_id),
            _money(issue.expected_min),
            _money(issue.expected_max),
            _money(issue.difference),
        )
    return table


def _to_table(report: OrgReport, policy: PolicyConfig) -> str:
    lines_table = Table(
        title=f"Reporting Lines Longer Than {policy.max_reporting_line_length}"
    )
    lines_table.add_column("Employee", style="cyan")
    lines_table.add_column("ID", justify="right")
    lines_table.add_column("Chain Length", justify="right")
    lines_table.add_column("Too Many", justify="right", style="bold")
    for issue in report.long_reporting_lines:
        lines_table.add_row(
            issue.employee_name,
            str(issue.employee_id),
            str(issue.actual_length),
            str(issue.excess),
        )

    buf = Console(file=None, force_terminal=False, width=120)
    with buf.capture() as capture:
        buf.print(_salary_table("Managers Earning Less Than Required", report.low_earning_managers))
        buf.print(_salary_table("Managers Earning More Than Allowed", report.high_earning_managers))
        buf.print(lines_table)
    return capture.get()


def _to_json(report: OrgReport, policy: PolicyConfig) -> str:
    def _salary(issue: ManagerSalaryIssue) -> dict:
        return {
            "manager_name": issue.manager_name,
            "manager_id": issue.manager_id,
            "expected_min": round(issue.expected_min, 2),
            "expected_max": round(issue.expected_max, 2),
            "difference": round(issue.difference, 2),
        }

    document = {
        "timestamp": datetime.now().isoformat(),
        "policy": {
            "min_salary_factor": policy.min_salary_factor,
            "max_salary_factor": policy.max_salary_factor,
            "max_reporting_line_length": policy.max_reporting_line_length,
        },
        "low_earning_managers": [_salary(i) for i in report.low_earning_managers],
        "high_earning_managers": [_salary(i) for i in report.high_earning_managers],
        "long_reporting_lines": [
            {
                "employee_name": i.employee_name,
                "employee_id": i.employee_id,
                "actual_length": i.actual_length,
                "excess": i.excess,
            }
            for i in report.long_reporting_lines
        ],
    }
    return json.dumps(document, indent=2)


def format_report(
    report: OrgReport,
    policy: PolicyConfig | None = None,
    output_format: ReportFormat | str = ReportFormat.TEXT,
) -> str:
    """Render the report in the requested format."""
    policy = policy or PolicyConfig()

    match ReportFormat(output_format):
        case ReportFormat.JSON:
            return _to_json(report, policy)
        case ReportFormat.TABLE:
            return _to_table(report, policy)
        case ReportFormat.TEXT:
            return _to_text(report, policy)


def save_report(
    report: OrgReport,
    path: Path,
    policy: PolicyConfig | None = None,
    fmt: ReportFormat | str = ReportFormat.TEXT,
) -> Path:
    """Persist a rendered report to disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_report(report, policy, fmt) + "\n", encoding="utf-8")
    return path
