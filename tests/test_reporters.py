"""Tests for report rendering."""

import json

import pytest

from orgreport.config import PolicyConfig
from orgreport.validation import (
    ManagerSalaryIssue,
    OrgReport,
    ReportingLineIssue,
    format_report,
    save_report,
)


@pytest.fixture
def report() -> OrgReport:
    return OrgReport(
        low_earning_managers=[ManagerSalaryIssue("Martin Chekov", 124, 60000.0, 75000.0, 15000.0)],
        high_earning_managers=[],
        long_reporting_lines=[ReportingLineIssue("Brett Hardleaf", 305, 6, 1)],
    )


def test_text_report_lists_issues(report):
    text = format_report(report)

    assert "ORGANIZATIONAL STRUCTURE ANALYSIS REPORT" in text
    assert "Min 20%, Max 50%" in text
    assert (
        "Martin Chekov (ID: 124): Earns $15,000.00 less than the minimum required "
        "salary of $60,000.00."
    ) in text
    assert "B) MANAGERS EARNING MORE THAN ALLOWED:\n  - None." in text
    assert "Brett Hardleaf (ID: 305): Has 6 managers in the chain, which is 1 too many." in text


def test_text_report_when_compliant():
    text = format_report(OrgReport(), PolicyConfig(max_reporting_line_length=4))

    assert "✓ All managers comply with the 20% - 50% salary rules." in text
    assert "reporting line of 4 managers or less" in text
    assert "MANAGERS EARNING LESS" not in text


def test_json_report(report):
    document = json.loads(format_report(report, output_format="json"))

    assert document["policy"]["max_reporting_line_length"] == 5
    assert document["low_earning_managers"][0]["manager_id"] == 124
    assert document["low_earning_managers"][0]["difference"] == 15000.0
    assert document["high_earning_managers"] == []
    assert document["long_reporting_lines"][0]["excess"] == 1


def test_table_report(report):
    rendered = format_report(report, output_format="table")

    assert "Managers Earning Less Than Required" in rendered
    assert "Martin Chekov" in rendered
    assert "Brett Hardleaf" in rendered


def test_unknown_format_rejected(report):
    with pytest.raises(ValueError):
        format_report(report, output_format="xml")


def test_save_report(report, tmp_path):
    path = save_report(report, tmp_path / "out" / "report.json", fmt="json")
    assert json.loads(path.read_text(encoding="utf-8"))["long_reporting_lines"][0]["employee_id"] == 305
