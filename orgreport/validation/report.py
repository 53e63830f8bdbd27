"""Run both policy checks over a linked roster and flatten the findings for export."""

import logging
from dataclasses import asdict

import pandas as pd

from orgreport.config import PolicyConfig
from orgreport.roster.models import Roster
from orgreport.roster.org_structure import Hierarchy
from orgreport.utils.types import IssueKind
from orgreport.validation.compensation import analyze_salary_bands
from orgreport.validation.issues import OrgReport
from orgreport.validation.reporting_lines import analyze_reporting_lines

logger = logging.getLogger(__name__)

type ReportFrames = dict[IssueKind, pd.DataFrame]

_SALARY_COLUMNS = ["manager_name", "manager_id", "expected_min", "expected_max", "difference"]
_LINE_COLUMNS = ["employee_name", "employee_id", "actual_length", "excess"]


def analyze_structure(
    roster: Roster,
    hierarchy: Hierarchy,
    policy: PolicyConfig | None = None,
) -> OrgReport:
    """Perform all organizational structure checks and return the report."""
    policy = policy or PolicyConfig()
    report = OrgReport()

    analyze_salary_bands(roster, report, policy)
    analyze_reporting_lines(roster, hierarchy, report, policy)

    logger.info("Analysis complete: %d issues found", report.issue_count)
    return report


def report_frames(report: OrgReport) -> ReportFrames:
    """One DataFrame per issue list, with stable columns even when a list is empty."""
    return {
        IssueKind.LOW_EARNING_MANAGER: pd.DataFrame(
            [asdict(i) for i in report.low_earning_managers], columns=_SALARY_COLUMNS
        ),
        IssueKind.HIGH_EARNING_MANAGER: pd.DataFrame(
            [asdict(i) for i in report.high_earning_managers], columns=_SALARY_COLUMNS
        ),
        IssueKind.LONG_REPORTING_LINE: pd.DataFrame(
            [asdict(i) for i in report.long_reporting_lines], columns=_LINE_COLUMNS
        ),
    }


def combined_issue_frame(report: OrgReport) -> pd.DataFrame:
    """All issues in a single long-format table, tagged by kind."""
    frames = []
    for kind, df in report_frames(report).items():
        if df.empty:
            continue
        tagged = df.rename(
            columns={
                "manager_name": "name",
                "manager_id": "employee_id",
                "employee_name": "name",
            }
        )
        tagged.insert(0, "issue", str(kind))
        frames.append(tagged)

    if not frames:
        return pd.DataFrame(columns=["issue", "name", "employee_id"])
    return pd.concat(frames, ignore_index=True)
