"""Reporting line length checks: how many managers sit between an employee and the CEO."""

import logging

from orgreport.config import PolicyConfig
from orgreport.roster.models import Employee, Roster
from orgreport.roster.org_structure import Hierarchy
from orgreport.validation.issues import OrgReport, ReportingLineIssue

logger = logging.getLogger(__name__)


def reporting_line_length(employee: Employee, roster: Roster) -> int | None:
    """Count the manager links from an employee up to someone with no manager.

    Returns None when the chain cannot be measured: a manager id that is not
    in the roster, or a chain that loops back on itself.
    """
    length = 0
    current = employee
    visited = {employee.id}

    while True:
        match current.manager_id:
            case None:
                return length
            case manager_id:
                length += 1
                manager = roster.get(manager_id)
                if manager is None:
                    logger.warning("Reporting chain for %d is broken.", employee.id)
                    return None
                if manager.id in visited:
                    logger.warning("Reporting chain for %d loops back to %d.", employee.id, manager.id)
                    return None
                visited.add(manager.id)
                current = manager


def check_reporting_line_length(
    employee: Employee,
    roster: Roster,
    report: OrgReport,
    policy: PolicyConfig | None = None,
) -> None:
    """Record an issue if the employee's chain to the CEO is longer than allowed."""
    policy = policy or PolicyConfig()
    length = reporting_line_length(employee, roster)
    if length is None or length <= policy.max_reporting_line_length:
        return

    report.long_reporting_lines.append(
        ReportingLineIssue(
            employee_name=employee.full_name,
            employee_id=employee.id,
            actual_length=length,
            excess=length - policy.max_reporting_line_length,
        )
    )


def analyze_reporting_lines(
    roster: Roster,
    hierarchy: Hierarchy,
    report: OrgReport,
    policy: PolicyConfig,
) -> None:
    """Check every employee except the CEO. Skipped entirely when no CEO was found."""
    if not hierarchy.has_root:
        logger.info("Skipping reporting line analysis: no CEO identified")
        return

    for employee in roster:
        if employee.id != hierarchy.root_id:
            check_reporting_line_length(employee, roster, report, policy)

    logger.info("Found %d reporting lines that are too long", len(report.long_reporting_lines))
