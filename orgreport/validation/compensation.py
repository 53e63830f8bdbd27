"""Manager salary band checks against the average salary of direct reports."""

import logging

import numpy as np

from orgreport.config import PolicyConfig
from orgreport.roster.models import Employee, Roster
from orgreport.validation.issues import ManagerSalaryIssue, OrgReport

logger = logging.getLogger(__name__)

type SalaryBand = tuple[float, float]  # (min_required, max_allowed)


def salary_band(manager: Employee, policy: PolicyConfig) -> SalaryBand | None:
    """Return the allowed salary range for a manager, or None if it cannot be computed.

    No band exists for an employee without subordinates, or when the
    subordinates' average salary is zero.
    """
    if not manager.subordinates:
        return None

    average = float(np.mean([s.salary for s in manager.subordinates]))
    if average == 0.0:
        return None

    return average * policy.min_salary_factor, average * policy.max_salary_factor


def check_salary_compliance(
    manager: Employee,
    report: OrgReport,
    policy: PolicyConfig | None = None,
) -> None:
    """Record a low- or high-earning issue for the manager if the salary is outside its band.

    A salary equal to either bound complies.
    """
    policy = policy or PolicyConfig()
    band = salary_band(manager, policy)
    if band is None:
        return

    min_required, max_allowed = band
    if manager.salary < min_required:
        report.low_earning_managers.append(
            ManagerSalaryIssue(
                manager_name=manager.full_name,
                manager_id=manager.id,
                expected_min=min_required,
                expected_max=max_allowed,
                difference=min_required - manager.salary,
            )
        )
    elif manager.salary > max_allowed:
        report.high_earning_managers.append(
            ManagerSalaryIssue(
                manager_name=manager.full_name,
                manager_id=manager.id,
                expected_min=min_required,
                expected_max=max_allowed,
                difference=manager.salary - max_allowed,
            )
        )


def analyze_salary_bands(roster: Roster, report: OrgReport, policy: PolicyConfig) -> None:
    """Check every manager in the roster."""
    managers = roster.managers
    for manager in managers:
        check_salary_compliance(manager, report, policy)

    logger.info(
        "Checked salary bands for %d managers: %d underpaid, %d overpaid",
        len(managers),
        len(report.low_earning_managers),
        len(report.high_earning_managers),
    )
