"""Org hierarchy resolution: link employees to their managers and find the CEO."""

import logging
from dataclasses import dataclass

from orgreport.roster.models import Roster
from orgreport.utils.types import EmployeeID

logger = logging.getLogger(__name__)

type Orphan = tuple[EmployeeID, EmployeeID]  # (employee_id, missing manager_id)


@dataclass(frozen=True)
class Hierarchy:
    root_id: EmployeeID | None
    rejected_roots: tuple[EmployeeID, ...] = ()
    orphans: tuple[Orphan, ...] = ()

    @property
    def has_root(self) -> bool:
        return self.root_id is not None


def build_hierarchy(roster: Roster) -> Hierarchy:
    """Attach every employee to its manager's subordinate list and identify the root.

    Mutates the roster's employees in place, so it must run once per freshly
    parsed roster. An employee whose manager is not in the roster stays in
    the roster unlinked. When several employees have no manager the first
    one encountered is the root and the rest are reported back as rejected.
    """
    root_id: EmployeeID | None = None
    rejected: list[EmployeeID] = []
    orphans: list[Orphan] = []

    for employee in roster:
        match employee.manager_id:
            case None if root_id is None:
                root_id = employee.id
            case None:
                logger.warning(
                    "Multiple potential CEOs found! Using the first one encountered: %s "
                    "(ignoring %s)",
                    roster[root_id],
                    employee,
                )
                rejected.append(employee.id)
            case manager_id:
                manager = roster.get(manager_id)
                if manager is None:
                    logger.warning(
                        "Manager ID %d for employee %d not found in the dataset. "
                        "Employee excluded from manager analysis.",
                        manager_id,
                        employee.id,
                    )
                    orphans.append((employee.id, manager_id))
                else:
                    manager.add_subordinate(employee)

    if root_id is None and len(roster) > 0:
        logger.error(
            "No CEO found (no employee has an empty manager id). "
            "Reporting line analysis will be skipped."
        )

    logger.info(
        "Resolved org hierarchy: %d employees, %d managers, root=%s",
        len(roster),
        len(roster.managers),
        root_id,
    )
    return Hierarchy(root_id=root_id, rejected_roots=tuple(rejected), orphans=tuple(orphans))
