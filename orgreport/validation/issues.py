"""Policy violation records collected into an OrgReport."""

from dataclasses import dataclass, field

from orgreport.utils.types import EmployeeID


@dataclass(frozen=True)
class ManagerSalaryIssue:
    manager_name: str
    manager_id: EmployeeID
    expected_min: float
    expected_max: float
    difference: float  # distance from the violated bound

    def __str__(self) -> str:
        return f"{self.manager_name} (ID: {self.manager_id})"


@dataclass(frozen=True)
class ReportingLineIssue:
    employee_name: str
    employee_id: EmployeeID
    actual_length: int
    excess: int

    def __str__(self) -> str:
        return f"{self.employee_name} (ID: {self.employee_id})"


@dataclass
class OrgReport:
    low_earning_managers: list[ManagerSalaryIssue] = field(default_factory=list)
    high_earning_managers: list[ManagerSalaryIssue] = field(default_factory=list)
    long_reporting_lines: list[ReportingLineIssue] = field(default_factory=list)

    @property
    def salary_compliant(self) -> bool:
        return not self.low_earning_managers and not self.high_earning_managers

    @property
    def issue_count(self) -> int:
        return (
            len(self.low_earning_managers)
            + len(self.high_earning_managers)
            + len(self.long_reporting_lines)
        )
