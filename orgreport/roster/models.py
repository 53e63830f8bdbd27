"""Employee records, the roster that owns them, and the pandera schema for roster frames."""

from collections.abc import Iterator
from dataclasses import dataclass, field

import pandas as pd
import pandera as pa
from pandera import Column, Check

from orgreport.utils.types import EmployeeID, ManagerID, SalaryAmount


@dataclass(eq=False)
class Employee:
    """A single roster entry.

    Core fields are fixed once parsed. ``subordinates`` is filled in by
    ``build_hierarchy`` only, in input order, and holds references into the
    owning ``Roster`` rather than copies.
    """

    id: EmployeeID
    first_name: str
    last_name: str
    salary: SalaryAmount
    manager_id: ManagerID = None
    subordinates: list["Employee"] = field(default_factory=list, repr=False)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_manager(self) -> bool:
        return bool(self.subordinates)

    def add_subordinate(self, subordinate: "Employee") -> None:
        self.subordinates.append(subordinate)

    def __str__(self) -> str:
        return f"{self.full_name} (ID: {self.id})"


class Roster:
    """Identifier-keyed store of every employee parsed in one run."""

    def __init__(self, employees: dict[EmployeeID, Employee] | None = None) -> None:
        self._employees: dict[EmployeeID, Employee] = dict(employees or {})

    def add(self, employee: Employee) -> None:
        # Duplicate ids overwrite, last one wins.
        self._employees[employee.id] = employee

    def get(self, employee_id: EmployeeID) -> Employee | None:
        return self._employees.get(employee_id)

    def __getitem__(self, employee_id: EmployeeID) -> Employee:
        return self._employees[employee_id]

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._employees

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees.values())

    def __len__(self) -> int:
        return len(self._employees)

    def __repr__(self) -> str:
        return f"Roster({len(self)} employees)"

    @property
    def managers(self) -> list[Employee]:
        return [e for e in self if e.is_manager]

    def to_frame(self) -> pd.DataFrame:
        """Flatten the roster into one row per employee."""
        df = pd.DataFrame(
            [
                {
                    "employee_id": e.id,
                    "first_name": e.first_name,
                    "last_name": e.last_name,
                    "salary": e.salary,
                    "manager_id": e.manager_id,
                }
                for e in self
            ],
            columns=["employee_id", "first_name", "last_name", "salary", "manager_id"],
        )
        df["manager_id"] = df["manager_id"].astype("Int64")
        return df


roster_schema = pa.DataFrameSchema(
    {
        "employee_id": Column(int, unique=True),
        "first_name": Column(str, Check.str_length(min_value=1, max_value=100)),
        "last_name": Column(str, Check.str_length(min_value=1, max_value=100)),
        "salary": Column(float, Check.greater_than_or_equal_to(0)),
        "manager_id": Column("Int64", nullable=True),
    },
    strict=False,
    coerce=True,
)
