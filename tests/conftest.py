"""Shared fixtures for roster tests."""

import pytest

from orgreport.roster import Employee, Roster, build_hierarchy


def make_roster(*employees: Employee) -> Roster:
    roster = Roster()
    for employee in employees:
        roster.add(employee)
    return roster


@pytest.fixture
def chain_roster() -> Roster:
    """CEO 1 <- 2 <- 3 <- 4 <- 5 <- 6 <- 7, already linked."""
    roster = make_roster(
        Employee(1, "CEO", "X", 200000.0),
        Employee(2, "M1", "A", 120000.0, 1),
        Employee(3, "M2", "B", 80000.0, 2),
        Employee(4, "M3", "C", 60000.0, 3),
        Employee(5, "M4", "D", 50000.0, 4),
        Employee(6, "Emp1", "E", 40000.0, 5),
        Employee(7, "Emp2", "F", 30000.0, 6),
    )
    build_hierarchy(roster)
    return roster


@pytest.fixture
def roster_file(tmp_path):
    path = tmp_path / "employees.csv"
    path.write_text(
        "# id,firstName,lastName,salary,managerId\n"
        "1,Ada,King,300000,\n"
        "2,Grace,Hopper,120000,1\n"
        "3,Alan,Turing,40000,2\n"
        "4,Edsger,Dijkstra,50000,2\n",
        encoding="utf-8",
    )
    return path
