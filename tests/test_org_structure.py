"""Tests for hierarchy linking and CEO detection."""

import logging

from orgreport.roster import Employee, Roster, build_hierarchy, parse_roster_lines
from tests.conftest import make_roster


def test_ceo_detection_and_missing_manager():
    e1 = Employee(1, "John", "Smith", 100000.0)
    e2 = Employee(2, "Jane", "Doe", 80000.0, 1)
    e3 = Employee(3, "Bob", "Lee", 60000.0, 99)
    roster = make_roster(e1, e2, e3)

    hierarchy = build_hierarchy(roster)

    assert hierarchy.root_id == 1
    assert e1.subordinates == [e2]
    assert all(e3 not in e.subordinates for e in roster)
    assert hierarchy.orphans == ((3, 99),)
    assert 3 in roster


def test_subordinates_are_references_in_input_order():
    roster = parse_roster_lines([
        "1,Boss,A,100000,",
        "3,Second,C,50000,1",
        "2,First,B,50000,1",
    ])
    build_hierarchy(roster)

    boss = roster[1]
    assert [s.id for s in boss.subordinates] == [3, 2]
    assert boss.subordinates[0] is roster[3]
    assert boss.is_manager
    assert not roster[2].is_manager


def test_multiple_roots_keep_first(caplog):
    roster = make_roster(
        Employee(10, "First", "Root", 1.0),
        Employee(20, "Second", "Root", 1.0),
        Employee(30, "Third", "Root", 1.0),
    )

    with caplog.at_level(logging.WARNING):
        hierarchy = build_hierarchy(roster)

    assert hierarchy.root_id == 10
    assert hierarchy.rejected_roots == (20, 30)
    assert "Multiple potential CEOs" in caplog.text


def test_no_root_logs_error(caplog):
    roster = make_roster(
        Employee(1, "A", "A", 1.0, 2),
        Employee(2, "B", "B", 1.0, 1),
    )

    with caplog.at_level(logging.ERROR):
        hierarchy = build_hierarchy(roster)

    assert not hierarchy.has_root
    assert any(r.levelno == logging.ERROR and "No CEO found" in r.message for r in caplog.records)


def test_empty_roster_is_not_an_error(caplog):
    with caplog.at_level(logging.ERROR):
        hierarchy = build_hierarchy(Roster())

    assert hierarchy.root_id is None
    assert caplog.records == []
