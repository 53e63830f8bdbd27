"""Shared type definitions for the org report."""

from enum import StrEnum


type EmployeeID = int
type SalaryAmount = float
type ManagerID = int | None
type ValidationOutcome = dict[str, bool | str | list[str]]


class IssueKind(StrEnum):
    LOW_EARNING_MANAGER = "low_earning_manager"
    HIGH_EARNING_MANAGER = "high_earning_manager"
    LONG_REPORTING_LINE = "long_reporting_line"


class ReportFormat(StrEnum):
    TEXT = "text"
    TABLE = "table"
    JSON = "json"
