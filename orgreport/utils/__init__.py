"""Shared utilities for the org report."""

from orgreport.utils.io import load_toml_config, write_output
from orgreport.utils.validators import validate_dataframe, validate_referential_integrity
from orgreport.utils.types import IssueKind, ReportFormat, ValidationOutcome
