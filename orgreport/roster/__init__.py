"""Roster ingestion and hierarchy reconstruction.

Parses the flat employee file into a Roster, then links each employee to
its manager and identifies the CEO.
"""

from orgreport.config import DEFAULT_ROSTER_FILENAME
from orgreport.roster.ingest import RosterSourceNotFoundError, ingest_roster, parse_roster_lines
from orgreport.roster.models import Employee, Roster, roster_schema
from orgreport.roster.org_structure import Hierarchy, build_hierarchy
from orgreport.utils.types import ValidationOutcome
from orgreport.utils.validators import validate_dataframe, validate_referential_integrity


def validate_roster(roster: Roster) -> ValidationOutcome:
    """Check a parsed roster against the schema and for dangling manager references."""
    df = roster.to_frame()
    errors: list[str] = []
    for result in (
        validate_dataframe(df, roster_schema),
        validate_referential_integrity(df, df, "manager_id", "employee_id"),
    ):
        errors.extend(result["errors"])

    match errors:
        case []:
            return {"status": "ok", "valid": True, "errors": [], "rows_available": len(roster)}
        case _:
            return {"status": "error", "valid": False, "errors": errors, "rows_available": len(roster)}


def validate(path=None, filename: str = DEFAULT_ROSTER_FILENAME) -> ValidationOutcome:
    """Validate that the roster source is reachable and its records are well formed."""
    try:
        roster = ingest_roster(path, filename)
    except FileNotFoundError as exc:
        return {"status": "error", "valid": False, "message": str(exc), "errors": [str(exc)]}
    except OSError as exc:
        return {"status": "error", "valid": False, "message": f"Unreadable: {exc}", "errors": [str(exc)]}
    return validate_roster(roster)
