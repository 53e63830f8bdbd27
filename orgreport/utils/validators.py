"""Roster frame validation using pandera."""

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

from orgreport.utils.types import ValidationOutcome


def _describe_failure(failure: dict, id_column: str, df: pd.DataFrame) -> str:
    match failure:
        case {"column": col, "check": check, "failure_case": val, "index": idx} if (
            pd.notna(idx) and int(idx) in df.index and id_column in df.columns
        ):
            return f"Employee {df.at[int(idx), id_column]}: '{col}' fails {check} (got {val!r})"
        case {"column": col, "check": check, "failure_case": val}:
            return f"Column '{col}' fails {check} (got {val!r})"
        case _:
            return f"Roster validation failure: {failure}"


def validate_dataframe(
    df: pd.DataFrame,
    schema: DataFrameSchema,
    id_column: str = "employee_id",
) -> ValidationOutcome:
    """Validate a roster frame, naming the offending employee for each row-level failure."""
    try:
        schema.validate(df, lazy=True)
    except pa.errors.SchemaErrors as e:
        errors = [
            _describe_failure(row.to_dict(), id_column, df)
            for _, row in e.failure_cases.iterrows()
        ]
        return {"valid": False, "status": "error", "errors": errors}
    return {"valid": True, "status": "ok", "errors": []}


def validate_referential_integrity(
    child: pd.DataFrame,
    parent: pd.DataFrame,
    child_key: str,
    parent_key: str,
) -> ValidationOutcome:
    """Validate that all non-null child keys exist in parent."""
    orphans = set(child[child_key].dropna().unique()) - set(parent[parent_key].unique())

    match len(orphans):
        case 0:
            return {"valid": True, "status": "ok", "errors": []}
        case n:
            sample = sorted(int(k) for k in orphans)[:5]
            return {
                "valid": False,
                "status": "error",
                "errors": [f"Found {n} orphan keys in '{child_key}'. Sample: {sample}"],
            }
