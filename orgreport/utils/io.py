"""File I/O utilities for reading configuration and writing report data."""

import tomllib
from pathlib import Path

import pandas as pd
from rich.console import Console

type FilePath = str | Path

console = Console(stderr=True)


def write_output(df: pd.DataFrame, path: FilePath, fmt: str | None = None) -> Path:
    """Write a DataFrame to the specified format, inferring it from the suffix by default."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    match fmt or path.suffix.lstrip(".").lower():
        case "csv":
            df.to_csv(path, index=False)
        case "parquet":
            df.to_parquet(path, index=False)
        case "excel" | "xlsx":
            df.to_excel(path, index=False)
        case "json":
            df.to_json(path, orient="records", indent=2)
        case other:
            raise ValueError(f"Unsupported output format: {other!r}")

    console.print(f"  Wrote {len(df)} rows to {path}")
    return path


def load_toml_config(path: FilePath) -> dict:
    """Load a TOML configuration file using Python 3.11+ stdlib."""
    with open(path, "rb") as f:
        return tomllib.load(f)
