"""Main runner: parse the roster, link the hierarchy, check policies and print the report."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from orgreport import roster as roster_domain
from orgreport.config import DEFAULT_ROSTER_FILENAME, PolicyConfig, RunConfig, get_env_config, load_policy_config
from orgreport.roster import Hierarchy, RosterSourceNotFoundError, build_hierarchy, ingest_roster
from orgreport.utils.io import write_output
from orgreport.utils.types import ReportFormat
from orgreport.validation import OrgReport, analyze_structure, format_report, save_report
from orgreport.validation.report import combined_issue_frame

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_CONFIG = 2


def analyze(
    path: str | Path | None = None,
    config: RunConfig | None = None,
) -> tuple[Hierarchy, OrgReport]:
    """Run the parse, link and validate stages on a freshly loaded roster."""
    config = config or RunConfig()
    logger.info("Analyzing roster with %s", config.policy)
    roster = ingest_roster(path, config.roster_filename)
    hierarchy = build_hierarchy(roster)
    report = analyze_structure(roster, hierarchy, config.policy)
    return hierarchy, report


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orgreport",
        description="Analyze an employee roster for salary band and reporting line violations",
    )
    parser.add_argument("--input", type=Path, help="Roster file (skips packaged/working-directory lookup)")
    parser.add_argument("--filename", default=DEFAULT_ROSTER_FILENAME, help="Roster file name to look up")
    parser.add_argument("--config", type=Path, help="TOML file with policy settings")
    parser.add_argument("--min-factor", type=float, dest="min_salary_factor")
    parser.add_argument("--max-factor", type=float, dest="max_salary_factor")
    parser.add_argument("--max-chain", type=int, dest="max_reporting_line_length")
    parser.add_argument(
        "--format",
        choices=[f.value for f in ReportFormat],
        default=ReportFormat.TEXT.value,
        help="Report output format",
    )
    parser.add_argument("--output", type=Path, help="Save the report to a file instead of printing it")
    parser.add_argument("--export", type=Path, help="Write all issues to a csv/json/parquet/xlsx file")
    parser.add_argument("--validate", action="store_true", help="Only validate the roster, don't analyze")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Diagnostics verbosity",
    )
    return parser


def _load_policy(args: argparse.Namespace) -> PolicyConfig:
    base = {} if args.config else get_env_config()
    cli = {
        "min_salary_factor": args.min_salary_factor,
        "max_salary_factor": args.max_salary_factor,
        "max_reporting_line_length": args.max_reporting_line_length,
    }
    overrides = {**base, **{k: v for k, v in cli.items() if v is not None}}
    return load_policy_config(args.config, **overrides)


def _print_validation(result: dict) -> None:
    table = Table(title="Roster Validation")
    table.add_column("Check")
    table.add_column("Valid")
    table.add_column("Details")

    match result:
        case {"valid": True, "rows_available": rows}:
            table.add_row("roster", "[green]✓[/green]", f"{rows} employees")
        case {"errors": errors}:
            for error in errors:
                table.add_row("roster", "[red]✗[/red]", error)

    console.print(table)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if args.validate:
        result = roster_domain.validate(args.input, args.filename)
        _print_validation(result)
        return EXIT_OK if result["valid"] else EXIT_FATAL

    try:
        policy = _load_policy(args)
    except (ValueError, OSError) as exc:
        err_console.print(f"[red]Invalid configuration: {exc}[/red]")
        return EXIT_CONFIG

    config = RunConfig(roster_filename=args.filename, policy=policy)
    try:
        _, report = analyze(args.input, config)
    except RosterSourceNotFoundError as exc:
        err_console.print("\n[bold red]--- FATAL ERROR: File Not Found ---[/bold red]")
        err_console.print(str(exc), markup=False)
        return EXIT_FATAL
    except OSError as exc:
        err_console.print("\n[bold red]--- FATAL ERROR ---[/bold red]")
        err_console.print(f"Could not read roster: {exc}", markup=False)
        return EXIT_FATAL

    if args.output:
        save_report(report, args.output, policy, args.format)
        err_console.print(f"  Report saved: {args.output}")
    else:
        console.print(
            format_report(report, policy, args.format), markup=False, highlight=False, soft_wrap=True
        )

    if args.export:
        write_output(combined_issue_frame(report), args.export)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
