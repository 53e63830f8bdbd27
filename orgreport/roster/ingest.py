"""Ingest the flat-file employee roster.

The roster is a headerless, comma-separated file with one employee per line::

    id,firstName,lastName,salary[,managerId]

Blank lines and lines starting with ``#`` are ignored. A bad line is logged
and skipped; only failing to find or read the file at all is fatal.
"""

import logging
from collections.abc import Iterable
from importlib import resources
from pathlib import Path

from orgreport.config import DEFAULT_ROSTER_FILENAME
from orgreport.roster.models import Employee, Roster

logger = logging.getLogger(__name__)

RESOURCE_PACKAGE = "orgreport.resources"
MIN_FIELDS = 4
MAX_FIELDS = 5
# Ids and salaries are signed 64-bit values.
MAX_WHOLE_NUMBER = 2**63 - 1
MIN_WHOLE_NUMBER = -(2**63)
ROSTER_ENCODINGS = ("utf-8", "latin-1")


class RosterSourceNotFoundError(FileNotFoundError):
    """Raised when the roster file is not found in any searched location."""

    def __init__(self, filename: str, searched: list[str]) -> None:
        locations = "\n".join(f"{i}. {loc}" for i, loc in enumerate(searched, start=1))
        super().__init__(
            f"Could not read roster file: {filename}\n"
            f"Ensure the file exists in one of the searched locations:\n{locations}"
        )
        self.roster_filename = filename
        self.searched = searched


def _parse_whole_number(raw: str) -> int:
    # int() also accepts "1_000" and surrounding whitespace; only plain
    # optionally-signed digit strings are valid roster numbers.
    value = raw.strip()
    if not value.lstrip("+-").isdigit():
        raise ValueError(f"not a whole number: {raw!r}")
    number = int(value)
    if not MIN_WHOLE_NUMBER <= number <= MAX_WHOLE_NUMBER:
        raise ValueError(f"whole number out of range: {raw!r}")
    return number


def _decode_roster(data: bytes, source: object) -> str:
    """Decode roster bytes, handling encoding quirks of HRIS exports."""
    for encoding in ROSTER_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            logger.warning("Roster %s is not valid %s, retrying with the next encoding", source, encoding)
    raise ValueError(f"Could not decode {source}")


def _parse_line(line: str) -> Employee | None:
    """Parse one roster line, returning None (after logging why) if it is unusable."""
    values = line.split(",")
    if not MIN_FIELDS <= len(values) <= MAX_FIELDS:
        logger.warning("Skipping malformed line with incorrect number of fields: %s", line)
        return None

    try:
        employee_id = _parse_whole_number(values[0])
        # Salaries must be whole numbers in the file even though they are
        # held as floats.
        salary = float(_parse_whole_number(values[3]))
        manager_raw = values[4].strip() if len(values) == MAX_FIELDS else ""
        manager_id = _parse_whole_number(manager_raw) if manager_raw else None
    except ValueError:
        logger.warning("Skipping line due to invalid number format: %s", line)
        return None

    if salary < 0:
        logger.warning("Skipping line with negative salary: %s", line)
        return None

    return Employee(
        id=employee_id,
        first_name=values[1].strip(),
        last_name=values[2].strip(),
        salary=salary,
        manager_id=manager_id,
    )


def parse_roster_lines(lines: Iterable[str]) -> Roster:
    """Turn raw roster lines into a Roster, skipping comments and bad lines."""
    roster = Roster()
    skipped = 0

    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        employee = _parse_line(line)
        if employee is None:
            skipped += 1
            continue

        if employee.id in roster:
            logger.debug("Employee %d appears more than once, keeping the last record", employee.id)
        roster.add(employee)

    logger.info("Parsed %d employee records (%d lines skipped)", len(roster), skipped)
    return roster


def locate_roster_source(filename: str = DEFAULT_ROSTER_FILENAME) -> str:
    """Read the roster text from the packaged resources, falling back to the working directory."""
    resource = resources.files(RESOURCE_PACKAGE).joinpath(filename)
    if resource.is_file():
        logger.info("Reading roster from packaged resources (%s)...", RESOURCE_PACKAGE)
        return _decode_roster(resource.read_bytes(), resource)

    local_path = Path.cwd() / filename
    logger.info("Packaged resource not found, falling back to working directory (%s)...", local_path)
    try:
        return _decode_roster(local_path.read_bytes(), local_path)
    except FileNotFoundError as exc:
        raise RosterSourceNotFoundError(
            filename,
            [f"packaged resources ({RESOURCE_PACKAGE})", f"working directory ({Path.cwd()})"],
        ) from exc


def ingest_roster(
    path: str | Path | None = None,
    filename: str = DEFAULT_ROSTER_FILENAME,
) -> Roster:
    """Load and parse the roster from an explicit path, or discover it by file name."""
    if path is None:
        text = locate_roster_source(filename)
    else:
        path = Path(path)
        logger.info("Reading roster from %s", path)
        try:
            text = _decode_roster(path.read_bytes(), path)
        except FileNotFoundError as exc:
            raise RosterSourceNotFoundError(path.name, [str(path)]) from exc

    # Only "\n" ends a record; parse_roster_lines strips a trailing "\r".
    return parse_roster_lines(text.split("\n"))
