"""Policy configuration and run setup."""

import logging
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path

from orgreport.utils.io import FilePath, load_toml_config

type ConfigDict = dict[str, str | int | float | bool]

logger = logging.getLogger(__name__)

DEFAULT_ROSTER_FILENAME = "employees.csv"


@dataclass(frozen=True)
class PolicyConfig:
    # Managers must earn at least 20% and at most 50% more than their
    # direct reports' average salary.
    min_salary_factor: float = 1.20
    max_salary_factor: float = 1.50
    # Employee -> M1 -> M2 -> M3 -> M4 -> CEO
    max_reporting_line_length: int = 5

    def __post_init__(self) -> None:
        if self.min_salary_factor <= 0 or self.max_salary_factor <= 0:
            raise ValueError("Salary factors must be positive")
        if self.min_salary_factor > self.max_salary_factor:
            raise ValueError(
                f"min_salary_factor ({self.min_salary_factor}) exceeds "
                f"max_salary_factor ({self.max_salary_factor})"
            )
        if self.max_reporting_line_length < 1:
            raise ValueError("max_reporting_line_length must be at least 1")


@dataclass(frozen=True)
class RunConfig:
    roster_filename: str = DEFAULT_ROSTER_FILENAME
    policy: PolicyConfig = field(default_factory=PolicyConfig)


def _coerce(name: str, value: object) -> float | int:
    match name, value:
        case "max_reporting_line_length", int() if not isinstance(value, bool):
            return value
        case ("min_salary_factor" | "max_salary_factor"), (int() | float()) if not isinstance(value, bool):
            return float(value)
        case _:
            raise ValueError(f"Invalid value for {name}: {value!r}")


def load_policy_config(path: FilePath | None = None, **overrides) -> PolicyConfig:
    """Build a PolicyConfig from defaults, an optional TOML file and explicit overrides.

    The TOML file may hold the values under ``[tool.orgreport]`` (so a
    ``pyproject.toml`` works as-is) or under a top-level ``[policy]`` table.
    Overrides whose value is ``None`` are ignored, which lets CLI flags pass
    through unset.
    """
    known = {f.name for f in fields(PolicyConfig)}
    values: ConfigDict = {}

    if path is not None:
        data = load_toml_config(path)
        match data:
            case {"tool": {"orgreport": dict(section)}}:
                values.update(section)
            case {"policy": dict(section)}:
                values.update(section)
            case _:
                logger.warning("No policy section found in %s, using defaults", path)

    values.update({k: v for k, v in overrides.items() if v is not None})

    unknown = set(values) - known
    if unknown:
        raise ValueError(f"Unknown policy settings: {', '.join(sorted(unknown))}")

    policy = replace(PolicyConfig(), **{k: _coerce(k, v) for k, v in values.items()})
    logger.debug("Loaded policy config: %s", policy)
    return policy


def get_env_config() -> ConfigDict:
    """Read policy config from the project's pyproject.toml."""
    pyproject = Path(__file__).parent.parent / "pyproject.toml"
    if not pyproject.exists():
        return {}
    with open(pyproject, "rb") as f:
        data = tomllib.load(f)
    return data.get("tool", {}).get("orgreport", {})
