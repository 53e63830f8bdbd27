"""Tests for policy configuration defaults and overrides."""

import pytest

from orgreport.config import PolicyConfig, RunConfig, load_policy_config


def test_policy_defaults():
    policy = PolicyConfig()
    assert policy.min_salary_factor == 1.20
    assert policy.max_salary_factor == 1.50
    assert policy.max_reporting_line_length == 5


def test_run_config_defaults():
    config = RunConfig()
    assert config.roster_filename == "employees.csv"
    assert config.policy == PolicyConfig()


def test_load_without_sources_gives_defaults():
    assert load_policy_config() == PolicyConfig()


def test_overrides_ignore_none():
    policy = load_policy_config(min_salary_factor=1.1, max_salary_factor=None)
    assert policy.min_salary_factor == 1.1
    assert policy.max_salary_factor == 1.50


def test_tool_table_in_toml(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text(
        "[tool.orgreport]\nmin_salary_factor = 1.1\nmax_reporting_line_length = 4\n",
        encoding="utf-8",
    )
    policy = load_policy_config(path)
    assert policy == PolicyConfig(min_salary_factor=1.1, max_reporting_line_length=4)


def test_policy_table_and_cli_override(tmp_path):
    path = tmp_path / "policy.toml"
    path.write_text("[policy]\nmax_salary_factor = 2\n", encoding="utf-8")

    policy = load_policy_config(path, max_salary_factor=1.8)

    assert policy.max_salary_factor == 1.8
    assert isinstance(policy.max_salary_factor, float)


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_salary_factor": 2.0, "max_salary_factor": 1.5},
        {"min_salary_factor": 0},
        {"max_reporting_line_length": 0},
        {"max_reporting_line_length": 2.5},
        {"max_reporting_line_length": True},
        {"min_salary_factor": "high"},
        {"depth": 3},
    ],
)
def test_invalid_settings_rejected(overrides):
    with pytest.raises(ValueError):
        load_policy_config(**overrides)
