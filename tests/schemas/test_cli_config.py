"""Tests for CLIConfig schema and conversion to internal overrides."""

import pytest
from pydantic import ValidationError
from pairing.schemas.cli import CLIConfig


def test_cli_to_internal_overrides_with_policy():
    cli = CLIConfig(policy="asymmetric")
    overrides = cli.to_internal_overrides()
    assert overrides["policy"] == "asymmetric"


def test_cli_to_internal_overrides_with_log_level():
    cli = CLIConfig(log_level="DEBUG")
    overrides = cli.to_internal_overrides()
    assert overrides["logging"]["level"] == "DEBUG"


def test_cli_to_internal_overrides_with_multiple_fields():
    cli = CLIConfig(policy="transactional", log_level="INFO")
    overrides = cli.to_internal_overrides()
    assert overrides["policy"] == "transactional"
    assert overrides["logging"]["level"] == "INFO"


def test_cli_to_internal_overrides_empty():
    cli = CLIConfig()
    overrides = cli.to_internal_overrides()
    assert overrides == {}


def test_cli_config_all_log_levels():
    for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        cli = CLIConfig(log_level=level)
        overrides = cli.to_internal_overrides()
        assert overrides["logging"]["level"] == level


def test_cli_config_rejects_unknown_policy():
    with pytest.raises(ValidationError):
        CLIConfig(policy="sometimes")


def test_cli_config_rejects_unknown_field():
    with pytest.raises(ValidationError):
        CLIConfig(partner="Jay-Z")
