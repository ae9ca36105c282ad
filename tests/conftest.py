"""Root-level pytest fixtures for the pairing test suite.

Provides shared people and settings fixtures. Tests should use these
instead of building raw dict configs.
"""

import pytest

from pairing import Person, PairingPolicy
from pairing.schemas import ParamConfig, CLIConfig, resolve_config


# =============================================================================
# People
# =============================================================================

@pytest.fixture
def beyonce():
    return Person("Beyonce")


@pytest.fixture
def jay_z():
    return Person("Jay-Z")


@pytest.fixture
def make_person():
    """Factory fixture for people with a chosen policy.

    Examples
    --------
    >>> def test_asymmetric(make_person):
    ...     p = make_person("Beyonce", policy="asymmetric")
    """
    def _make(name, policy=PairingPolicy.TRANSACTIONAL):
        return Person(name, policy=policy)

    return _make


# =============================================================================
# Settings Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Default settings."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime settings (no overrides)."""
    return resolve_config(param_config, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for runtime settings with CLI overrides.

    Examples
    --------
    >>> def test_debug(make_config):
    ...     config = make_config(log_level="DEBUG")
    ...     assert config.logging.level == "DEBUG"
    """
    def _make(**cli_overrides):
        if cli_overrides:
            return resolve_config(param_config, CLIConfig(**cli_overrides))
        return resolve_config(param_config, None)

    return _make
