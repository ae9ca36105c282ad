"""Settings resolution and merging logic.

resolve_config() merges ParamConfig and CLIConfig in precedence order and
returns a validated InternalConfig.

Precedence (highest to lowest):
1. CLIConfig (command-line overrides)
2. ParamConfig (defaults)
"""

from typing import Union, Optional
from pairing.schemas.param import ParamConfig
from pairing.schemas.cli import CLIConfig
from pairing.schemas.internal import InternalConfig


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Deep merge multiple dictionaries.

    Later dictionaries override earlier ones. Nested dictionaries are
    merged recursively; other values are replaced.

    Examples
    --------
    >>> base = {"a": 1, "b": {"c": 2, "d": 3}}
    >>> override = {"b": {"d": 4, "e": 5}, "f": 6}
    >>> deep_merge(base, override)
    {'a': 1, 'b': {'c': 2, 'd': 4, 'e': 5}, 'f': 6}
    """
    result = base.copy()

    for override in overrides:
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            else:
                result[key] = value

    return result


def resolve_config(
    param_cfg: Optional[Union[dict, ParamConfig]] = None,
    cli_cfg: Optional[Union[dict, CLIConfig]] = None,
) -> InternalConfig:
    """Resolve final runtime settings from defaults and CLI overrides.

    Parameters
    ----------
    param_cfg : dict or ParamConfig, optional
        Default settings. If None, ParamConfig() is used.
    cli_cfg : dict or CLIConfig, optional
        Command-line overrides. If None or empty, no overrides applied.

    Returns
    -------
    InternalConfig
        Fully validated, immutable runtime settings

    Raises
    ------
    ValidationError
        If any input fails Pydantic validation

    Examples
    --------
    >>> config = resolve_config(ParamConfig(), CLIConfig(policy="asymmetric"))
    >>> config.policy
    'asymmetric'
    """
    if param_cfg is None:
        param = ParamConfig()
    elif not isinstance(param_cfg, ParamConfig):
        param = ParamConfig.model_validate(param_cfg)
    else:
        param = param_cfg

    if cli_cfg is None or (isinstance(cli_cfg, dict) and not cli_cfg):
        cli = CLIConfig()
    elif not isinstance(cli_cfg, CLIConfig):
        cli = CLIConfig.model_validate(cli_cfg)
    else:
        cli = cli_cfg

    merged = deep_merge(param.model_dump(), cli.to_internal_overrides())

    return InternalConfig.model_validate(merged)
