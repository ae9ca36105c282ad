"""Pydantic settings schemas for the pairing package.

Exports
-------
resolve_config : function
    Single entrypoint for settings resolution
InternalConfig : class
    Fully validated, authoritative runtime settings
ParamConfig : class
    Defaults (complete)
CLIConfig : class
    Command-line overrides
"""

from pairing.schemas.resolve import resolve_config
from pairing.schemas.internal import InternalConfig
from pairing.schemas.param import ParamConfig
from pairing.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'CLIConfig',
]
