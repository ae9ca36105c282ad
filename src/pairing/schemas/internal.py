"""InternalConfig: Authoritative runtime settings.

This is the ONLY settings schema that runtime code sees. It is fully
validated and contains no optional fields.
"""

from typing import Literal
from pydantic import ConfigDict
from pairing.contracts.failure import PairingPolicy
from pairing.schemas.base import PairingBaseModel


class InternalLoggingConfig(PairingBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InternalConfig(PairingBaseModel):
    """Authoritative runtime settings.

    Usage
    -----
    Runtime code receives InternalConfig and reads fields directly:

        person = Person(name, policy=config.policy)
        level = config.logging.level
    """

    policy: PairingPolicy
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
