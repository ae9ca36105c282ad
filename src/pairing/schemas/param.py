"""ParamConfig: Defaults for the pairing package.

Every setting has its default here. Runtime code never reads ParamConfig
directly - it only receives InternalConfig.
"""

from typing import Literal
from pydantic import Field, field_validator
from pairing.contracts.failure import PairingPolicy
from pairing.schemas.base import PairingBaseModel


class LoggingConfig(PairingBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper().strip()
        return v


class ParamConfig(PairingBaseModel):
    """Complete default settings.

    Usage
    -----
        param = ParamConfig()
        param.policy         # "transactional"
        param.logging.level  # "INFO"
    """
    policy: PairingPolicy = Field(
        PairingPolicy.TRANSACTIONAL,
        description="What pair() does to self.partner when the argument is rejected",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
