"""CLIConfig: Command-line overrides.

This schema handles command-line arguments parsed by argparse.
"""

from typing import Literal, Optional
from pairing.contracts.failure import PairingPolicy
from pairing.schemas.base import PairingBaseModel


class CLIConfig(PairingBaseModel):
    """Command-line settings overrides.

    Highest priority in settings resolution.

    Usage
    -----
        cli_cfg = CLIConfig(policy="asymmetric", log_level="DEBUG")
        internal = resolve_config(param_cfg, cli_cfg)
    """

    policy: Optional[PairingPolicy] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        if self.policy is not None:
            overrides["policy"] = self.policy

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
