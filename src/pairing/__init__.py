"""`Pairing` - named, recoverable errors around a mutual pairing operation.

Subpackages:
- contracts: PairingError, PairingPolicy and the require() enforcement point
- schemas: Pydantic settings (defaults, CLI overrides, resolved runtime config)
- cli: Command-line runner for the catch-and-print demonstration

The entity itself lives in ``pairing.person``.
"""

from pairing.contracts import PairingError, PairingPolicy
from pairing.person import Entity, Person

__version__ = "0.1.0"

__all__ = [
    "Entity",
    "Person",
    "PairingError",
    "PairingPolicy",
]
