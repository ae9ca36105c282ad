"""Pairing contracts - fail-fast enforcement of the pairing precondition.

The pairing operation only accepts another Person. When it is handed
anything else the contract raises PairingError, a named error kind the
caller can catch on its own without also catching unrelated faults.

Key principle:
- Pydantic validates settings correctness
- Contracts validate pairing arguments
- Callers decide whether to recover (see Person.get_married)
"""

from pairing.contracts.failure import PairingError, PairingPolicy
from pairing.contracts.base import require

__all__ = [
    "PairingError",
    "PairingPolicy",
    "require",
]
