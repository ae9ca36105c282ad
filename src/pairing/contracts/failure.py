"""Error kind and failure policy for the pairing operation.

There is exactly one custom error kind. All precondition failures raise
it, so a caller can handle a bad pairing argument separately from any
other runtime fault.
"""

from enum import Enum


class PairingPolicy(str, Enum):
    """What happens to ``self.partner`` when the pairing precondition fails.

    TRANSACTIONAL (default): Nothing is mutated unless the pairing succeeds
    ASYMMETRIC: ``self.partner`` is assigned before the check, so it holds
        the rejected value afterwards; only the reciprocal side is guarded
    """
    TRANSACTIONAL = "transactional"
    ASYMMETRIC = "asymmetric"


class PairingError(TypeError):
    """Raised when the pairing operation is given something other than a Person.

    This is a recoverable condition signalling bad caller input. It is not
    raised for any other reason, and nothing catches it inside the library
    except the explicit catch-and-print helper ``Person.get_married``.

    Key distinction:
    - PairingError: wrong argument type handed to pair()
    - ValidationError: bad settings (handled by Pydantic)
    - Anything else: propagates untouched
    """

    MESSAGE = "you must give the pairing operation an argument of an instance of the Entity type!"

    def __init__(self):
        super().__init__(self.MESSAGE)

    @property
    def message(self) -> str:
        """The fixed, human-readable description of the failure."""
        return self.MESSAGE
