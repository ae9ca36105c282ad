"""Base contract enforcement utilities.

The require() function is the single place PairingError is raised.
"""

from pairing.contracts.failure import PairingError


def require(condition: bool) -> None:
    """Enforce the pairing precondition.

    Called by Person.pair before the reciprocal assignment. It is fail-fast:
    no recovery, no fallback, no silence. Recovery belongs to the caller.

    Parameters
    ----------
    condition : bool
        The precondition that must be true. If False, PairingError is raised.

    Raises
    ------
    PairingError
        If condition is False.

    Examples
    --------
    >>> require(isinstance(other, Person))
    """
    if not condition:
        raise PairingError()
