"""Person entity and its pairing operation.

A Person holds a name and an optional partner. ``pair`` links two people
with a mutual, non-owning reference (a 2-cycle). Handing ``pair`` anything
other than a Person raises PairingError through the contracts layer.

Usage
-----
    beyonce = Person("Beyonce")
    jay_z = Person("Jay-Z")
    beyonce.pair(jay_z)
    assert beyonce.partner is jay_z and jay_z.partner is beyonce

    try:
        beyonce.pair("Jay-Z")
    except PairingError as err:
        print(err.message)
"""

import logging
from typing import Any, Optional

from pairing.contracts import PairingError, PairingPolicy, require


logger = logging.getLogger(__name__)


class Person:
    """A named entity that can be paired with exactly one other Person.

    Parameters
    ----------
    name : str
        Identity of the person. Not meant to change after construction.

    policy : PairingPolicy or str, optional
        Behaviour of ``pair`` on a failed precondition (default
        ``PairingPolicy.TRANSACTIONAL``).

    Notes
    -----
    There is no unpairing. Pairing again overwrites ``partner`` and leaves
    the previous partner pointing back at this person.
    """

    def __init__(self, name: str, policy=PairingPolicy.TRANSACTIONAL):
        self.name = name
        self.partner: Optional["Person"] = None
        self.policy = PairingPolicy(policy)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def pair(self, other: Any) -> None:
        """Pair this person with ``other``, setting both partners.

        Parameters
        ----------
        other : Any
            Must be a Person. Checking that is this method's job.

        Raises
        ------
        PairingError
            If ``other`` is not a Person. Under the transactional policy no
            state has changed; under the asymmetric policy ``self.partner``
            already holds ``other``.
        """
        previous = self.partner
        if self.policy == PairingPolicy.ASYMMETRIC:
            self.partner = other

        require(isinstance(other, Person))

        if previous is not None and previous is not other:
            logger.info("%s: replacing partner %r with %r", self.name, previous, other)

        self.partner = other
        other.partner = self
        logger.debug("Paired %r with %r", self, other)

    def get_married(self, other: Any) -> bool:
        """Pair with ``other``, printing the error message instead of raising.

        This is the catch-and-print recovery pattern: a PairingError is
        reported on standard output and execution continues. Any other
        exception propagates.

        Returns
        -------
        bool
            True if the pairing succeeded, False if it was refused.
        """
        try:
            self.pair(other)
        except PairingError as err:
            logger.warning("%s: pairing refused for %s value", self.name, type(other).__name__)
            print(err.message)
            return False
        return True

    def is_paired_with(self, other: Any) -> bool:
        """True when this person and ``other`` point at each other."""
        return (
            isinstance(other, Person)
            and self.partner is other
            and other.partner is self
        )


Entity = Person
