from __future__ import annotations

from enum import Enum
from functools import total_ordering

from .errors import NotRepresentableError
from .laws import law


@total_ordering
class Belnapian(Enum):
    """
    Belnap's four truth values.

    NEITHER marks propositions with no classical value (ill-formed or
    self-contradictory). BOTH is the superposition of FALSE and TRUE, e.g. a
    proposition independent of the axioms in use.
    """

    NEITHER = "N"
    FALSE = "F"
    TRUE = "T"
    BOTH = "B"

    @classmethod
    def from_bool(cls, value: bool) -> Belnapian:
        return cls.TRUE if value else cls.FALSE

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    @property
    def mask(self) -> int:
        """Bit of this value inside a PowerSet/Unknown bitmask."""
        return 1 << _ORDINALS[self]

    def __lt__(self, other):
        if not isinstance(other, Belnapian):
            return NotImplemented
        return _ORDINALS[self] < _ORDINALS[other]

    def to_bool(self) -> bool:
        if self is Belnapian.FALSE:
            return False
        if self is Belnapian.TRUE:
            return True
        raise NotRepresentableError(self, "bool")

    # Rule order matters in every operation below: the first matching rule wins.

    @law(commutative=True)
    def and_(self, other: Belnapian) -> Belnapian:
        pair = {self, other}
        if Belnapian.FALSE in pair:
            return Belnapian.FALSE
        if pair == {Belnapian.NEITHER, Belnapian.BOTH}:
            return Belnapian.FALSE
        if Belnapian.NEITHER in pair:
            return Belnapian.NEITHER
        if Belnapian.BOTH in pair:
            return Belnapian.BOTH
        return Belnapian.TRUE

    @law(commutative=True)
    def or_(self, other: Belnapian) -> Belnapian:
        pair = {self, other}
        if Belnapian.TRUE in pair:
            return Belnapian.TRUE
        if pair == {Belnapian.BOTH, Belnapian.NEITHER}:
            return Belnapian.TRUE
        if Belnapian.BOTH in pair:
            return Belnapian.BOTH
        if Belnapian.NEITHER in pair:
            return Belnapian.NEITHER
        return Belnapian.FALSE

    @law(involution=True)
    def not_(self) -> Belnapian:
        if self is Belnapian.FALSE:
            return Belnapian.TRUE
        if self is Belnapian.TRUE:
            return Belnapian.FALSE
        return self

    @law(commutative=True)
    def xor(self, other: Belnapian) -> Belnapian:
        """
        Computes (a AND NOT b) OR (NOT a AND b).

        The classically equivalent (a OR b) AND NOT (a AND b) has a different
        truth table in Belnap's logic; this form stays closer to the natural
        language reading of "exclusive or".
        """
        pair = {self, other}
        if pair == {Belnapian.NEITHER, Belnapian.BOTH}:
            return Belnapian.FALSE
        if Belnapian.NEITHER in pair:
            return Belnapian.NEITHER
        if Belnapian.BOTH in pair:
            return Belnapian.BOTH
        if self is other:
            return Belnapian.FALSE
        return Belnapian.TRUE

    @law(commutative=True)
    def superposition(self, other: Belnapian) -> Belnapian:
        """Join toward BOTH."""
        pair = {self, other}
        if Belnapian.BOTH in pair:
            return Belnapian.BOTH
        if pair == {Belnapian.TRUE, Belnapian.FALSE}:
            return Belnapian.BOTH
        if Belnapian.TRUE in pair:
            return Belnapian.TRUE
        if Belnapian.FALSE in pair:
            return Belnapian.FALSE
        return Belnapian.NEITHER

    @law(commutative=True)
    def annihilation(self, other: Belnapian) -> Belnapian:
        """Meet toward NEITHER."""
        pair = {self, other}
        if Belnapian.NEITHER in pair:
            return Belnapian.NEITHER
        if pair == {Belnapian.FALSE, Belnapian.TRUE}:
            return Belnapian.NEITHER
        if Belnapian.FALSE in pair:
            return Belnapian.FALSE
        if Belnapian.TRUE in pair:
            return Belnapian.TRUE
        return Belnapian.BOTH

    @law(commutative=True)
    def eq(self, other: Belnapian) -> Belnapian:
        return Belnapian.TRUE if self is other else Belnapian.FALSE

    def __and__(self, other):
        if not isinstance(other, Belnapian):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other):
        if not isinstance(other, Belnapian):
            return NotImplemented
        return self.or_(other)

    def __xor__(self, other):
        if not isinstance(other, Belnapian):
            return NotImplemented
        return self.xor(other)

    def __invert__(self):
        return self.not_()


_ORDINALS = {value: index for index, value in enumerate(Belnapian)}
