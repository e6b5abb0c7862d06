from __future__ import annotations

from enum import Enum

from .errors import NotRepresentableError
from .laws import law


class TernaryValue(Enum):
    """
    Kleene-style 3-valued logic.

    UNKNOWN is subjective: the proposition is FALSE or TRUE, we just don't
    know which. Implication is left out on purpose, since Kleene, RM3 and
    Łukasiewicz logics disagree on it.
    """

    FALSE = "0"
    TRUE = "1"
    UNKNOWN = "?"

    @classmethod
    def from_bool(cls, value: bool) -> TernaryValue:
        return cls.TRUE if value else cls.FALSE

    def is_unknown(self) -> bool:
        return self is TernaryValue.UNKNOWN

    def to_bool(self) -> bool:
        if self is TernaryValue.UNKNOWN:
            raise NotRepresentableError(self, "bool")
        return self is TernaryValue.TRUE

    @law(commutative=True)
    def and_(self, other: TernaryValue) -> TernaryValue:
        pair = {self, other}
        if TernaryValue.FALSE in pair:
            return TernaryValue.FALSE
        if TernaryValue.UNKNOWN in pair:
            return TernaryValue.UNKNOWN
        return TernaryValue.TRUE

    @law(commutative=True)
    def or_(self, other: TernaryValue) -> TernaryValue:
        pair = {self, other}
        if TernaryValue.TRUE in pair:
            return TernaryValue.TRUE
        if TernaryValue.UNKNOWN in pair:
            return TernaryValue.UNKNOWN
        return TernaryValue.FALSE

    @law(commutative=True)
    def xor(self, other: TernaryValue) -> TernaryValue:
        if TernaryValue.UNKNOWN in (self, other):
            return TernaryValue.UNKNOWN
        if self is other:
            return TernaryValue.FALSE
        return TernaryValue.TRUE

    @law(involution=True)
    def not_(self) -> TernaryValue:
        if self is TernaryValue.FALSE:
            return TernaryValue.TRUE
        if self is TernaryValue.TRUE:
            return TernaryValue.FALSE
        return TernaryValue.UNKNOWN

    @law(commutative=True)
    def eq(self, other: TernaryValue) -> TernaryValue:
        if TernaryValue.UNKNOWN in (self, other):
            return TernaryValue.UNKNOWN
        return TernaryValue.TRUE if self is other else TernaryValue.FALSE

    def __and__(self, other):
        if not isinstance(other, TernaryValue):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other):
        if not isinstance(other, TernaryValue):
            return NotImplemented
        return self.or_(other)

    def __xor__(self, other):
        if not isinstance(other, TernaryValue):
            return NotImplemented
        return self.xor(other)

    def __invert__(self):
        return self.not_()
