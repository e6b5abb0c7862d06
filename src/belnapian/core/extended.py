from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from .belnapian import Belnapian
from .errors import NotRepresentableError
from .laws import law

if TYPE_CHECKING:
    from .unknown import Unknown


class Tag(Enum):
    KNOWN = "known"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class EBelnapian:
    """
    15-valued extended Belnap logic: either a known Belnapian value or an
    Unknown set of candidate values.

    Binary operations dispatch on the pair of tags. Known x Known uses the
    Belnapian rules, Unknown x Unknown the Unknown tables, and mixed pairs the
    Known/Unknown tables with the known operand first. XOR is not defined at
    this level: it has no canonical generalization to ignorance sets.
    """

    tag: Tag
    value: Union[Belnapian, "Unknown"]

    def __post_init__(self):
        from .unknown import Unknown

        expected = Belnapian if self.tag == Tag.KNOWN else Unknown
        if not isinstance(self.value, expected):
            raise TypeError(
                f"{self.tag.name} value must be {expected.__name__}, got {type(self.value).__name__}"
            )

    @classmethod
    def known(cls, value: Belnapian) -> EBelnapian:
        return cls(Tag.KNOWN, value)

    @classmethod
    def unknown(cls, value: Unknown) -> EBelnapian:
        return cls(Tag.UNKNOWN, value)

    @classmethod
    def from_bool(cls, value: bool) -> EBelnapian:
        return cls.known(Belnapian.from_bool(value))

    def is_unknown(self) -> bool:
        return self.tag == Tag.UNKNOWN

    def to_bool(self) -> bool:
        if self.tag == Tag.KNOWN and self.value in (Belnapian.FALSE, Belnapian.TRUE):
            return self.value is Belnapian.TRUE
        raise NotRepresentableError(self, "bool")

    @law(involution=True)
    def not_(self) -> EBelnapian:
        return EBelnapian(self.tag, self.value.not_())

    @law(commutative=True)
    def and_(self, other: EBelnapian) -> EBelnapian:
        return self._dispatch(other, "and_", and_known_unknown)

    @law(commutative=True)
    def or_(self, other: EBelnapian) -> EBelnapian:
        return self._dispatch(other, "or_", or_known_unknown)

    @law(commutative=True)
    def superposition(self, other: EBelnapian) -> EBelnapian:
        return self._dispatch(other, "superposition", superposition_known_unknown)

    @law(commutative=True)
    def annihilation(self, other: EBelnapian) -> EBelnapian:
        return self._dispatch(other, "annihilation", annihilation_known_unknown)

    @law(commutative=True)
    def eq(self, other: EBelnapian) -> EBelnapian:
        self._require(other)
        if self.tag == Tag.KNOWN and other.tag == Tag.KNOWN:
            return EBelnapian.known(self.value.eq(other.value))
        if self.tag == Tag.UNKNOWN and other.tag == Tag.UNKNOWN:
            return self.value.eq(other.value)
        if self.tag == Tag.KNOWN:
            return eq_known_unknown(self.value, other.value)
        return eq_known_unknown(other.value, self.value)

    def _dispatch(self, other: EBelnapian, op: str, mixed) -> EBelnapian:
        self._require(other)
        if self.tag == Tag.KNOWN and other.tag == Tag.KNOWN:
            return EBelnapian.known(getattr(self.value, op)(other.value))
        if self.tag == Tag.UNKNOWN and other.tag == Tag.UNKNOWN:
            return getattr(self.value, op)(other.value)
        # Commutative: put the known operand first.
        if self.tag == Tag.KNOWN:
            return mixed(self.value, other.value)
        return mixed(other.value, self.value)

    @staticmethod
    def _require(other) -> None:
        if not isinstance(other, EBelnapian):
            raise TypeError(f"Expected EBelnapian, got {type(other).__name__}")

    def __and__(self, other):
        if not isinstance(other, EBelnapian):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other):
        if not isinstance(other, EBelnapian):
            return NotImplemented
        return self.or_(other)

    def __invert__(self):
        return self.not_()


# Imported last: the mixed tables are built out of EBelnapian values.
from .mixed import (  # noqa: E402
    and_known_unknown,
    annihilation_known_unknown,
    eq_known_unknown,
    or_known_unknown,
    superposition_known_unknown,
)
