"""
Reference semantics for the precomputed tables.

An operation on sets is the union of the Belnapian operation over every pair
of candidates. A union with one member collapses to a known value.
"""
from typing import FrozenSet, Union

from belnapian.core.belnapian import Belnapian
from belnapian.core.extended import EBelnapian
from belnapian.core.powerset import PowerSet
from belnapian.core.unknown import Unknown

Operand = Union[Belnapian, Unknown, PowerSet, EBelnapian]


def members(value: Operand) -> FrozenSet[Belnapian]:
    if isinstance(value, EBelnapian):
        return members(value.value)
    if isinstance(value, Belnapian):
        return frozenset([value])
    return value.members()


def lift(op: str, a: Operand, b: Operand) -> PowerSet:
    return PowerSet.from_members(
        getattr(x, op)(y) for x in members(a) for y in members(b)
    )


def lift_unary(op: str, a: Operand) -> PowerSet:
    return PowerSet.from_members(getattr(x, op)() for x in members(a))


def collapse(result: PowerSet) -> EBelnapian:
    if result.is_empty():
        raise ValueError("Empty result set: the operands are inconsistent")
    if result.is_unknown():
        return EBelnapian.unknown(Unknown(result.value))
    (value,) = result.members()
    return EBelnapian.known(value)


def expected(op: str, a: Operand, b: Operand) -> EBelnapian:
    return collapse(lift(op, a, b))
