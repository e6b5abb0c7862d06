"""
Conversions between bool, TernaryValue, Belnapian, Unknown, PowerSet and
EBelnapian.

Total conversions always succeed. Partial ones raise NotRepresentableError
when the source value has no counterpart in the target type.
"""
from __future__ import annotations

from .belnapian import Belnapian
from .errors import NotRepresentableError
from .extended import EBelnapian, Tag
from .laws import partial
from .powerset import PowerSet
from .ternary import TernaryValue
from .unknown import Unknown

# bool

def belnapian_from_bool(value: bool) -> Belnapian:
    return Belnapian.from_bool(value)


@partial(reason="NEITHER and BOTH have no boolean counterpart")
def bool_from_belnapian(value: Belnapian) -> bool:
    return value.to_bool()


def ternary_from_bool(value: bool) -> TernaryValue:
    return TernaryValue.from_bool(value)


@partial(reason="UNKNOWN has no boolean counterpart")
def bool_from_ternary(value: TernaryValue) -> bool:
    return value.to_bool()


def extended_from_bool(value: bool) -> EBelnapian:
    return EBelnapian.from_bool(value)


@partial(reason="only known FALSE and TRUE have a boolean counterpart")
def bool_from_extended(value: EBelnapian) -> bool:
    return value.to_bool()


# TernaryValue

@partial(reason="NEITHER and BOTH are not ternary values")
def ternary_from_belnapian(value: Belnapian) -> TernaryValue:
    if value is Belnapian.FALSE:
        return TernaryValue.FALSE
    if value is Belnapian.TRUE:
        return TernaryValue.TRUE
    raise NotRepresentableError(value, "TernaryValue")


@partial(reason="UNKNOWN is a set of values, not a single Belnapian")
def belnapian_from_ternary(value: TernaryValue) -> Belnapian:
    if value is TernaryValue.FALSE:
        return Belnapian.FALSE
    if value is TernaryValue.TRUE:
        return Belnapian.TRUE
    raise NotRepresentableError(value, "Belnapian")


def extended_from_ternary(value: TernaryValue) -> EBelnapian:
    if value is TernaryValue.UNKNOWN:
        return EBelnapian.unknown(Unknown.FT)
    return EBelnapian.known(belnapian_from_ternary(value))


@partial(reason="only FALSE, TRUE and the FT set exist in ternary logic")
def ternary_from_extended(value: EBelnapian) -> TernaryValue:
    if value.tag == Tag.UNKNOWN:
        return ternary_from_unknown(value.value)
    try:
        return ternary_from_belnapian(value.value)
    except NotRepresentableError:
        raise NotRepresentableError(value, "TernaryValue") from None


@partial(reason="only the FT set maps to ternary UNKNOWN")
def ternary_from_unknown(value: Unknown) -> TernaryValue:
    if value is Unknown.FT:
        return TernaryValue.UNKNOWN
    raise NotRepresentableError(value, "TernaryValue")


@partial(reason="only ternary UNKNOWN is an ignorance set")
def unknown_from_ternary(value: TernaryValue) -> Unknown:
    if value is TernaryValue.UNKNOWN:
        return Unknown.FT
    raise NotRepresentableError(value, "Unknown")


# Belnapian / Unknown / EBelnapian

def extended_from_belnapian(value: Belnapian) -> EBelnapian:
    return EBelnapian.known(value)


@partial(reason="an Unknown-tagged value holds a set, not a single Belnapian")
def belnapian_from_extended(value: EBelnapian) -> Belnapian:
    if value.tag == Tag.KNOWN:
        return value.value
    raise NotRepresentableError(value, "Belnapian")


def extended_from_unknown(value: Unknown) -> EBelnapian:
    return EBelnapian.unknown(value)


@partial(reason="a Known-tagged value is not an ignorance set")
def unknown_from_extended(value: EBelnapian) -> Unknown:
    if value.tag == Tag.UNKNOWN:
        return value.value
    raise NotRepresentableError(value, "Unknown")


# PowerSet

def powerset_from_unknown(value: Unknown) -> PowerSet:
    return value.to_powerset()


@partial(reason="the empty set and singletons are not ignorance sets")
def unknown_from_powerset(value: PowerSet) -> Unknown:
    if not value.is_unknown():
        raise NotRepresentableError(value, "Unknown")
    return Unknown(value.value)
