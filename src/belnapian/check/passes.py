from itertools import product
from typing import Any, Dict

from belnapian.check.pipeline import Algebra, DiagnosticSink, Operation, Pass
from belnapian.check.semantics import expected, lift_unary
from belnapian.core.belnapian import Belnapian
from belnapian.core.conversions import (
    belnapian_from_bool,
    bool_from_belnapian,
    extended_from_ternary,
    powerset_from_unknown,
    ternary_from_extended,
    unknown_from_powerset,
)
from belnapian.core.extended import EBelnapian
from belnapian.core.powerset import PowerSet
from belnapian.core.ternary import TernaryValue

# Result type of every binary operation, keyed by operand type.
BINARY_RESULT: Dict[str, type] = {
    "Belnapian": Belnapian,
    "TernaryValue": TernaryValue,
    "Unknown": EBelnapian,
    "EBelnapian": EBelnapian,
}


def _fmt(value: Any) -> str:
    if isinstance(value, EBelnapian):
        return f"{value.tag.name}({value.value.name})"
    return value.name


class TotalityPass(Pass):
    name = "TotalityPass"

    def run(self, algebra: Algebra, diag: DiagnosticSink) -> None:
        for op in algebra.operations:
            # Partial operations may raise by contract.
            if op.law is not None and not op.law.total:
                continue
            domain = algebra.domains[op.owner]
            result_type = type(domain[0]) if op.arity == 1 else BINARY_RESULT[op.owner]
            operands = [(x,) for x in domain] if op.arity == 1 else list(product(domain, repeat=2))
            for args in operands:
                where = f"{op.label}({', '.join(_fmt(a) for a in args)})"
                try:
                    result = op.func(*args)
                except Exception as exc:
                    diag.error("T001", f"Operation raised {type(exc).__name__}: {exc}", location=where)
                    continue
                if not isinstance(result, result_type):
                    diag.error(
                        "T001",
                        f"Expected {result_type.__name__}, got {type(result).__name__}",
                        location=where,
                    )

        for name, func in algebra.mixed.items():
            for known, unknown in product(algebra.domains["Belnapian"], algebra.domains["Unknown"]):
                where = f"{func.__name__}({known.name}, {unknown.name})"
                try:
                    result = func(known, unknown)
                except Exception as exc:
                    diag.error("T001", f"Operation raised {type(exc).__name__}: {exc}", location=where)
                    continue
                if not isinstance(result, EBelnapian):
                    diag.error("T001", f"Expected EBelnapian, got {type(result).__name__}", location=where)


class TableSoundnessPass(Pass):
    """
    Compare every table entry with the union of the pointwise results.
    Unknown.not_ is checked the same way against the lifted negation.

    A known result where the union has several members is an unsound
    collapse (T002); any other mismatch means the result set is not the
    tightest one (T003).
    """

    name = "TableSoundnessPass"

    def run(self, algebra: Algebra, diag: DiagnosticSink) -> None:
        for owner in ("Unknown", "EBelnapian"):
            domain = algebra.domains[owner]
            for op in algebra.operations:
                if op.owner != owner:
                    continue
                if op.arity == 1:
                    if owner == "Unknown":
                        self._compare_unary(diag, op, domain)
                    continue
                for a, b in product(domain, repeat=2):
                    self._compare(diag, f"{op.label}({_fmt(a)}, {_fmt(b)})", op.name, a, b, op.func(a, b))

        for name, func in algebra.mixed.items():
            for known, unknown in product(algebra.domains["Belnapian"], algebra.domains["Unknown"]):
                where = f"{func.__name__}({known.name}, {unknown.name})"
                self._compare(diag, where, name, known, unknown, func(known, unknown))

    @staticmethod
    def _compare_unary(diag: DiagnosticSink, op: Operation, domain) -> None:
        for x in domain:
            want = lift_unary(op.name, x)
            actual = PowerSet(op.func(x).value)
            if actual != want:
                diag.error(
                    "T003",
                    f"Got {actual.name}, tightest result is {want.name}",
                    location=f"{op.label}({x.name})",
                )

    @staticmethod
    def _compare(diag: DiagnosticSink, where: str, op: str, a: Any, b: Any, actual: EBelnapian) -> None:
        want = expected(op, a, b)
        if actual == want:
            return
        if not actual.is_unknown() and want.is_unknown():
            diag.error("T002", f"Unsound collapse to {_fmt(actual)}, expected {_fmt(want)}", location=where)
        else:
            diag.error("T003", f"Got {_fmt(actual)}, tightest result is {_fmt(want)}", location=where)


class InvolutionPass(Pass):
    name = "InvolutionPass"

    def run(self, algebra: Algebra, diag: DiagnosticSink) -> None:
        for op in algebra.operations:
            if op.law is None or not op.law.involution:
                continue
            for x in algebra.domains[op.owner]:
                twice = op.func(op.func(x))
                if twice != x:
                    diag.error(
                        "T004",
                        f"Applying twice gives {_fmt(twice)}",
                        location=f"{op.label}({_fmt(x)})",
                    )


class CommutativityPass(Pass):
    name = "CommutativityPass"

    def run(self, algebra: Algebra, diag: DiagnosticSink) -> None:
        for op in algebra.operations:
            if op.law is None or not op.law.commutative:
                continue
            for a, b in product(algebra.domains[op.owner], repeat=2):
                left, right = op.func(a, b), op.func(b, a)
                if left != right:
                    diag.error(
                        "T005",
                        f"{_fmt(left)} != {_fmt(right)} with operands swapped",
                        location=f"{op.label}({_fmt(a)}, {_fmt(b)})",
                    )


class LayerConsistencyPass(Pass):
    """The extended layer must agree with the atomic and ternary layers."""

    name = "LayerConsistencyPass"

    def run(self, algebra: Algebra, diag: DiagnosticSink) -> None:
        for op in algebra.operations:
            if op.owner != "Belnapian":
                continue
            extended_op = algebra.operation("EBelnapian", op.name)
            if extended_op is None:
                continue
            for args in self._operands(op, algebra.domains["Belnapian"]):
                want = EBelnapian.known(op.func(*args))
                got = extended_op.func(*(EBelnapian.known(a) for a in args))
                if got != want:
                    diag.error(
                        "T006",
                        f"Extended layer gives {_fmt(got)}, atomic layer {_fmt(want)}",
                        location=f"{op.label}({', '.join(_fmt(a) for a in args)})",
                    )

        for op in algebra.operations:
            if op.owner != "TernaryValue":
                continue
            extended_op = algebra.operation("EBelnapian", op.name)
            if extended_op is None:
                continue
            for args in self._operands(op, algebra.domains["TernaryValue"]):
                want = op.func(*args)
                got = ternary_from_extended(extended_op.func(*(extended_from_ternary(a) for a in args)))
                if got != want:
                    diag.error(
                        "T006",
                        f"Extended projection gives {_fmt(got)}, ternary logic {_fmt(want)}",
                        location=f"{op.label}({', '.join(_fmt(a) for a in args)})",
                    )

    @staticmethod
    def _operands(op: Operation, domain):
        if op.arity == 1:
            return [(x,) for x in domain]
        return list(product(domain, repeat=2))


class ConversionRoundTripPass(Pass):
    name = "ConversionRoundTripPass"

    def run(self, algebra: Algebra, diag: DiagnosticSink) -> None:
        for value in (False, True):
            back = bool_from_belnapian(belnapian_from_bool(value))
            if back is not value:
                diag.error("T007", f"Got {back}", location=f"bool -> Belnapian -> bool ({value})")

        for value in algebra.domains["TernaryValue"]:
            back = ternary_from_extended(extended_from_ternary(value))
            if back is not value:
                diag.error("T007", f"Got {back.name}", location=f"TernaryValue -> EBelnapian -> TernaryValue ({value.name})")

        for value in algebra.domains["Unknown"]:
            back = unknown_from_powerset(powerset_from_unknown(value))
            if back is not value:
                diag.error("T007", f"Got {back.name}", location=f"Unknown -> PowerSet -> Unknown ({value.name})")

        for value in algebra.domains["Unknown"]:
            if value.members() != powerset_from_unknown(value).members():
                diag.warning("T007", "Membership differs after widening", location=f"PowerSet({value.name})")


def default_passes():
    return [
        TotalityPass(),
        TableSoundnessPass(),
        InvolutionPass(),
        CommutativityPass(),
        LayerConsistencyPass(),
        ConversionRoundTripPass(),
    ]
