from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from loguru import logger

from belnapian.core.belnapian import Belnapian
from belnapian.core.extended import EBelnapian
from belnapian.core.laws import Law, laws_of
from belnapian.core.mixed import (
    and_known_unknown,
    annihilation_known_unknown,
    eq_known_unknown,
    or_known_unknown,
    superposition_known_unknown,
)
from belnapian.core.ternary import TernaryValue
from belnapian.core.unknown import Unknown

OPERATION_NAMES = ("and_", "or_", "xor", "superposition", "annihilation", "eq", "not_")

class DiagnosticSeverity(Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"

@dataclass
class Diagnostic:
    severity: DiagnosticSeverity
    code: str
    message: str
    location: Optional[str] = None

class DiagnosticSink:
    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def error(self, code: str, message: str, location: Optional[str] = None):
        self.diagnostics.append(Diagnostic(DiagnosticSeverity.ERROR, code, message, location))

    def warning(self, code: str, message: str, location: Optional[str] = None):
        self.diagnostics.append(Diagnostic(DiagnosticSeverity.WARNING, code, message, location))

    def has_errors(self) -> bool:
        return any(d.severity == DiagnosticSeverity.ERROR for d in self.diagnostics)

@dataclass
class Operation:
    owner: str
    name: str
    func: Callable
    arity: int
    law: Optional[Law] = None

    @property
    def label(self) -> str:
        return f"{self.owner}.{self.name}"

@dataclass
class Algebra:
    """Snapshot of every domain and operation the passes check."""
    domains: Dict[str, Tuple[Any, ...]] = field(default_factory=dict)
    operations: List[Operation] = field(default_factory=list)
    mixed: Dict[str, Callable] = field(default_factory=dict)

    def operation(self, owner: str, name: str) -> Optional[Operation]:
        for op in self.operations:
            if op.owner == owner and op.name == name:
                return op
        return None

@dataclass
class CheckConfig:
    fail_fast: bool = False

@dataclass
class CheckResult:
    success: bool
    diagnostics: List[Diagnostic]
    algebra: Optional[Algebra] = None

class Pass(ABC):
    name: str

    @abstractmethod
    def run(self, algebra: Algebra, diag: DiagnosticSink) -> None:
        ...


class CheckPipeline:
    def __init__(self, config: CheckConfig):
        self.config = config
        self.passes: List[Pass] = []

    def add_pass(self, p: Pass):
        self.passes.append(p)

    def build_algebra(self) -> Algebra:
        algebra = Algebra()
        algebra.domains["Belnapian"] = tuple(Belnapian)
        algebra.domains["TernaryValue"] = tuple(TernaryValue)
        algebra.domains["Unknown"] = tuple(Unknown)
        algebra.domains["EBelnapian"] = tuple(
            [EBelnapian.known(b) for b in Belnapian] + [EBelnapian.unknown(u) for u in Unknown]
        )

        for cls in (Belnapian, TernaryValue, Unknown, EBelnapian):
            for name in OPERATION_NAMES:
                func = getattr(cls, name, None)
                if func is None:
                    continue
                algebra.operations.append(
                    Operation(
                        owner=cls.__name__,
                        name=name,
                        func=func,
                        arity=1 if name == "not_" else 2,
                        law=laws_of(func),
                    )
                )

        algebra.mixed = {
            "and_": and_known_unknown,
            "or_": or_known_unknown,
            "superposition": superposition_known_unknown,
            "annihilation": annihilation_known_unknown,
            "eq": eq_known_unknown,
        }
        logger.debug(
            "Built algebra: {ops} operations over {domains} domains",
            ops=len(algebra.operations),
            domains=len(algebra.domains),
        )
        return algebra

    def run_passes(self, algebra: Algebra) -> CheckResult:
        diag = DiagnosticSink()

        for p in self.passes:
            before = len(diag.diagnostics)
            p.run(algebra, diag)
            logger.info(
                "Pass {name} finished with {n} diagnostics",
                name=p.name,
                n=len(diag.diagnostics) - before,
            )
            if self.config.fail_fast and diag.has_errors():
                logger.warning("Stopping after {name}: fail_fast is set", name=p.name)
                break

        return CheckResult(success=not diag.has_errors(), diagnostics=diag.diagnostics, algebra=algebra)
