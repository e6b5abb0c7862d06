from typing import List

from belnapian.check.pipeline import Algebra, Diagnostic, DiagnosticSeverity

class CheckReport:
    def __init__(self, algebra: Algebra, diagnostics: List[Diagnostic]):
        self.algebra = algebra
        self.diagnostics = diagnostics

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == DiagnosticSeverity.ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == DiagnosticSeverity.WARNING]

    @property
    def success(self) -> bool:
        return not self.errors

    def __str__(self):
        lines = []
        lines.append("Belnapian Table Check")
        lines.append("=====================")
        lines.append(f"Operations: {len(self.algebra.operations) + len(self.algebra.mixed)}")

        errors = self.errors
        warnings = self.warnings

        lines.append(f"Errors: {len(errors)}")
        lines.append(f"Warnings: {len(warnings)}")

        if errors:
            lines.append("\nErrors:")
            for e in errors:
                lines.append(f"  [{e.code}] {e.message} @ {e.location}")

        if warnings:
            lines.append("\nWarnings:")
            for w in warnings:
                lines.append(f"  [{w.code}] {w.message} @ {w.location}")

        return "\n".join(lines)
