from typing import List

from loguru import logger

from belnapian.check.pipeline import CheckConfig, CheckPipeline, Pass
from belnapian.check.passes import default_passes
from belnapian.check.report import CheckReport


class TableVerifier:
    """Runs the table checks; the default passes are used unless some are added."""

    def __init__(self, fail_fast: bool = False):
        self.config = CheckConfig(fail_fast=fail_fast)
        self.passes: List[Pass] = []
        self.report: CheckReport | None = None

    def add(self, *passes: Pass):
        for p in passes:
            self.passes.append(p)

    def verify(self) -> CheckReport:
        checker = CheckPipeline(self.config)
        for p in self.passes or default_passes():
            checker.add_pass(p)

        algebra = checker.build_algebra()
        res = checker.run_passes(algebra)

        self.report = CheckReport(algebra, res.diagnostics)
        if not res.success:
            logger.error("Table check failed:\n{report}", report=self.report)
        else:
            logger.info(
                "Table check passed. passes={n} warnings={w}",
                n=len(checker.passes),
                w=len(self.report.warnings),
            )
        return self.report


def verify(fail_fast: bool = False) -> CheckReport:
    return TableVerifier(fail_fast=fail_fast).verify()
