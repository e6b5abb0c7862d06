import sys

from loguru import logger

from belnapian.logging_config import configure_logging

# Silent as a library; configure_logging() turns records on.
logger.disable("belnapian")

# extended must load before unknown and mixed: their tables hold EBelnapian values.
from belnapian.core.extended import EBelnapian, Tag  # noqa: E402
from belnapian.core.belnapian import Belnapian  # noqa: E402
from belnapian.core.errors import NotRepresentableError  # noqa: E402
from belnapian.core.powerset import PowerSet  # noqa: E402
from belnapian.core.ternary import TernaryValue  # noqa: E402
from belnapian.core.unknown import Unknown  # noqa: E402
from belnapian.api import TableVerifier, verify  # noqa: E402

__all__ = [
    "Belnapian",
    "EBelnapian",
    "NotRepresentableError",
    "PowerSet",
    "TableVerifier",
    "Tag",
    "TernaryValue",
    "Unknown",
    "verify",
]


def main() -> None:
    configure_logging()
    logger.info("belnapian-check entrypoint invoked")
    report = verify()
    print(report)
    sys.exit(0 if report.success else 1)
