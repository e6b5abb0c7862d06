from __future__ import annotations

import os
import sys
from pathlib import Path

from loguru import logger

_CONFIGURED = False


def configure_logging(
    level: str = os.getenv("BELNAPIAN_LOG_LEVEL", "INFO"),
    log_dir: str | None = os.getenv("BELNAPIAN_LOG_DIR"),
) -> None:
    """
    Turn on belnapian's log output for a process that owns its logging,
    such as the belnapian-check CLI.

    Importing the package never touches sinks or the filesystem: belnapian
    records stay disabled until this runs. It logs to stderr at `level`;
    when `log_dir` is given it also writes JSON lines to
    <log_dir>/belnapian_YYYY-MM-DD.json.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger.remove()
    logger.add(sys.stderr, level=level, colorize=sys.stderr.isatty())

    if log_dir:
        logger.add(
            Path(log_dir) / "belnapian_{time:YYYY-MM-DD}.json",
            level="DEBUG",
            serialize=True,
            rotation="10 MB",
            retention="30 days",
            enqueue=True,
        )

    logger.configure(extra={"service": "belnapian", "env": os.getenv("BELNAPIAN_ENV", "dev")})
    logger.enable("belnapian")
    _CONFIGURED = True
