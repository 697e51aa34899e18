import logging
import sys
from typing import Optional

from core.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """
    Send harness logs to stdout.

    ``level`` overrides OTEL_GOLDEN_LOG_LEVEL and is case-insensitive.
    Golden checks log creations and updates at INFO/WARNING, comparator
    traversal details at DEBUG.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel((level or settings.log_level).upper())

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    ))
    root_logger.addHandler(console)
