"""
Logging configuration for the application.
Bot verdicts get their own level so a noisy form can be quieted without
hiding configuration warnings.
"""
import logging
import sys

from ghostfield.app.core.config import settings

# Loggers that record one line per rejected submission
VERDICT_LOGGERS = (
    "ghostfield.app.services.validator",
    "ghostfield.api.forms",
)


def _level(name: str | None, default: int = logging.INFO) -> int:
    return getattr(logging, (name or "").upper(), default)


def setup_logging(level: str | None = None, verdict_level: str | None = None) -> logging.Logger:
    """Configure application logging. Returns the ghostfield logger."""
    logging.basicConfig(
        level=_level(level or settings.log_level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    verdict_val = _level(verdict_level or settings.verdict_log_level)
    for name in VERDICT_LOGGERS:
        logging.getLogger(name).setLevel(verdict_val)
    return logging.getLogger("ghostfield")


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"ghostfield.{name}")
