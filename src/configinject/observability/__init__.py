"""
Observability for configinject.

Structured, single-line logs written to stderr:

    t=<ISO8601> level=INFO run=injected mod=resolvers op=resolve msg="..." key=value

Usage:
    >>> from configinject.observability import get_logger, setup_logging
    >>>
    >>> setup_logging("DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Resolved email settings", retries=3)

Configuration:
    - CONFIGINJECT_OBSERVABILITY__LOG_LEVEL=INFO (logging level)
"""

from .logging import (
    clear_run_label,
    get_logger,
    get_run_label,
    set_run_label,
    setup_logging,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "set_run_label",
    "get_run_label",
    "clear_run_label",
]
