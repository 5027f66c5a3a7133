"""Logging setup: timestamped diagnostics plus a plain report stream."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
REPORT_FORMAT = "%(message)s"
LOGGER_NAME = "domain_checker"
REPORT_LOGGER_NAME = "domain_checker.report"


class ReportHandler(logging.StreamHandler):
    """Writes report lines to stdout with no timestamp or level."""

    def __init__(self) -> None:
        super().__init__(sys.stdout)
        self.setFormatter(logging.Formatter(REPORT_FORMAT))

    def emit(self, record: logging.LogRecord) -> None:
        # follow sys.stdout if it is swapped after configuration
        self.stream = sys.stdout
        super().emit(record)


def configure_logging(verbose: bool = False) -> None:
    """Send diagnostics to stderr and report lines to stdout as bare text.

    Safe to call more than once; the report handler is only attached once.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)

    report = get_report_logger()
    report.setLevel(logging.INFO)
    report.propagate = False
    if not any(isinstance(handler, ReportHandler) for handler in report.handlers):
        report.addHandler(ReportHandler())


def get_logger() -> logging.Logger:
    """Diagnostics logger (warnings, failures, debug detail)."""
    return logging.getLogger(LOGGER_NAME)


def get_report_logger() -> logging.Logger:
    """Human-facing output: banner, word statistics, completion notes."""
    return logging.getLogger(REPORT_LOGGER_NAME)
