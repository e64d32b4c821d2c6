"""Central configuration for the balance checker package."""
from __future__ import annotations

import logging
import os
import re
import sys
from dataclasses import dataclass
from decimal import Decimal

import structlog

FILE_NAME_PATTERN = re.compile(r"^TVWXYB([1-4])\d{8}\.txt$", re.ASCII)
CUT_OFF_DATE_PATTERN = re.compile(r"^\d{2}/\d{2}/\d{4}$", re.ASCII)


@dataclass(slots=True, frozen=True)
class Settings:
    tolerance_abs: Decimal
    group_codes: range
    file_name_pattern: re.Pattern[str]
    date_pattern: re.Pattern[str]
    expected_control_fields: int
    encoding: str
    log_level: str


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        tolerance_abs=Decimal(env.get("BALANCE_CHECKER_TOLERANCE", "0.001")),
        group_codes=range(1, 6),
        file_name_pattern=FILE_NAME_PATTERN,
        date_pattern=CUT_OFF_DATE_PATTERN,
        expected_control_fields=4,
        encoding=env.get("BALANCE_CHECKER_ENCODING", "utf-8-sig"),
        log_level=env.get("BALANCE_CHECKER_LOG_LEVEL", "INFO").upper(),
    )


SETTINGS = load_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure structlog for console or JSON output depending on the terminal."""
    name = (level or SETTINGS.log_level).upper()
    numeric_level = logging.getLevelName(name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer() if sys.stderr.isatty() else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def install_default_logging() -> None:
    """Drop debug and info events until an entry point calls :func:`configure_logging`."""
    if not structlog.is_configured():
        structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))


install_default_logging()
