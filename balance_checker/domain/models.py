"""Domain models for the balance file validation pipeline.

These dataclasses capture the parsed shape of a balance report: the file name,
its control line, each data line and the per-group subtotals derived from them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from balance_checker.config import SETTINGS


@dataclass(frozen=True)
class BalanceFileName:
    """A file name that matched ``TVWXYB<Z><DDMMYYYY>.txt``."""

    value: str
    balance_code: int

    @property
    def control_prefix(self) -> str:
        """First five characters of the name, which the control code must equal."""
        return self.value[:5]


@dataclass(frozen=True)
class ControlLine:
    """First line of the file, declaring the expected row count and total."""

    control_code: str
    cut_off_date: str
    declared_rows: int
    declared_total: Decimal
    raw_rows: str
    raw_total: str


@dataclass(frozen=True)
class DataLine:
    line_number: int
    group_code: int
    subtotal: Decimal


@dataclass
class GroupSubtotals:
    """Running totals for the reconciliation groups of a single validation."""

    buckets: dict[int, Decimal] = field(default_factory=lambda: {code: Decimal("0") for code in SETTINGS.group_codes})
    total: Decimal = Decimal("0")

    def add(self, group_code: int, amount: Decimal) -> bool:
        if group_code not in self.buckets:
            return False
        self.buckets[group_code] += amount
        self.total += amount
        return True

    def as_dict(self) -> dict[int, Decimal]:
        return dict(self.buckets)
