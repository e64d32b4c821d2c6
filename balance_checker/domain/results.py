"""Domain-level results for balance file validation."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Union


class FailureKind(str, Enum):
    NO_FILE_SELECTED = "no_file_selected"
    NAME_FORMAT_INVALID = "name_format_invalid"
    TRAILING_BLANK_LINE = "trailing_blank_line"
    EMPTY_OR_MISSING_CONTROL_LINE = "empty_or_missing_control_line"
    CONTROL_FIELD_COUNT_MISMATCH = "control_field_count_mismatch"
    CONTROL_CODE_MISMATCH = "control_code_mismatch"
    DATE_FORMAT_INVALID = "date_format_invalid"
    NON_NUMERIC_DECLARED_ROWS = "non_numeric_declared_rows"
    NON_NUMERIC_DECLARED_TOTAL = "non_numeric_declared_total"
    ROW_COUNT_MISMATCH = "row_count_mismatch"
    MISSING_TAB_SEPARATOR = "missing_tab_separator"
    INSUFFICIENT_FIELDS = "insufficient_fields"
    NON_NUMERIC_LINE_FIELDS = "non_numeric_line_fields"
    TOTAL_RECONCILIATION_MISMATCH = "total_reconciliation_mismatch"


@dataclass(frozen=True)
class ValidationSuccess:
    message: str

    @property
    def passed(self) -> bool:
        return True


@dataclass(frozen=True)
class ValidationFailure:
    """The first rule a file broke.

    ``details`` is only populated for reconciliation mismatches, where it maps
    a label to an amount already formatted with two decimals.
    """

    kind: FailureKind
    message: str
    details: Mapping[str, str] | None = None
    line_number: int | None = None

    @property
    def passed(self) -> bool:
        return False


ValidationOutcome = Union[ValidationSuccess, ValidationFailure]
