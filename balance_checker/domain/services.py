"""Domain services implementing the balance file rules."""
from __future__ import annotations

from decimal import Decimal
from typing import Sequence

import structlog

from balance_checker.config import SETTINGS, Settings
from balance_checker.infrastructure.parsing.utils import (
    format_amount,
    parse_decimal,
    parse_int,
    split_lines,
)

from . import messages
from .models import BalanceFileName, ControlLine, DataLine, GroupSubtotals
from .results import FailureKind, ValidationFailure, ValidationOutcome, ValidationSuccess

logger = structlog.get_logger(__name__)


class BalanceFileRejected(Exception):
    """Raised inside the pipeline to stop at the first broken rule."""

    def __init__(self, failure: ValidationFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure


def _reject(
    kind: FailureKind,
    message: str,
    details: dict[str, str] | None = None,
    line_number: int | None = None,
) -> BalanceFileRejected:
    return BalanceFileRejected(ValidationFailure(kind=kind, message=message, details=details, line_number=line_number))


class BalanceFileValidator:
    """Runs the ordered checks over one balance file; the first failure wins."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or SETTINGS

    def validate(self, file_name: str, content: str) -> ValidationOutcome:
        try:
            outcome = self._run(file_name, content)
        except BalanceFileRejected as exc:
            logger.debug("balance_file_rejected", file_name=file_name, kind=exc.failure.kind.value)
            return exc.failure
        return outcome

    def _run(self, file_name: str, content: str) -> ValidationSuccess:
        name = self.parse_file_name(file_name)
        if name is None:
            raise _reject(FailureKind.NAME_FORMAT_INVALID, messages.NAME_FORMAT_INVALID)

        lines = split_lines(content)
        control_fields = self._check_structure(lines)
        control = self._parse_control_line(control_fields, name)
        useful_lines = self._useful_lines(lines, control.declared_rows)

        subtotals = GroupSubtotals(buckets={code: Decimal("0") for code in self._settings.group_codes})
        for data_line in self._parse_data_lines(useful_lines):
            subtotals.add(data_line.group_code, data_line.subtotal)

        self._reconcile(control, subtotals)
        logger.debug(
            "balance_file_approved",
            file_name=file_name,
            rows=control.declared_rows,
            total=str(control.declared_total),
        )
        return ValidationSuccess(message=messages.APPROVED)

    def parse_file_name(self, file_name: str) -> BalanceFileName | None:
        match = self._settings.file_name_pattern.fullmatch(file_name)
        if match is None:
            return None
        return BalanceFileName(value=file_name, balance_code=int(match.group(1)))

    def _check_structure(self, lines: Sequence[str]) -> list[str]:
        if len(lines) > 1 and lines[-1] == "":
            raise _reject(FailureKind.TRAILING_BLANK_LINE, messages.TRAILING_BLANK_LINE)
        if not lines or not lines[0]:
            raise _reject(FailureKind.EMPTY_OR_MISSING_CONTROL_LINE, messages.EMPTY_OR_MISSING_CONTROL_LINE)
        fields = lines[0].split("\t")
        expected = self._settings.expected_control_fields
        if len(fields) != expected:
            raise _reject(
                FailureKind.CONTROL_FIELD_COUNT_MISMATCH,
                messages.CONTROL_FIELD_COUNT_MISMATCH.format(expected=expected, found=len(fields)),
            )
        return fields

    def _parse_control_line(self, fields: Sequence[str], name: BalanceFileName) -> ControlLine:
        control_code, cut_off_date, raw_rows, raw_total = fields

        expected_code = name.control_prefix
        if control_code != expected_code:
            raise _reject(
                FailureKind.CONTROL_CODE_MISMATCH,
                messages.CONTROL_CODE_MISMATCH.format(found=control_code, expected=expected_code),
            )
        if self._settings.date_pattern.fullmatch(cut_off_date) is None:
            raise _reject(FailureKind.DATE_FORMAT_INVALID, messages.DATE_FORMAT_INVALID.format(found=cut_off_date))

        declared_rows = parse_int(raw_rows)
        declared_total = parse_decimal(raw_total)
        if declared_rows is None:
            raise _reject(FailureKind.NON_NUMERIC_DECLARED_ROWS, messages.NON_NUMERIC_DECLARED_ROWS.format(found=raw_rows))
        if declared_total is None:
            raise _reject(
                FailureKind.NON_NUMERIC_DECLARED_TOTAL, messages.NON_NUMERIC_DECLARED_TOTAL.format(found=raw_total)
            )
        return ControlLine(
            control_code=control_code,
            cut_off_date=cut_off_date,
            declared_rows=declared_rows,
            declared_total=declared_total,
            raw_rows=raw_rows,
            raw_total=raw_total,
        )

    @staticmethod
    def _useful_lines(lines: Sequence[str], declared_rows: int) -> list[str]:
        useful = [line for line in lines[1:] if line.strip()]
        if len(useful) != declared_rows:
            raise _reject(
                FailureKind.ROW_COUNT_MISMATCH,
                messages.ROW_COUNT_MISMATCH.format(found=len(useful), declared=declared_rows),
            )
        return useful

    @staticmethod
    def _parse_data_lines(useful_lines: Sequence[str]) -> list[DataLine]:
        parsed: list[DataLine] = []
        # Row 1 is the control line.
        for line_number, line in enumerate(useful_lines, start=2):
            if "\t" not in line:
                raise _reject(
                    FailureKind.MISSING_TAB_SEPARATOR,
                    messages.MISSING_TAB_SEPARATOR.format(line=line_number),
                    line_number=line_number,
                )
            parts = line.split("\t")
            if len(parts) < 2:
                raise _reject(
                    FailureKind.INSUFFICIENT_FIELDS,
                    messages.INSUFFICIENT_FIELDS.format(line=line_number),
                    line_number=line_number,
                )
            group_code = parse_int(parts[0])
            subtotal = parse_decimal(parts[1])
            if group_code is None or subtotal is None:
                raise _reject(
                    FailureKind.NON_NUMERIC_LINE_FIELDS,
                    messages.NON_NUMERIC_LINE_FIELDS.format(line=line_number),
                    line_number=line_number,
                )
            parsed.append(DataLine(line_number=line_number, group_code=group_code, subtotal=subtotal))
        return parsed

    def _reconcile(self, control: ControlLine, subtotals: GroupSubtotals) -> None:
        difference = subtotals.total - control.declared_total
        if abs(difference) <= self._settings.tolerance_abs:
            return
        details = {
            messages.LABEL_DECLARED_TOTAL: format_amount(control.declared_total),
            messages.LABEL_CALCULATED_TOTAL: format_amount(subtotals.total),
            messages.LABEL_DIFFERENCE: format_amount(difference),
        }
        for code, amount in subtotals.as_dict().items():
            details[messages.LABEL_GROUP_SUBTOTAL.format(code=code)] = format_amount(amount)
        raise _reject(FailureKind.TOTAL_RECONCILIATION_MISMATCH, messages.TOTAL_RECONCILIATION_MISMATCH, details=details)


_DEFAULT_VALIDATOR = BalanceFileValidator()


def validate(file_name: str, content: str) -> ValidationOutcome:
    """Validate one balance file given its name and full text content."""
    return _DEFAULT_VALIDATOR.validate(file_name, content)
