"""Fixed message set shown to users for each validation outcome."""
from __future__ import annotations

NO_FILE_SELECTED = "Please select a file before validating."
NAME_FORMAT_INVALID = (
    "The file name does not follow the format 'TVWXYBZDDMMYYYY.txt' "
    "or the balance code (Z) is not between 1 and 4."
)
TRAILING_BLANK_LINE = "The file must not end with a blank line. The number of useful rows is not correct."
EMPTY_OR_MISSING_CONTROL_LINE = "The file is empty or the first line does not exist."
CONTROL_FIELD_COUNT_MISMATCH = "The first line must have {expected} tab-separated values. Found {found}."
CONTROL_CODE_MISMATCH = "The first value of the control line ('{found}') does not match the expected one ('{expected}')."
DATE_FORMAT_INVALID = "The cut-off date ('{found}') does not follow the DD/MM/YYYY format."
NON_NUMERIC_DECLARED_ROWS = "The declared number of rows ('{found}') is not a valid number."
NON_NUMERIC_DECLARED_TOTAL = "The declared monetary total ('{found}') is not a valid number."
ROW_COUNT_MISMATCH = (
    "The number of useful rows ({found}) does not match the number declared in the first line ({declared})."
)
MISSING_TAB_SEPARATOR = "Line {line} does not use tab as separator."
INSUFFICIENT_FIELDS = "Line {line} does not have the expected number of values."
NON_NUMERIC_LINE_FIELDS = "Line {line} contains non-numeric values for the group code or the subtotal."
TOTAL_RECONCILIATION_MISMATCH = (
    "The sum of the subtotals of the main groups does not match the monetary total of the first line."
)
APPROVED = "The file has been validated and meets all the established criteria."

TITLE_APPROVED = "File Approved"
TITLE_REJECTED = "File Rejected"

LABEL_DECLARED_TOTAL = "Declared total"
LABEL_CALCULATED_TOTAL = "Calculated total"
LABEL_DIFFERENCE = "Difference"
LABEL_GROUP_SUBTOTAL = "Group {code} subtotal"
