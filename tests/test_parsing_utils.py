from decimal import Decimal
from io import BytesIO
from pathlib import Path

import pytest

from balance_checker.infrastructure.parsing.utils import (
    INT_CLAMP,
    ensure_text,
    format_amount,
    parse_decimal,
    parse_int,
    split_lines,
)


def test_split_lines_keeps_trailing_artifact():
    assert split_lines("a\nb\r\nc") == ["a", "b", "c"]
    assert split_lines("a\n") == ["a", ""]
    assert split_lines("") == [""]


def test_split_lines_ignores_lone_carriage_return():
    assert split_lines("a\rb\nc") == ["a\rb", "c"]


def test_parse_int_is_permissive():
    assert parse_int("12") == 12
    assert parse_int("  12abc") == 12
    assert parse_int("-3") == -3
    assert parse_int("+7") == 7
    assert parse_int("1.9") == 1


def test_parse_int_rejects_missing_prefix():
    for raw in ("", "   ", "abc", "-", "x12", ".5"):
        assert parse_int(raw) is None


def test_parse_decimal_is_permissive():
    assert parse_decimal("300.00") == Decimal("300.00")
    assert parse_decimal(" 12.5abc") == Decimal("12.5")
    assert parse_decimal(".5") == Decimal("0.5")
    assert parse_decimal("5.") == Decimal("5")
    assert parse_decimal("-1.25e2") == Decimal("-125")
    assert parse_decimal("3.5e1x") == Decimal("35")
    assert parse_decimal("7e") == Decimal("7")


def test_parse_decimal_rejects_non_numbers():
    for raw in ("", "abc", "Infinity", "NaN", "-", ".", "1e999"):
        assert parse_decimal(raw) is None


def test_format_amount_rounds_half_up_and_drops_negative_zero():
    assert format_amount(Decimal("50")) == "50.00"
    assert format_amount(Decimal("1.005")) == "1.01"
    assert format_amount(Decimal("-1.005")) == "-1.01"
    assert format_amount(Decimal("-0.001")) == "0.00"
    assert format_amount(Decimal("1e300")).endswith(".00")


def test_ensure_text_decodes_bytes_and_strips_bom(tmp_path: Path):
    raw = "\ufeffTVWXY\t20/01/2024".encode("utf-8")
    path = tmp_path / "file.txt"
    path.write_bytes(raw)

    assert ensure_text(raw) == "TVWXY\t20/01/2024"
    assert ensure_text(BytesIO(raw)) == "TVWXY\t20/01/2024"
    assert ensure_text(path) == "TVWXY\t20/01/2024"
    assert ensure_text("already text") == "already text"


def test_ensure_text_rejects_unknown_types():
    with pytest.raises(TypeError):
        ensure_text(123)  # type: ignore[arg-type]


def test_parse_int_clamps_very_long_digit_runs():
    assert parse_int("9" * 5000) == INT_CLAMP
    assert parse_int("-" + "9" * 5000 + "x") == -INT_CLAMP
    assert parse_int("0" * 5000 + "7") == 7


def test_parse_decimal_rejects_exponents_outside_decimal_range():
    assert parse_decimal("1e9999999999999999999") is None
    assert parse_decimal("-1e-9999999999999999999") is None
    assert parse_decimal("9" * 5000) is None
