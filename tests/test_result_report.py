import json
from datetime import datetime, timezone

from balance_checker import validate
from balance_checker.application.dto import ValidationResponse
from balance_checker.presentation.result_report import (
    details_to_rows,
    outcome_title,
    outcome_to_dict,
    render_csv,
    render_html,
    render_text,
    response_to_dict,
)

NAME = "TVWXYB120012024.txt"
APPROVED = validate(NAME, "TVWXY\t20/01/2024\t2\t300.00\n1\t100.00\n2\t200.00")
MISMATCH = validate(NAME, "TVWXY\t20/01/2024\t2\t250.00\n1\t100.00\n2\t200.00")
BAD_CODE = validate(NAME, "<b>X</b>\t20/01/2024\t2\t300.00\n1\t100.00\n2\t200.00")


def test_titles():
    assert outcome_title(APPROVED) == "File Approved"
    assert outcome_title(MISMATCH) == "File Rejected"


def test_details_rows_only_for_reconciliation():
    assert details_to_rows(APPROVED) == []
    assert details_to_rows(BAD_CODE) == []
    rows = details_to_rows(MISMATCH)
    assert rows[0] == {"field": "Declared total", "value": "250.00"}
    assert len(rows) == 8


def test_render_html_lists_details():
    html = render_html(MISMATCH)

    assert html.startswith("<h3>File Rejected</h3><p>")
    assert "<li><strong>Difference:</strong> 50.00</li>" in html
    assert "<ul>" not in render_html(APPROVED)


def test_render_html_escapes_file_content():
    html = render_html(BAD_CODE)

    assert "<b>" not in html
    assert "&lt;b&gt;X&lt;/b&gt;" in html


def test_render_csv():
    assert render_csv(APPROVED) == b""
    lines = render_csv(MISMATCH).decode("utf-8").splitlines()
    assert lines[0] == "field,value"
    assert lines[1] == "Declared total,250.00"


def test_render_text():
    text = render_text(MISMATCH, NAME)

    assert text.splitlines()[0] == f"File Rejected: {NAME}"
    assert "- Calculated total: 300.00" in text


def test_outcome_to_dict_is_json_serialisable():
    payload = outcome_to_dict(MISMATCH, NAME)

    assert payload["kind"] == "total_reconciliation_mismatch"
    assert payload["details"]["Difference"] == "50.00"
    json.dumps(payload)

    approved = outcome_to_dict(APPROVED)
    assert approved["passed"] is True
    assert "kind" not in approved


def test_response_to_dict_includes_timestamp():
    response = ValidationResponse(
        file_name=NAME,
        outcome=APPROVED,
        validated_at=datetime(2024, 1, 20, tzinfo=timezone.utc),
    )

    assert response_to_dict(response)["validated_at"] == "2024-01-20T00:00:00+00:00"
