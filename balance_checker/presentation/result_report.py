"""Report renderers for balance file validation outcomes."""
from __future__ import annotations

import csv
import io
from html import escape

from balance_checker.application.dto import ValidationResponse
from balance_checker.domain import messages
from balance_checker.domain.results import ValidationFailure, ValidationOutcome


def outcome_title(outcome: ValidationOutcome) -> str:
    return messages.TITLE_APPROVED if outcome.passed else messages.TITLE_REJECTED


def details_to_rows(outcome: ValidationOutcome) -> list[dict[str, str]]:
    if not isinstance(outcome, ValidationFailure) or not outcome.details:
        return []
    return [{"field": label, "value": value} for label, value in outcome.details.items()]


def render_csv(outcome: ValidationOutcome) -> bytes:
    rows = details_to_rows(outcome)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()) if rows else [])
    if rows:
        writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def render_html(outcome: ValidationOutcome) -> str:
    html = f"<h3>{escape(outcome_title(outcome))}</h3><p>{escape(outcome.message)}</p>"
    rows = details_to_rows(outcome)
    if rows:
        items = "".join(
            f"<li><strong>{escape(row['field'])}:</strong> {escape(row['value'])}</li>" for row in rows
        )
        html += f"<ul>{items}</ul>"
    return html


def render_text(outcome: ValidationOutcome, file_name: str | None = None) -> str:
    title = outcome_title(outcome)
    header = f"{title}: {file_name}" if file_name else title
    lines = [header, "=" * len(header), outcome.message]
    for row in details_to_rows(outcome):
        lines.append(f"- {row['field']}: {row['value']}")
    return "\n".join(lines)


def outcome_to_dict(outcome: ValidationOutcome, file_name: str | None = None) -> dict[str, object]:
    payload: dict[str, object] = {
        "file_name": file_name,
        "passed": outcome.passed,
        "title": outcome_title(outcome),
        "message": outcome.message,
    }
    if isinstance(outcome, ValidationFailure):
        payload["kind"] = outcome.kind.value
        payload["line_number"] = outcome.line_number
        payload["details"] = dict(outcome.details) if outcome.details else None
    return payload


def response_to_dict(response: ValidationResponse) -> dict[str, object]:
    payload = outcome_to_dict(response.outcome, response.file_name)
    payload["validated_at"] = response.validated_at.isoformat()
    return payload
