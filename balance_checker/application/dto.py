"""Application-level DTOs for balance file validation."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from balance_checker.domain.results import ValidationOutcome


@dataclass(slots=True, frozen=True)
class ValidationResponse:
    file_name: str | None
    outcome: ValidationOutcome
    validated_at: datetime

    @property
    def passed(self) -> bool:
        return self.outcome.passed
