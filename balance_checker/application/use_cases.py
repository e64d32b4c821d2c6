"""Application services orchestrating the balance file validation workflow."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone

import structlog

from balance_checker.application.dto import ValidationResponse
from balance_checker.domain import messages
from balance_checker.domain.repositories import BalanceFileSource, ResultSink
from balance_checker.domain.results import FailureKind, ValidationFailure, ValidationOutcome
from balance_checker.domain.services import BalanceFileValidator

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class BalanceValidationContext:
    validator: BalanceFileValidator
    sink: ResultSink | None = None


class ValidateBalanceFileUseCase:
    def __init__(self, context: BalanceValidationContext) -> None:
        self._context = context

    def execute(self, source: BalanceFileSource | None) -> ValidationResponse:
        if source is None:
            return self._finish(None, ValidationFailure(kind=FailureKind.NO_FILE_SELECTED, message=messages.NO_FILE_SELECTED))
        content = source.read_text()
        logger.debug("balance_file_read", file_name=source.name, chars=len(content))
        return self._finish(source.name, self._context.validator.validate(source.name, content))

    async def execute_async(self, source: BalanceFileSource | None) -> ValidationResponse:
        """Same as :meth:`execute`, with the blocking read moved off the event loop."""
        if source is None:
            return self.execute(None)
        content = await asyncio.to_thread(source.read_text)
        logger.debug("balance_file_read", file_name=source.name, chars=len(content))
        return self._finish(source.name, self._context.validator.validate(source.name, content))

    def _finish(self, file_name: str | None, outcome: ValidationOutcome) -> ValidationResponse:
        sink = self._context.sink
        if sink is not None:
            if isinstance(outcome, ValidationFailure):
                sink.show_failure(outcome.message, outcome.details)
            else:
                sink.show_success(outcome.message)
        return ValidationResponse(
            file_name=file_name,
            outcome=outcome,
            validated_at=datetime.now(timezone.utc),
        )
